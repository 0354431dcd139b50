"""double-int JSON adapter.

JSON has a single number type, and a double-only consumer reads every
number token as a double.  A DoubleInt field therefore accepts exactly the
integer-shaped tokens whose value a double holds exactly:

    42                   → DoubleInt(42)
    -42                  → DoubleInt(-42)
    36028797018963968    → ERR_OUT_OF_RANGE   (2^55)
    9223372036854775808  → ERR_TYPE_MISMATCH  (not an i64 at all)
    4.2, 1.0, 1e3        → ERR_TYPE_MISMATCH  (fraction or exponent)
    "42", true, null     → ERR_TYPE_MISMATCH

json.loads() already decides float vs int at the token level: "1.0" comes
back as a float even though it is integral, so every float is rejected
without looking at its value.  NaN and Infinity are not JSON and fail as
ERR_DECODE, wherever they appear in the document.

An integer token too long for int() (sys.get_int_max_str_digits()) is still
well-formed JSON.  The parse_int hook turns it into an _OverlongInt sentinel
instead of failing the whole document, and a DoubleInt field holding one is
ERR_TYPE_MISMATCH like any other non-i64 integer.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, Union

from ._core import DoubleInt, describe_unexpected, deserialize, field_names, serialize
from ._errors import DecodeError, DoubleIntError, TypeMismatchError, with_field

logger = logging.getLogger(__name__)


class _OverlongInt:
    """Placeholder for an integer token past the int() digit limit."""
    __slots__ = ("token",)
    def __init__(self, token: str):
        self.token = token

    def __repr__(self) -> str:
        return "_OverlongInt({} digits)".format(len(self.token.lstrip("-")))


def _intercept_int(s: str) -> Any:
    """Called by json.loads for integer-shaped number tokens."""
    try:
        return int(s)
    except ValueError:
        return _OverlongInt(s)


def _reject_constant(name: str) -> Any:
    raise DecodeError("JSON constant not allowed: {}".format(name))


def _loads(raw: Union[str, bytes]) -> Any:
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError("invalid UTF-8 in JSON input") from e
    try:
        return json.loads(raw, parse_int=_intercept_int, parse_constant=_reject_constant)
    except DoubleIntError:
        raise
    except ValueError as e:
        raise DecodeError("JSON parse error: {}".format(e)) from e


def _to_double_int(obj: Any) -> DoubleInt:
    if isinstance(obj, _OverlongInt):
        raise TypeMismatchError(
            "invalid value: integer with {} digits, expected i64".format(
                len(obj.token.lstrip("-"))))
    if not isinstance(obj, int) or isinstance(obj, bool):
        raise TypeMismatchError(
            "invalid type: {}, expected i64".format(describe_unexpected(obj)))
    return deserialize(obj)


# ── Decode ────────────────────────────────────────────────────

def from_json(raw: Union[str, bytes]) -> DoubleInt:
    """Decode a JSON document whose root is a single integer."""
    try:
        return _to_double_int(_loads(raw))
    except DoubleIntError as e:
        logger.debug("rejected JSON double-int [%s]: %s", e.code, e)
        raise


def load_json_fields(raw: Union[str, bytes], fields: Iterable[str]) -> Dict[str, Any]:
    """Decode a JSON object and convert the named top-level fields.

    Returns the whole object with those fields replaced by DoubleInts.  A
    missing field is ERR_DECODE; a bad field value carries the field name
    in `.field` and in its message.  An integer token too long for int() in
    a field that is not converted stays an opaque placeholder.
    """
    names = field_names(fields)
    obj = _loads(raw)
    if not isinstance(obj, dict):
        raise DecodeError("invalid type: {}, expected a JSON object".format(
            describe_unexpected(obj)))

    out = dict(obj)
    for name in names:
        if name not in obj:
            raise DecodeError("missing field `{}`".format(name), name)
        try:
            out[name] = _to_double_int(obj[name])
        except DoubleIntError as e:
            logger.debug("rejected JSON field %r [%s]: %s", name, e.code, e)
            raise with_field(e, name) from e
    return out


# ── Encode ────────────────────────────────────────────────────

class DoubleIntJSONEncoder(json.JSONEncoder):
    """json.JSONEncoder that writes DoubleInt as a bare integer token."""

    def default(self, o: Any) -> Any:
        if isinstance(o, DoubleInt):
            return serialize(o)
        return super().default(o)


def to_json(value: DoubleInt) -> str:
    """Encode a DoubleInt as a JSON integer token."""
    return json.dumps(serialize(value))
