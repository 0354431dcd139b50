"""double-int TOML adapter.

TOML keeps integers and floats apart in the grammar, so tomllib hands back
an int for `count = 42` and a float for `count = 4.2` or `count = 1.0`.
The same field contract as the JSON adapter applies:

    count = 42                  → DoubleInt(42)
    count = 36028797018963968   → ERR_OUT_OF_RANGE
    count = 4.2 / "42" / true   → ERR_TYPE_MISMATCH
"""

from __future__ import annotations

import logging
import tomllib
from typing import Any, Dict, Iterable, Union

from ._core import DoubleInt, describe_unexpected, deserialize, field_names
from ._errors import DecodeError, DoubleIntError, TypeMismatchError, with_field

logger = logging.getLogger(__name__)


def load_toml_fields(raw: Union[str, bytes], fields: Iterable[str]) -> Dict[str, Any]:
    """Decode a TOML document and convert the named top-level keys.

    Same contract as load_json_fields(): the whole table comes back with the
    named keys replaced by DoubleInts.
    """
    names = field_names(fields)
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError("invalid UTF-8 in TOML input") from e
    try:
        doc = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise DecodeError("TOML parse error: {}".format(e)) from e

    out = dict(doc)
    for name in names:
        if name not in doc:
            raise DecodeError("missing field `{}`".format(name), name)
        try:
            out[name] = from_toml_value(doc[name])
        except DoubleIntError as e:
            logger.debug("rejected TOML field %r [%s]: %s", name, e.code, e)
            raise with_field(e, name) from e
    return out


def from_toml_value(val: Any) -> DoubleInt:
    """Convert a single value already pulled out of a tomllib document."""
    if not isinstance(val, int) or isinstance(val, bool):
        raise TypeMismatchError(
            "invalid type: {}, expected i64".format(describe_unexpected(val)))
    return deserialize(val)
