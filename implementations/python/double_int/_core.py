"""double-int core — the DoubleInt value type.

A DoubleInt wraps a signed 64-bit integer whose value is restricted to
[MIN, MAX], the integers an IEEE 754 double holds exactly.  There are two
ways in:

    DoubleInt.from_narrow(n, "u32")  — infallible for 8/16/32-bit widths
    DoubleInt(v) / try_from(v)        — validated against the int64 shape,
                                        then against the double-safe range

and one way out: as_int64() (or serialize()), which hands back the plain
integer.  The stored value never changes after construction.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable, List, Union

from ._constants import (
    EXPECTED_ABOVE_MIN,
    EXPECTED_BELOW_MAX,
    I64,
    INT64_MAX,
    INT64_MIN,
    MAX,
    MIN,
    UMAX,
    WIDTHS,
    IntWidth,
)
from ._errors import OutOfRangeError, TypeMismatchError

WidthLike = Union[IntWidth, str]


def width_for(width: WidthLike) -> IntWidth:
    """Resolve an IntWidth or a width name ("u64", "I32", ...)."""
    if isinstance(width, IntWidth):
        return width
    if isinstance(width, str):
        found = WIDTHS.get(width.lower())
        if found is not None:
            return found
    raise TypeMismatchError("unknown integer width: {!r}".format(width))


def describe_unexpected(obj: Any) -> str:
    """Describe a non-integer value the way decode errors report it."""
    # bool before int: isinstance(True, int) is True.
    if isinstance(obj, bool):
        return "boolean `{}`".format("true" if obj else "false")
    if isinstance(obj, int):
        return "integer `{}`".format(obj)
    if isinstance(obj, float):
        return "floating point `{!r}`".format(obj)
    if isinstance(obj, str):
        return "string {!r}".format(obj)
    if obj is None:
        return "null"
    if isinstance(obj, (list, tuple)):
        return "sequence"
    if isinstance(obj, dict):
        return "map"
    return type(obj).__name__


def field_names(fields: Iterable[str]) -> List[str]:
    """Materialize a field list for the format adapters, refusing a bare string."""
    if isinstance(fields, (str, bytes)):
        raise TypeError(
            "fields must be a collection of names, not {}; wrap it in a list".format(
                type(fields).__name__))
    return list(fields)


def _as_int(obj: Any) -> int:
    """Accept exactly the values a decoder could hand back as an integer."""
    if isinstance(obj, bool):
        raise TypeMismatchError(
            "invalid type: {}, expected i64".format(describe_unexpected(obj)))
    if isinstance(obj, int):
        return int(obj)
    # numpy and friends register their integer scalars as Integral.
    if isinstance(obj, numbers.Integral):
        return int(obj)
    raise TypeMismatchError(
        "invalid type: {}, expected i64".format(describe_unexpected(obj)))


def _as_i64(value: int) -> int:
    """Two's-complement wrap into 64 bits, i.e. Rust's `value as i64`."""
    return (value - INT64_MIN) % 2**64 + INT64_MIN


class DoubleInt:
    """An integer that survives a round-trip through an IEEE 754 double.

    >>> DoubleInt(42)
    DoubleInt(42)
    >>> DoubleInt(42) == 42
    True
    >>> DoubleInt(2**53)
    Traceback (most recent call last):
        ...
    double_int._errors.OutOfRangeError: invalid value: integer `9007199254740992`, expected integer smaller than 9007199254740991 / (2^53) - 1
    """

    __slots__ = ("_value",)

    def __new__(cls, value: Any = 0) -> "DoubleInt":
        # No __init__: re-running it on a live instance must not rebind _value.
        if isinstance(value, DoubleInt):
            val = value._value
        else:
            val = _as_int(value)
            # Not an i64 at all: that's the shape check failing, the range
            # check below never sees it.
            if val < INT64_MIN or val > INT64_MAX:
                raise TypeMismatchError(
                    "invalid value: integer `{}`, expected i64".format(val))
            if val < MIN:
                raise OutOfRangeError(val, EXPECTED_ABOVE_MIN)
            if val > MAX:
                raise OutOfRangeError(val, EXPECTED_BELOW_MAX)
        obj = super().__new__(cls)
        object.__setattr__(obj, "_value", val)
        return obj

    # ── Construction ──────────────────────────────────────────

    @classmethod
    def try_from(cls, value: Any) -> "DoubleInt":
        """Validate a signed 64-bit integer.

        Raises TypeMismatchError if `value` is not an int64 (bool, float,
        str, out-of-i64 int, ...) and OutOfRangeError if it is one but lies
        outside [MIN, MAX].
        """
        return cls(value)

    @classmethod
    def from_narrow(cls, value: int, width: WidthLike) -> "DoubleInt":
        """Widen an 8/16/32-bit integer.  Never fails for a value of that width.

        The width names the source type.  Wide widths are refused outright,
        they need try_from().
        """
        w = width_for(width)
        if not w.narrow:
            raise TypeMismatchError(
                "{} is not a narrow width, use try_from()".format(w.name))
        val = _as_int(value)
        if not w.fits(val):
            raise TypeMismatchError(
                "invalid value: integer `{}`, expected {}".format(val, w.name))
        obj = object.__new__(cls)
        object.__setattr__(obj, "_value", val)
        return obj

    # ── Accessors ─────────────────────────────────────────────

    def as_int64(self) -> int:
        """Return value as a standard type."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return "DoubleInt({})".format(self._value)

    def __str__(self) -> str:
        return str(self._value)

    # ── Equality ──────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DoubleInt):
            return self._value == other._value
        # A bool is not an integer here, the decoder rejects it too.
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, numbers.Integral):
            return self._value == int(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def equals(self, value: int, width: WidthLike) -> bool:
        """Compare against `value` interpreted as the fixed-width type `width`.

        Narrow widths and i64 are cast straight to the internal i64.  The
        wide widths (u64, u128, i128) can hold values a cast would wrap, so
        they are range-guarded first: anything outside the double-safe range
        can't be equal to us and never reaches the cast.
        """
        w = width_for(width)
        val = _as_int(value)
        if not w.fits(val):
            raise TypeMismatchError(
                "invalid value: integer `{}`, expected {}".format(val, w.name))

        if w.narrow or w == I64:
            return self._value == _as_i64(val)

        if w.signed:
            if val > MAX or val < MIN:
                return False
        elif val > UMAX:
            return False
        return self._value == _as_i64(val)

    def eq_any(self, value: int) -> bool:
        """Compare against an integer typed as the narrowest width that holds it.

        Non-negative values are typed unsigned, negative ones signed.
        """
        val = _as_int(value)
        for w in WIDTHS.values():
            if w.signed == (val < 0) and w.fits(val):
                return self.equals(val, w)
        raise TypeMismatchError(
            "invalid value: integer `{}`, no standard width holds it".format(val))

    # ── Immutability ──────────────────────────────────────────

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("DoubleInt is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("DoubleInt is immutable")

    def __copy__(self) -> "DoubleInt":
        return self

    def __deepcopy__(self, memo: dict) -> "DoubleInt":
        return self

    def __reduce__(self) -> tuple:
        # Unpickling goes back through __new__, so a tampered pickle can't
        # smuggle in an out-of-range value.
        return (DoubleInt, (self._value,))


# ── Native serialization boundary ─────────────────────────────
# Any decoder that produces native Python values (json, tomllib, msgpack,
# yaml, ...) ends up here.  The format adapters only add token-level checks
# that the native value has already lost, like 1.0 vs 1.

def deserialize(obj: Any) -> DoubleInt:
    """Build a DoubleInt from an already-decoded value."""
    if isinstance(obj, DoubleInt):
        return obj
    return DoubleInt(obj)


def serialize(value: DoubleInt) -> int:
    """Return the plain integer to hand to an encoder.  Always succeeds."""
    return value.as_int64()
