"""double-int error codes and exception classes.

Every failure is a DoubleIntError with a `.code`.  The concrete subclasses
also derive from the matching builtin (TypeError / ValueError) so callers
that don't know about this package still catch them naturally.

Precedence, highest first: a malformed document (ERR_DECODE) is reported
before a wrongly shaped value (ERR_TYPE_MISMATCH), which is reported before
a range violation (ERR_OUT_OF_RANGE).  Range validation never runs on a
value that failed the type check.
"""

from __future__ import annotations

from typing import Optional

ERR_DECODE: str = "ERR_DECODE"                # malformed document, missing field
ERR_TYPE_MISMATCH: str = "ERR_TYPE_MISMATCH"  # not an int64 (float, str, bool, ...)
ERR_OUT_OF_RANGE: str = "ERR_OUT_OF_RANGE"    # int64 outside [MIN, MAX]


class DoubleIntError(Exception):
    """Base exception for double-int failures.

    `.code` is one of the ERR_* strings above.  `.field` names the document
    field being decoded when the error came from a field loader, else None.
    """

    def __init__(self, code: str, msg: str = "", field: Optional[str] = None) -> None:
        super().__init__(msg or code)
        self.code = code
        self.field = field


class DecodeError(DoubleIntError, ValueError):
    def __init__(self, msg: str = "", field: Optional[str] = None) -> None:
        super().__init__(ERR_DECODE, msg, field)


class TypeMismatchError(DoubleIntError, TypeError):
    def __init__(self, msg: str = "", field: Optional[str] = None) -> None:
        super().__init__(ERR_TYPE_MISMATCH, msg, field)


class OutOfRangeError(DoubleIntError, ValueError):
    """A well-formed int64 that a double cannot hold exactly.

    `.value` is the rejected integer, `.expected` the range description.
    """

    def __init__(self, value: int, expected: str, field: Optional[str] = None) -> None:
        msg = "invalid value: integer `{}`, expected {}".format(value, expected)
        if field is not None:
            msg = "{}: {}".format(field, msg)
        super().__init__(ERR_OUT_OF_RANGE, msg, field)
        self.value = value
        self.expected = expected


def with_field(err: DoubleIntError, field: str) -> DoubleIntError:
    """Return a copy of `err` re-labelled with the field it was decoding."""
    if isinstance(err, OutOfRangeError):
        return OutOfRangeError(err.value, err.expected, field)
    msg = "{}: {}".format(field, err)
    if isinstance(err, TypeMismatchError):
        return TypeMismatchError(msg, field)
    if isinstance(err, DecodeError):
        return DecodeError(msg, field)
    return DoubleIntError(err.code, msg, field)
