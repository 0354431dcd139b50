"""double_int — integers that survive a round-trip through an IEEE 754 double.

Declare `format: double-int` style fields for JSON, TOML or any format whose
consumers may decode integers as doubles.  A DoubleInt only ever holds a
value in [-(2^53)+1, (2^53)-1].

Quick start:
    >>> from double_int import DoubleInt, from_json, load_json_fields
    >>> from_json("42")
    DoubleInt(42)
    >>> load_json_fields('{"count": -42}', ["count"])["count"] == -42
    True

Values outside the range are rejected, never clamped:
    >>> from_json("36028797018963968")
    Traceback (most recent call last):
        ...
    double_int._errors.OutOfRangeError: invalid value: integer `36028797018963968`, expected integer smaller than 9007199254740991 / (2^53) - 1
"""

from __future__ import annotations

from ._constants import (
    I8,
    I16,
    I32,
    I64,
    I128,
    INT64_MAX,
    INT64_MIN,
    MAX,
    MIN,
    U8,
    U16,
    U32,
    U64,
    U128,
    UMAX,
    WIDTHS,
    IntWidth,
)
from ._core import DoubleInt, deserialize, serialize, width_for
from ._errors import (
    ERR_DECODE,
    ERR_OUT_OF_RANGE,
    ERR_TYPE_MISMATCH,
    DecodeError,
    DoubleIntError,
    OutOfRangeError,
    TypeMismatchError,
)
from ._json_adapter import (
    DoubleIntJSONEncoder,
    from_json,
    load_json_fields,
    to_json,
)
from ._toml_adapter import from_toml_value, load_toml_fields

__version__ = "0.1.0"

__all__ = [
    # Value type
    "DoubleInt",
    "deserialize",
    "serialize",
    # Range constants
    "MIN",
    "MAX",
    "UMAX",
    "INT64_MIN",
    "INT64_MAX",
    # Integer widths
    "IntWidth",
    "WIDTHS",
    "width_for",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    # Format adapters
    "from_json",
    "to_json",
    "load_json_fields",
    "DoubleIntJSONEncoder",
    "load_toml_fields",
    "from_toml_value",
    # Exceptions
    "DoubleIntError",
    "DecodeError",
    "TypeMismatchError",
    "OutOfRangeError",
    # Error codes
    "ERR_DECODE",
    "ERR_TYPE_MISMATCH",
    "ERR_OUT_OF_RANGE",
]
