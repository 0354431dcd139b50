"""double-int constants — the double-safe range and the standard integer widths.

An IEEE 754 double carries 52 explicit mantissa bits plus one implicit
leading bit, so every integer with magnitude below 2^53 round-trips exactly.
The range is kept symmetric so negation never leaves it.
"""

from __future__ import annotations

from typing import Dict, NamedTuple

# ── Double-safe range ────────────────────────────────────────
MIN: int = -(2**53) + 1
MAX: int = 2**53 - 1

# Unsigned comparisons only ever need the upper bound.
UMAX: int = 2**53 - 1

# Diagnostic text attached to OutOfRangeError.  Kept byte-identical with the
# other double-int implementations so error output can be diffed.
EXPECTED_ABOVE_MIN: str = "integer larger than -9007199254740991 / -(2^53) + 1"
EXPECTED_BELOW_MAX: str = "integer smaller than 9007199254740991 / (2^53) - 1"

# ── Signed 64-bit integer range ──────────────────────────────
# Python ints are arbitrary-precision, so "is this an i64 at all" has to be
# checked explicitly.  Anything outside is a type mismatch, not a range error.
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1


# ── Standard fixed-width integer types ───────────────────────

class IntWidth(NamedTuple):
    """A fixed-width integer type, e.g. ``IntWidth("u64", 64, False)``."""

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(2 ** (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return 2 ** (self.bits - 1) - 1 if self.signed else 2**self.bits - 1

    @property
    def narrow(self) -> bool:
        """True when every value of this width is already double-safe."""
        return MIN <= self.min and self.max <= MAX

    def fits(self, value: int) -> bool:
        return self.min <= value <= self.max


I8 = IntWidth("i8", 8, True)
I16 = IntWidth("i16", 16, True)
I32 = IntWidth("i32", 32, True)
I64 = IntWidth("i64", 64, True)
I128 = IntWidth("i128", 128, True)
U8 = IntWidth("u8", 8, False)
U16 = IntWidth("u16", 16, False)
U32 = IntWidth("u32", 32, False)
U64 = IntWidth("u64", 64, False)
U128 = IntWidth("u128", 128, False)

# Ordered narrowest-first within each signedness; eq_any() relies on this.
WIDTHS: Dict[str, IntWidth] = {
    w.name: w for w in (I8, I16, I32, I64, I128, U8, U16, U32, U64, U128)
}
