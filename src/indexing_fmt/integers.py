"""
Fixed-Width Integer Types
=========================

Python integers are unbounded, but the values this package renders are
meant to come from fixed-width machine integers. This module describes the
supported widths and the two operations the engine needs from them: a range
check and a widening absolute value.

Supported Types
---------------
| Name  | Bits | Range                                  |
|-------|------|----------------------------------------|
| u8    | 8    | 0 to 255                               |
| i8    | 8    | -128 to 127                            |
| u16   | 16   | 0 to 65535                             |
| i16   | 16   | -32768 to 32767                        |
| u32   | 32   | 0 to 4294967295                        |
| i32   | 32   | -2147483648 to 2147483647              |
| u64   | 64   | 0 to 18446744073709551615              |
| i64   | 64   | -9223372036854775808 to ...807         |
| usize | host | pointer-sized unsigned                 |
| isize | host | pointer-sized signed                   |

Widening Absolute Value
-----------------------
The minimum value of a signed type has no positive counterpart in the same
width (-128 as i8 has no +128). ``unsigned_abs`` returns the magnitude as a
value of the same-width unsigned type instead, where it always fits.
"""

import operator
import struct
from dataclasses import dataclass
from typing import Final

from indexing_fmt.errors import IntegerRangeError


# Host pointer width in bits (64 on all mainstream platforms)
POINTER_BITS: Final[int] = struct.calcsize("P") * 8


# =============================================================================
# Type Representation
# =============================================================================

@dataclass(frozen=True)
class IntType:
    """
    A fixed-width integer type.

    Attributes:
        name: Short type name ("u8", "i64", "usize", ...)
        bits: Width in bits
        signed: True for two's-complement signed types

    Examples:
        >>> I8.min_value, I8.max_value
        (-128, 127)
        >>> I8.unsigned_abs(-128)
        128
    """
    name: str
    bits: int
    signed: bool

    def __post_init__(self):
        """Validate the width."""
        if self.bits <= 0 or self.bits % 8 != 0:
            raise ValueError(f"integer width must be a positive multiple of 8, got {self.bits}")

    @property
    def min_value(self) -> int:
        """Smallest representable value."""
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Largest representable value."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def unsigned(self) -> "IntType":
        """The unsigned type of the same width (self if already unsigned)."""
        if not self.signed:
            return self
        return _UNSIGNED_COUNTERPARTS[self.name]

    def contains(self, value: int) -> bool:
        """Return True if value lies within this type's range."""
        return self.min_value <= value <= self.max_value

    def check(self, value) -> int:
        """
        Validate a value against this type and return it as a plain int.

        Any object implementing ``__index__`` is accepted; bool is not,
        since it is a truth value rather than a number to display.

        Raises:
            TypeError: If value is not an integer.
            IntegerRangeError: If value does not fit this type.
        """
        if isinstance(value, bool):
            raise TypeError("bool is not a supported integer value")
        value = operator.index(value)
        if not self.contains(value):
            raise IntegerRangeError(value, self)
        return value

    def unsigned_abs(self, value: int) -> int:
        """
        Absolute value of an in-range value, as the unsigned counterpart.

        Never overflows: the magnitude of min_value always fits the
        unsigned type of the same width.
        """
        value = self.check(value)
        return -value if value < 0 else value

    def __str__(self) -> str:
        return self.name


# =============================================================================
# Supported Types
# =============================================================================

U8: Final[IntType] = IntType("u8", 8, False)
I8: Final[IntType] = IntType("i8", 8, True)
U16: Final[IntType] = IntType("u16", 16, False)
I16: Final[IntType] = IntType("i16", 16, True)
U32: Final[IntType] = IntType("u32", 32, False)
I32: Final[IntType] = IntType("i32", 32, True)
U64: Final[IntType] = IntType("u64", 64, False)
I64: Final[IntType] = IntType("i64", 64, True)
USIZE: Final[IntType] = IntType("usize", POINTER_BITS, False)
ISIZE: Final[IntType] = IntType("isize", POINTER_BITS, True)

# (unsigned, signed) pairs sharing one width
INT_TYPE_PAIRS: Final[tuple[tuple[IntType, IntType], ...]] = (
    (USIZE, ISIZE),
    (U64, I64),
    (U32, I32),
    (U16, I16),
    (U8, I8),
)

UNSIGNED_TYPES: Final[tuple[IntType, ...]] = tuple(u for u, _ in INT_TYPE_PAIRS)
SIGNED_TYPES: Final[tuple[IntType, ...]] = tuple(s for _, s in INT_TYPE_PAIRS)
ALL_INT_TYPES: Final[tuple[IntType, ...]] = UNSIGNED_TYPES + SIGNED_TYPES

_UNSIGNED_COUNTERPARTS: Final[dict[str, IntType]] = {
    s.name: u for u, s in INT_TYPE_PAIRS
}

_TYPES_BY_NAME: Final[dict[str, IntType]] = {t.name: t for t in ALL_INT_TYPES}


# =============================================================================
# Lookup Functions
# =============================================================================

def get_int_type(name: str) -> IntType:
    """
    Look up a supported integer type by name (case-insensitive).

    Raises:
        KeyError: If name is not a supported type.
    """
    try:
        return _TYPES_BY_NAME[name.lower()]
    except KeyError:
        valid = ", ".join(_TYPES_BY_NAME)
        raise KeyError(f"unknown integer type {name!r} (expected one of: {valid})") from None


def resolve_int_type(int_type) -> IntType:
    """Accept an IntType or a type name and return the IntType."""
    if isinstance(int_type, IntType):
        return int_type
    if isinstance(int_type, str):
        return get_int_type(int_type)
    raise TypeError(f"expected IntType or type name, got {type(int_type).__name__}")


def infer_int_type(value) -> IntType:
    """
    Pick the default type for a value given without an explicit type.

    Negative values are treated as isize, everything else as usize.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a supported integer value")
    return ISIZE if operator.index(value) < 0 else USIZE
