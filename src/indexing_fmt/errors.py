"""
indexing-fmt Error Hierarchy
============================

This module defines the exception hierarchy for the indexing-fmt package.
All exceptions inherit from IndexingFmtError, allowing callers to catch
every package error with a single except clause if desired.

Exception Hierarchy
-------------------
IndexingFmtError (base)
├── IntegerRangeError - value does not fit the requested integer type
└── SinkWriteError - the text sink rejected a glyph
    └── SinkFullError - a fixed-capacity sink ran out of room

Glyph lookup and digit extraction cannot fail for in-range values, so the
only runtime failure while rendering is a sink write failure. The original
sink error is kept as ``__cause__`` when the engine re-raises it.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from indexing_fmt.integers import IntType


# =============================================================================
# Base Exception Class
# =============================================================================

class IndexingFmtError(Exception):
    """
    Base exception for all indexing-fmt errors.

        try:
            print(f"x{to_superscript(value, 'u8')}")
        except IndexingFmtError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Value Exceptions
# =============================================================================

class IntegerRangeError(IndexingFmtError):
    """
    Value does not fit the requested integer type.

    Raised when wrapping or rendering a value outside the range of its
    fixed-width integer type, e.g. 256 as u8 or -1 as any unsigned type.

    Attributes:
        value: The rejected value
        int_type: The integer type it was checked against
    """

    def __init__(self, value: int, int_type: "IntType", message: str = ""):
        self.value = value
        self.int_type = int_type
        if not message:
            message = (
                f"{value} is out of range for {int_type.name} "
                f"({int_type.min_value}..{int_type.max_value})"
            )
        super().__init__(message)


# =============================================================================
# Sink Exceptions
# =============================================================================

class SinkWriteError(IndexingFmtError):
    """
    The text sink failed to accept a glyph.

    Rendering stops at the first failed write. Glyphs written before the
    failure stay in the sink; nothing is rolled back.

    Attributes:
        glyph: The glyph that could not be written (if known)
    """

    def __init__(self, message: str, glyph: Optional[str] = None):
        self.glyph = glyph
        super().__init__(message)


class SinkFullError(SinkWriteError):
    """
    A fixed-capacity sink has no room for another glyph.

    Attributes:
        capacity: Total capacity of the sink in characters
    """

    def __init__(self, capacity: int, glyph: Optional[str] = None, message: str = ""):
        self.capacity = capacity
        if not message:
            message = f"sink full: capacity of {capacity} characters exhausted"
        super().__init__(message, glyph)
