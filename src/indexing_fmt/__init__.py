"""
indexing-fmt - Integers as Unicode Superscripts and Subscripts
==============================================================

This package formats integers as Unicode superscript or subscript digits
for inline use in text: indices, exponents, footnote markers, chemical
formulas.

    >>> from indexing_fmt import to_superscript, to_subscript
    >>> f"Ship{to_superscript(12)}"
    'Ship¹²'
    >>> f"Docking-Bay{to_subscript(840)}"
    'Docking-Bay₈₄₀'

Main Components
---------------
- **formatting**: to_superscript / to_subscript and the Superscript /
  Subscript wrappers that render lazily when formatted
- **engine**: the digit-to-glyph algorithm, writing into any text sink
- **integers**: the supported fixed-width integer types (u8 .. isize)
- **glyphs**: the glyph tables and GlyphMode
- **sinks**: in-memory sinks, including a fixed-capacity one

Integer Types
-------------
Values are checked against a fixed-width integer type, either given
explicitly or inferred (isize for negatives, usize otherwise):

    >>> str(to_superscript(-128, "i8"))
    '⁻¹²⁸'
    >>> to_superscript(256, "u8")
    Traceback (most recent call last):
        ...
    indexing_fmt.errors.IntegerRangeError: 256 is out of range for u8 (0..255)

Streaming Into a Sink
---------------------
    >>> import io
    >>> buf = io.StringIO()
    >>> to_subscript(42).write_to(buf)
    >>> buf.getvalue()
    '₄₂'
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from indexing_fmt.errors import (
    IndexingFmtError,
    IntegerRangeError,
    SinkWriteError,
    SinkFullError,
)
from indexing_fmt.glyphs import (
    GlyphMode,
    SUPERSCRIPT_DIGITS,
    SUBSCRIPT_DIGITS,
    SUPERSCRIPT_MINUS,
    SUBSCRIPT_MINUS,
)
from indexing_fmt.integers import (
    IntType,
    U8, I8, U16, I16, U32, I32, U64, I64, USIZE, ISIZE,
    ALL_INT_TYPES,
    SIGNED_TYPES,
    UNSIGNED_TYPES,
    POINTER_BITS,
    get_int_type,
    infer_int_type,
)
from indexing_fmt.engine import (
    TextSink,
    digit_count,
    render,
    render_signed,
    render_unsigned,
    render_to_string,
)
from indexing_fmt.sinks import StringSink, BoundedSink
from indexing_fmt.formatting import (
    Superscript,
    Subscript,
    to_superscript,
    to_subscript,
    format_index,
)

__all__ = [
    "__version__",
    # Formatting
    "Superscript",
    "Subscript",
    "to_superscript",
    "to_subscript",
    "format_index",
    # Engine
    "TextSink",
    "digit_count",
    "render",
    "render_signed",
    "render_unsigned",
    "render_to_string",
    # Sinks
    "StringSink",
    "BoundedSink",
    # Glyphs
    "GlyphMode",
    "SUPERSCRIPT_DIGITS",
    "SUBSCRIPT_DIGITS",
    "SUPERSCRIPT_MINUS",
    "SUBSCRIPT_MINUS",
    # Integer types
    "IntType",
    "U8", "I8", "U16", "I16", "U32", "I32", "U64", "I64", "USIZE", "ISIZE",
    "ALL_INT_TYPES",
    "SIGNED_TYPES",
    "UNSIGNED_TYPES",
    "POINTER_BITS",
    "get_int_type",
    "infer_int_type",
    # Exceptions
    "IndexingFmtError",
    "IntegerRangeError",
    "SinkWriteError",
    "SinkFullError",
]
