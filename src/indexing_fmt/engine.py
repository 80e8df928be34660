"""
Glyph Conversion Engine
=======================

Renders the decimal digits of an integer as superscript or subscript glyphs
into a text sink.

Algorithm
---------
1. Signed type and negative value: write the mode's minus glyph, then
   continue with the widening absolute value (see IntType.unsigned_abs).
2. Magnitude 0: write the digit-0 glyph and stop. Zero is handled before
   the digit count is taken, so the count is only ever computed for
   positive magnitudes.
3. Otherwise, for each power of ten from the highest down to 10**0:
   write glyph[magnitude // divisor], then magnitude %= divisor.

The same code path serves every supported width and both modes; the width
only decides the valid range and whether a sign is possible.

Sink Contract
-------------
A sink is any object with ``write(text: str)``. Each glyph is written with
its own call. A sink reports failure by raising; OSError and ValueError
(e.g. a closed stream) are re-raised as SinkWriteError with the original
exception chained. Rendering stops at the first failure and glyphs already
written are left in place.

Usage
-----
    from indexing_fmt.engine import render, render_to_string
    from indexing_fmt.glyphs import GlyphMode

    render_to_string(-42, GlyphMode.SUPERSCRIPT)        # "⁻⁴²"

    buf = io.StringIO()
    render(840, GlyphMode.SUBSCRIPT, buf, int_type="u16")
    buf.getvalue()                                       # "₈₄₀"
"""

import logging
from typing import Optional, Protocol, Union

from indexing_fmt.errors import SinkWriteError
from indexing_fmt.glyphs import GlyphMode
from indexing_fmt.integers import IntType, infer_int_type, resolve_int_type
from indexing_fmt.sinks import StringSink

logger = logging.getLogger(__name__)


class TextSink(Protocol):
    """Anything that accepts text one chunk at a time and may fail."""

    def write(self, text: str) -> object:
        ...


# =============================================================================
# Helpers
# =============================================================================

def digit_count(magnitude: int) -> int:
    """
    Number of decimal digits in a non-negative integer (1 for zero).

    Uses integer arithmetic only; float log10 loses precision near the
    top of the 64-bit range.

    Example:
        >>> digit_count(0), digit_count(9), digit_count(10), digit_count(73287)
        (1, 1, 2, 5)
    """
    if magnitude < 0:
        raise ValueError(f"digit_count requires a non-negative value, got {magnitude}")
    count = 1
    while magnitude >= 10:
        magnitude //= 10
        count += 1
    return count


def _write_glyph(sink: TextSink, glyph: str) -> None:
    try:
        sink.write(glyph)
    except SinkWriteError as e:
        logger.debug(f"Sink rejected glyph {glyph!r}: {e}")
        raise
    except (OSError, ValueError) as e:
        logger.debug(f"Sink write failed for glyph {glyph!r}: {e}")
        raise SinkWriteError(f"failed to write glyph {glyph!r}: {e}", glyph=glyph) from e


# =============================================================================
# Rendering
# =============================================================================

def render_unsigned(magnitude: int, mode: GlyphMode, sink: TextSink) -> None:
    """
    Write the glyphs for a non-negative magnitude, most significant first.

    Args:
        magnitude: Non-negative integer
        mode: Glyph table to use
        sink: Destination for the glyphs

    Raises:
        SinkWriteError: If the sink rejects a glyph.
    """
    if magnitude < 0:
        raise ValueError(f"magnitude must be non-negative, got {magnitude}")
    table = mode.digits

    if magnitude == 0:
        _write_glyph(sink, table[0])
        return

    max_exponent = digit_count(magnitude) - 1
    for exponent in range(max_exponent, -1, -1):
        divisor = 10 ** exponent
        digit = magnitude // divisor
        _write_glyph(sink, table[digit])
        magnitude %= divisor


def render_signed(value: int, int_type: IntType, mode: GlyphMode, sink: TextSink) -> None:
    """
    Write the sign glyph for negative values, then the magnitude.

    The magnitude comes from int_type.unsigned_abs, so the minimum value of
    the type renders like any other.
    """
    if value < 0:
        _write_glyph(sink, mode.minus)
    render_unsigned(int_type.unsigned_abs(value), mode, sink)


def render(
    value,
    mode: GlyphMode,
    sink: TextSink,
    int_type: Union[IntType, str, None] = None,
) -> None:
    """
    Render an integer as glyphs of the given mode into a sink.

    Args:
        value: Integer to render (anything implementing __index__)
        mode: GlyphMode.SUPERSCRIPT or GlyphMode.SUBSCRIPT
        sink: Destination with a write(text) method
        int_type: Integer type (IntType or name). Defaults to isize for
                  negative values and usize otherwise.

    Raises:
        TypeError: If value is not an integer.
        IntegerRangeError: If value does not fit int_type.
        SinkWriteError: If the sink rejects a glyph.
    """
    resolved = infer_int_type(value) if int_type is None else resolve_int_type(int_type)
    value = resolved.check(value)

    if resolved.signed:
        render_signed(value, resolved, mode, sink)
    else:
        render_unsigned(value, mode, sink)


def render_to_string(
    value,
    mode: GlyphMode,
    int_type: Optional[Union[IntType, str]] = None,
) -> str:
    """Render into a fresh StringSink and return the text."""
    sink = StringSink()
    render(value, mode, sink, int_type)
    return sink.getvalue()
