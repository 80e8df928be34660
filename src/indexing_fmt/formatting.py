"""
Superscript and Subscript Formatting
====================================

Public entry points. ``to_superscript`` and ``to_subscript`` wrap an integer
in a small immutable value that renders itself as glyphs when it is turned
into text. Nothing is converted at wrap time; the engine runs when the
wrapper is formatted, printed, or written to a sink.

Usage
-----
    >>> f"Ship{to_superscript(12)}"
    'Ship¹²'
    >>> f"Docking-Bay{to_subscript(840)}"
    'Docking-Bay₈₄₀'
    >>> str(to_superscript(-128, "i8"))
    '⁻¹²⁸'

A format spec keeps only its fill, alignment and width, which apply to the
rendered glyphs. The numeric parts of the spec (sign, zero padding,
grouping, precision, type code) are ignored, since the glyphs already are
the number's text:

    >>> f"[{to_subscript(7):>3}]"
    '[  ₇]'
    >>> f"{to_superscript(5):+05d}"
    '⁵'
"""

import re
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

from indexing_fmt.engine import TextSink, render, render_to_string
from indexing_fmt.glyphs import GlyphMode
from indexing_fmt.integers import IntType, infer_int_type, resolve_int_type


# Standard format spec: [[fill]align][sign][z][#][0][width][grouping][.precision][type]
_FORMAT_SPEC_RE = re.compile(
    r"(?:(?P<fill>.)?(?P<align>[<>=^]))?"
    r"(?P<sign>[-+ ])?z?#?"
    r"(?P<zero>0)?"
    r"(?P<width>\d+)?"
    r"[,_]?"
    r"(?:\.\d+)?"
    r"[bcdeEfFgGnosxX%]?",
    re.DOTALL,
)


def _layout_spec(format_spec: str) -> str:
    """
    Reduce a format spec to the fill, alignment and width it requests.

    Zero padding without an explicit alignment would insert ASCII zeros,
    so its width is dropped. "=" (pad after the sign) becomes right
    alignment.

    Raises:
        ValueError: If format_spec is not a valid format spec.
    """
    match = _FORMAT_SPEC_RE.fullmatch(format_spec)
    if match is None:
        raise ValueError(f"Invalid format specifier '{format_spec}'")
    width = match.group("width")
    align = match.group("align")
    if not width or (match.group("zero") and not align):
        return ""
    if align == "=":
        align = ">"
    return f"{match.group('fill') or ''}{align or ''}{width}"


# =============================================================================
# Deferred Rendering Wrappers
# =============================================================================

@dataclass(frozen=True, repr=False)
class _IndexFormat:
    """
    An integer paired with a glyph mode, rendered on demand.

    The value is range-checked against int_type when the wrapper is built,
    so rendering can only fail in the sink.

    Attributes:
        value: The integer to render
        int_type: Its fixed-width type (inferred when omitted)
    """
    value: int
    int_type: Optional[IntType] = field(default=None)

    mode: ClassVar[GlyphMode]

    def __post_init__(self):
        int_type = (
            infer_int_type(self.value) if self.int_type is None
            else resolve_int_type(self.int_type)
        )
        object.__setattr__(self, "int_type", int_type)
        object.__setattr__(self, "value", int_type.check(self.value))

    def write_to(self, sink: TextSink) -> None:
        """
        Stream the glyphs into a sink.

        Raises:
            SinkWriteError: If the sink rejects a glyph. Glyphs written
                before the failure remain in the sink.
        """
        render(self.value, self.mode, sink, self.int_type)

    def __str__(self) -> str:
        return render_to_string(self.value, self.mode, self.int_type)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), _layout_spec(format_spec))

    def _compare_key(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return other.value

    def __lt__(self, other):
        key = self._compare_key(other)
        return key if key is NotImplemented else self.value < key

    def __le__(self, other):
        key = self._compare_key(other)
        return key if key is NotImplemented else self.value <= key

    def __gt__(self, other):
        key = self._compare_key(other)
        return key if key is NotImplemented else self.value > key

    def __ge__(self, other):
        key = self._compare_key(other)
        return key if key is NotImplemented else self.value >= key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value}, {self.int_type.name!r})"


@dataclass(frozen=True, repr=False)
class Superscript(_IndexFormat):
    """Integer rendered as superscript glyphs¹²³."""
    mode: ClassVar[GlyphMode] = GlyphMode.SUPERSCRIPT


@dataclass(frozen=True, repr=False)
class Subscript(_IndexFormat):
    """Integer rendered as subscript glyphs₁₂₃."""
    mode: ClassVar[GlyphMode] = GlyphMode.SUBSCRIPT


# =============================================================================
# Public Functions
# =============================================================================

def to_superscript(value, int_type: Union[IntType, str, None] = None) -> Superscript:
    """
    Wrap an integer for superscript rendering.

    Args:
        value: Integer to wrap (anything implementing __index__)
        int_type: IntType or type name such as "u8" or "i64". Defaults to
                  isize for negative values and usize otherwise.

    Raises:
        TypeError: If value is not an integer.
        IntegerRangeError: If value does not fit int_type.
    """
    return Superscript(value, int_type)


def to_subscript(value, int_type: Union[IntType, str, None] = None) -> Subscript:
    """Wrap an integer for subscript rendering. See to_superscript."""
    return Subscript(value, int_type)


def format_index(value, mode: GlyphMode, int_type: Union[IntType, str, None] = None) -> _IndexFormat:
    """Wrap an integer for the given mode."""
    if mode is GlyphMode.SUPERSCRIPT:
        return Superscript(value, int_type)
    return Subscript(value, int_type)
