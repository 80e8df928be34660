"""
Digit Glyph Tables
==================

Unicode superscript and subscript glyphs for the decimal digits 0-9 and the
minus sign. These are the leaves of the package: pure, immutable data.

Glyph Reference
---------------
| Digit | Superscript      | Subscript        |
|-------|------------------|------------------|
| 0     | ⁰ U+2070         | ₀ U+2080         |
| 1     | ¹ U+00B9         | ₁ U+2081         |
| 2     | ² U+00B2         | ₂ U+2082         |
| 3     | ³ U+00B3         | ₃ U+2083         |
| 4-9   | ⁴-⁹ U+2074-2079  | ₄-₉ U+2084-2089  |
| minus | ⁻ U+207B         | ₋ U+208B         |

Superscript 1, 2 and 3 live in the Latin-1 block, not next to the other
superscript digits, so the table cannot be computed from a single base
code point.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Glyph Constants
# =============================================================================

SUPERSCRIPT_DIGITS: Final[tuple[str, ...]] = (
    "⁰", "¹", "²", "³", "⁴",
    "⁵", "⁶", "⁷", "⁸", "⁹",
)

SUBSCRIPT_DIGITS: Final[tuple[str, ...]] = (
    "₀", "₁", "₂", "₃", "₄",
    "₅", "₆", "₇", "₈", "₉",
)

SUPERSCRIPT_MINUS: Final[str] = "⁻"
SUBSCRIPT_MINUS: Final[str] = "₋"


# =============================================================================
# Glyph Mode
# =============================================================================

class GlyphMode(Enum):
    """
    Target rendering mode: above or below the text baseline.

    Each mode owns one digit table and one minus glyph.
    """
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"

    @property
    def digits(self) -> tuple[str, ...]:
        """The 10-entry glyph table for this mode, indexed by digit."""
        if self is GlyphMode.SUPERSCRIPT:
            return SUPERSCRIPT_DIGITS
        return SUBSCRIPT_DIGITS

    @property
    def minus(self) -> str:
        """The sign glyph written before negative values."""
        if self is GlyphMode.SUPERSCRIPT:
            return SUPERSCRIPT_MINUS
        return SUBSCRIPT_MINUS

    def glyph(self, digit: int) -> str:
        """
        Look up the glyph for a single decimal digit.

        Args:
            digit: Digit value in [0, 9]

        Returns:
            One-character string.

        Raises:
            ValueError: If digit is outside [0, 9].
        """
        if not 0 <= digit <= 9:
            raise ValueError(f"digit must be in 0..9, got {digit}")
        return self.digits[digit]

    def __str__(self) -> str:
        return self.value
