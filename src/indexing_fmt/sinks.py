"""
Text Sinks
==========

Concrete destinations for rendered glyphs. The engine writes one glyph at a
time through ``write(text)``, so any text stream works as a sink; the two
classes here cover the common in-memory cases:

- StringSink: growable buffer, never fails
- BoundedSink: fixed capacity, fails with SinkFullError once full

Usage
-----
    sink = BoundedSink(capacity=4)
    render(73287, GlyphMode.SUPERSCRIPT, sink)   # raises SinkFullError
    sink.getvalue()                              # "⁷³²⁸"
"""

from indexing_fmt.errors import SinkFullError


class StringSink:
    """
    Growable in-memory text sink.

    Chunks are collected in a list and joined on demand.
    """

    def __init__(self):
        self._parts: list[str] = []
        self._length = 0

    def write(self, text: str) -> int:
        """Append text. Returns the number of characters written."""
        self._parts.append(text)
        self._length += len(text)
        return len(text)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)

    def clear(self) -> None:
        """Discard the buffered text."""
        self._parts.clear()
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.getvalue()

    def __repr__(self) -> str:
        return f"StringSink({self.getvalue()!r})"


class BoundedSink(StringSink):
    """
    Text sink with a fixed capacity in characters.

    Stands in for a fixed-size output buffer. A write that would exceed the
    capacity is rejected as a whole: the buffer keeps its previous contents
    and SinkFullError is raised.

    Attributes:
        capacity: Maximum number of characters the sink accepts
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        super().__init__()
        self.capacity = capacity

    @property
    def remaining(self) -> int:
        """Characters that can still be written."""
        return self.capacity - len(self)

    def write(self, text: str) -> int:
        """
        Append text if it fits.

        Raises:
            SinkFullError: If text does not fit in the remaining capacity.
        """
        if len(text) > self.remaining:
            raise SinkFullError(self.capacity, glyph=text)
        return super().write(text)

    def __repr__(self) -> str:
        return f"BoundedSink(capacity={self.capacity}, value={self.getvalue()!r})"
