#!/usr/bin/env python3
"""
indexing-fmt Demo
=================

This script demonstrates how to:
1. Embed superscript and subscript indices in f-strings
2. Pick an explicit integer width
3. Stream glyphs into a sink and handle a full buffer

Usage:
    source .venv/bin/activate
    python examples/indexing_demo.py
"""

import io

from indexing_fmt import (
    BoundedSink,
    I8,
    SinkFullError,
    to_subscript,
    to_superscript,
)


def main():
    # ==========================================================================
    # 1. Inline formatting
    # ==========================================================================
    print(f"Ship{to_superscript(12)}")
    print(f"Docking-Bay{to_subscript(840)}")
    print(f"E = mc{to_superscript(2)}, H{to_subscript(2)}O, 10{to_superscript(-3)}")

    # ==========================================================================
    # 2. Explicit widths
    # ==========================================================================
    # The minimum of a signed width has no positive counterpart in that width,
    # it still renders normally.
    print(f"i8 minimum: {to_superscript(I8.min_value, I8)}")
    print(f"u64 maximum: {to_subscript(2 ** 64 - 1, 'u64')}")

    # ==========================================================================
    # 3. Sinks
    # ==========================================================================
    buf = io.StringIO()
    for index in range(1, 4):
        buf.write("x")
        to_subscript(index).write_to(buf)
        buf.write(" ")
    print(buf.getvalue().strip())

    small = BoundedSink(capacity=3)
    try:
        to_superscript(73287).write_to(small)
    except SinkFullError as e:
        print(f"Buffer full after {small.getvalue()!r}: {e}")


if __name__ == "__main__":
    main()
