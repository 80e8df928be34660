"""
indexing-fmt Test Configuration
===============================

Shared fixtures and reference helpers for the test suite.

The reference rendering uses ``str.translate`` over Python's own decimal
formatting, an implementation independent of the engine's digit loop.
"""

import pytest

from indexing_fmt.errors import SinkWriteError
from indexing_fmt.sinks import StringSink


_SUPERSCRIPT_TABLE = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")
_SUBSCRIPT_TABLE = str.maketrans("0123456789-", "₀₁₂₃₄₅₆₇₈₉₋")


def expected_superscript(value: int) -> str:
    """Reference superscript rendering of value."""
    return str(value).translate(_SUPERSCRIPT_TABLE)


def expected_subscript(value: int) -> str:
    """Reference subscript rendering of value."""
    return str(value).translate(_SUBSCRIPT_TABLE)


class FailingSink:
    """
    Sink that accepts a fixed number of writes and then raises.

    Records every accepted chunk so tests can inspect partial output.
    """

    def __init__(self, accept: int, error: Exception):
        self.accept = accept
        self.error = error
        self.written: list[str] = []
        self.calls = 0

    def write(self, text: str) -> int:
        self.calls += 1
        if len(self.written) >= self.accept:
            raise self.error
        self.written.append(text)
        return len(text)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sink() -> StringSink:
    """Fresh growable sink."""
    return StringSink()


@pytest.fixture
def os_failing_sink() -> FailingSink:
    """Sink that fails with OSError on the third write."""
    return FailingSink(accept=2, error=OSError(28, "No space left on device"))


@pytest.fixture
def rejecting_sink() -> FailingSink:
    """Sink that rejects the very first write with its own SinkWriteError."""
    return FailingSink(accept=0, error=SinkWriteError("rejected by sink"))
