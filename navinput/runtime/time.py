"""Runtime timing primitives."""

from __future__ import annotations

from collections.abc import Callable
from time import monotonic


def monotonic_ms() -> float:
    """Return the monotonic clock in milliseconds."""
    return monotonic() * 1000.0


class MillisecondClock:
    """Non-decreasing millisecond clock used to stamp frames."""

    def __init__(self, *, time_source: Callable[[], float] | None = None) -> None:
        self._time_source = time_source or monotonic
        self._last_ms: float | None = None

    def now_ms(self) -> float:
        """Return current time in ms, clamped so frames never go backwards."""
        value = float(self._time_source()) * 1000.0
        if self._last_ms is not None and value < self._last_ms:
            value = self._last_ms
        self._last_ms = value
        return value
