"""Public per-frame callback scheduling contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    """Animation-frame style callback queue."""

    def request_frame(self, callback: FrameCallback) -> int:
        """Run callback once on the next frame; return a request id."""

    def cancel_frame(self, request_id: int) -> None:
        """Cancel a pending request if it exists."""


def create_frame_scheduler() -> FrameScheduler:
    """Create default frame scheduler implementation."""
    from navinput.runtime.scheduler import RuntimeFrameScheduler

    return RuntimeFrameScheduler()


__all__ = ["FrameCallback", "FrameScheduler", "create_frame_scheduler"]
