"""Animation-frame style callback scheduler."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

FrameCallback = Callable[[float], None]


@dataclass(slots=True)
class _FrameRequest:
    request_id: int
    callback: FrameCallback
    cancelled: bool = False


class RuntimeFrameScheduler:
    """Per-frame one-shot callback queue.

    Callbacks requested while a frame is running are deferred to the next frame,
    so a callback that re-requests itself runs exactly once per frame.
    """

    def __init__(self) -> None:
        self._now_ms = 0.0
        self._frame_index = 0
        self._next_request_id = 1
        self._requests: dict[int, _FrameRequest] = {}

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def frame_index(self) -> int:
        return self._frame_index

    @property
    def pending_count(self) -> int:
        """Return count of active pending requests."""
        return sum(1 for request in self._requests.values() if not request.cancelled)

    def request_frame(self, callback: FrameCallback) -> int:
        """Run callback once on the next frame."""
        request_id = self._next_request_id
        self._next_request_id += 1
        self._requests[request_id] = _FrameRequest(request_id=request_id, callback=callback)
        return request_id

    def cancel_frame(self, request_id: int) -> None:
        """Cancel a pending request if it exists."""
        request = self._requests.get(request_id)
        if request is not None:
            request.cancelled = True

    def run_frame(self, now_ms: float) -> int:
        """Run callbacks requested before this frame; return executed count."""
        if now_ms < self._now_ms:
            raise ValueError("now_ms cannot move backwards")
        self._now_ms = now_ms
        self._frame_index += 1
        batch = tuple(self._requests.values())
        executed = 0
        for request in batch:
            self._requests.pop(request.request_id, None)
            if request.cancelled:
                continue
            request.callback(now_ms)
            executed += 1
        return executed


FrameScheduler = RuntimeFrameScheduler
