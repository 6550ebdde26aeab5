"""Navinput runtime modules."""

from navinput.runtime.config import load_navinput_config, normalize_device_backend
from navinput.runtime.events import EventBus
from navinput.runtime.logging import setup_logging
from navinput.runtime.scheduler import FrameScheduler
from navinput.runtime.time import MillisecondClock, monotonic_ms

__all__ = [
    "EventBus",
    "FrameScheduler",
    "MillisecondClock",
    "load_navinput_config",
    "monotonic_ms",
    "normalize_device_backend",
    "setup_logging",
]
