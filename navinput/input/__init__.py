"""Dispatcher core: signal sampling, key tracking and consumers."""

from navinput.input.button_state import (
    ButtonState,
    Idle,
    Pressed,
    RepeatTiming,
    Repeating,
    SuppressedUntilRelease,
    TrackerStep,
    advance,
    is_held,
    should_repeat,
)
from navinput.input.consumer import GamepadConsumer
from navinput.input.key_channel import KeyActionChannel, map_key_to_action
from navinput.input.poller import ActionSignal, DevicePoller

__all__ = [
    "ActionSignal",
    "ButtonState",
    "DevicePoller",
    "GamepadConsumer",
    "Idle",
    "KeyActionChannel",
    "Pressed",
    "RepeatTiming",
    "Repeating",
    "SuppressedUntilRelease",
    "TrackerStep",
    "advance",
    "is_held",
    "map_key_to_action",
    "should_repeat",
]
