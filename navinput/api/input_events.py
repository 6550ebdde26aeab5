"""Public discrete input event types and keyboard channel contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from navinput.api.actions import Action
    from navinput.api.consumer import ActionHandler


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key event from a keyboard-style channel."""

    event_type: str
    value: str


class KeyChannel(Protocol):
    """Alternate input channel producing the same logical actions."""

    def handle(self, event: KeyEvent) -> Action | None:
        """Dispatch one key event."""

    def handle_all(self, events: Sequence[KeyEvent]) -> list[Action]:
        """Dispatch key events in order."""


def create_key_channel(handler: ActionHandler) -> KeyChannel:
    """Create default keyboard channel implementation."""
    from navinput.input.key_channel import KeyActionChannel

    return KeyActionChannel(handler)


def map_key_to_action(key_name: str) -> Action | None:
    """Map a backend key name to a logical action."""
    from navinput.input.key_channel import map_key_to_action as runtime_map_key_to_action

    return runtime_map_key_to_action(key_name)


__all__ = ["KeyChannel", "KeyEvent", "create_key_channel", "map_key_to_action"]
