"""Keyboard-style alternate channel producing the same logical actions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from navinput.api.actions import Action
from navinput.api.consumer import ActionHandler
from navinput.api.input_events import KeyEvent

logger = logging.getLogger(__name__)

_KEY_ACTIONS: dict[str, Action] = {
    "arrowup": Action.UP,
    "up": Action.UP,
    "w": Action.UP,
    "arrowdown": Action.DOWN,
    "down": Action.DOWN,
    "s": Action.DOWN,
    "arrowleft": Action.LEFT,
    "left": Action.LEFT,
    "a": Action.LEFT,
    "arrowright": Action.RIGHT,
    "right": Action.RIGHT,
    "d": Action.RIGHT,
    "enter": Action.A,
    "return": Action.A,
    "space": Action.A,
    "escape": Action.B,
    "esc": Action.B,
    "backspace": Action.B,
    "q": Action.LB,
    "pageup": Action.LB,
    "e": Action.RB,
    "pagedown": Action.RB,
}


def map_key_to_action(key_name: str) -> Action | None:
    """Normalize a backend key name to a logical action."""
    if key_name == " ":
        return Action.A
    normalized = key_name.strip().lower()
    return _KEY_ACTIONS.get(normalized)


class KeyActionChannel:
    """Forward mapped key-down events to an action handler.

    Key repeat is left to the platform: every ``key_down`` (including OS
    auto-repeat) maps to one action.
    """

    def __init__(self, handler: ActionHandler) -> None:
        self._handler = handler

    def handle(self, event: KeyEvent) -> Action | None:
        """Dispatch one key event; return the action it produced, if any."""
        if event.event_type != "key_down":
            return None
        action = map_key_to_action(event.value)
        if action is None:
            logger.debug("key_unmapped value=%r", event.value)
            return None
        self._handler(action)
        return action

    def handle_all(self, events: Sequence[KeyEvent]) -> list[Action]:
        """Dispatch a batch of key events in order."""
        produced: list[Action] = []
        for event in events:
            action = self.handle(event)
            if action is not None:
                produced.append(action)
        return produced


__all__ = ["KeyActionChannel", "map_key_to_action"]
