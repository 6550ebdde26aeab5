"""Game detail modal navigation model."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from launcher.app.zones import Zone
from launcher.ui.outcome import HANDLED, IGNORED, NavOutcome
from navinput.api import Action

DEFAULT_MODAL_BUTTONS = ("launch", "rename", "remove", "close")


@dataclass(slots=True)
class ModalState:
    """Horizontal button row inside the detail modal.

    Buttons listed in ``confirm_buttons`` open the confirmation dialog, buttons
    in ``text_buttons`` open the on-screen keyboard, and ``close_button`` closes
    the modal. Any other button is reported as a ``modal_button`` intent.
    """

    buttons: Sequence[str] = field(default=DEFAULT_MODAL_BUTTONS)
    focused: int = 0
    confirm_buttons: frozenset[str] = frozenset({"remove"})
    text_buttons: frozenset[str] = frozenset({"rename"})
    close_button: str = "close"

    def __post_init__(self) -> None:
        self.buttons = tuple(self.buttons)
        self.focused = max(0, min(self.focused, len(self.buttons) - 1))

    @property
    def focused_button(self) -> str | None:
        if not self.buttons:
            return None
        return self.buttons[self.focused]

    def reset(self) -> None:
        self.focused = 0

    def move(self, action: Action) -> NavOutcome:
        """Apply one action to the modal."""
        if action is Action.B:
            return NavOutcome(handled=True, close_overlay=True)
        if not self.buttons:
            return IGNORED
        if action is Action.LEFT:
            self.focused = max(0, self.focused - 1)
            return HANDLED
        if action is Action.RIGHT:
            self.focused = min(len(self.buttons) - 1, self.focused + 1)
            return HANDLED
        if action is Action.A:
            return self._press(self.buttons[self.focused])
        return IGNORED

    def _press(self, button: str) -> NavOutcome:
        if button == self.close_button:
            return NavOutcome(handled=True, close_overlay=True)
        if button in self.confirm_buttons:
            return NavOutcome(handled=True, open_overlay=Zone.DIALOG, payload=button)
        if button in self.text_buttons:
            return NavOutcome(handled=True, open_overlay=Zone.KEYBOARD, payload=button)
        return NavOutcome(handled=True, intent="modal_button", payload=button)


__all__ = ["DEFAULT_MODAL_BUTTONS", "ModalState"]
