"""Yes/no confirmation dialog navigation model."""

from __future__ import annotations

from dataclasses import dataclass

from launcher.ui.outcome import HANDLED, IGNORED, NavOutcome
from navinput.api import Action

CONFIRM_CHOICES = ("yes", "no")


@dataclass(slots=True)
class ConfirmDialogState:
    """Two-choice dialog; focus starts on ``no``."""

    subject: str = ""
    focused: int = 1

    @property
    def choice(self) -> str:
        return CONFIRM_CHOICES[self.focused]

    def open(self, subject: str) -> None:
        self.subject = subject
        self.focused = 1

    def move(self, action: Action) -> NavOutcome:
        """Apply one action to the dialog."""
        if action in (Action.LEFT, Action.RIGHT):
            self.focused = 1 - self.focused
            return HANDLED
        if action is Action.A:
            return self._resolve(self.choice)
        if action is Action.B:
            return self._resolve("cancel")
        return IGNORED

    def _resolve(self, result: str) -> NavOutcome:
        payload = f"{self.subject}:{result}" if self.subject else result
        return NavOutcome(
            handled=True,
            close_overlay=True,
            intent="confirm_dialog",
            payload=payload,
        )


__all__ = ["CONFIRM_CHOICES", "ConfirmDialogState"]
