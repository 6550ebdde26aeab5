"""On-screen character entry (virtual keyboard) navigation model."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from launcher.ui.outcome import HANDLED, IGNORED, NavOutcome
from navinput.api import Action

KEY_BACKSPACE = "⌫"
KEY_SPACE = "␣"
KEY_SUBMIT = "OK"

DEFAULT_KEY_ROWS: tuple[tuple[str, ...], ...] = (
    tuple("1234567890"),
    tuple("qwertyuiop"),
    tuple("asdfghjkl-"),
    tuple("zxcvbnm.,'"),
    (KEY_BACKSPACE, KEY_SPACE, KEY_SUBMIT),
)


@dataclass(slots=True)
class CharEntryState:
    """Cursor over a ragged key grid plus the text buffer being edited."""

    rows: Sequence[Sequence[str]] = field(default=DEFAULT_KEY_ROWS)
    buffer: str = ""
    row: int = 0
    col: int = 0
    max_len: int = 32
    target: str = ""

    def __post_init__(self) -> None:
        self.rows = tuple(tuple(keys) for keys in self.rows if len(keys) > 0)
        if not self.rows:
            raise ValueError("character entry needs at least one non-empty row")
        self.row = max(0, min(self.row, len(self.rows) - 1))
        self._clamp_col()

    @property
    def focused_key(self) -> str:
        return self.rows[self.row][self.col]

    def open(self, target: str, initial_value: str = "") -> None:
        """Start editing ``target`` with the cursor at the top-left key."""
        self.target = target
        self.buffer = initial_value[: self.max_len]
        self.row = 0
        self.col = 0

    def move(self, action: Action) -> NavOutcome:
        """Apply one action to the keyboard."""
        if action is Action.UP:
            self.row = (self.row - 1) % len(self.rows)
            self._clamp_col()
            return HANDLED
        if action is Action.DOWN:
            self.row = (self.row + 1) % len(self.rows)
            self._clamp_col()
            return HANDLED
        if action is Action.LEFT:
            self.col = (self.col - 1) % len(self.rows[self.row])
            return HANDLED
        if action is Action.RIGHT:
            self.col = (self.col + 1) % len(self.rows[self.row])
            return HANDLED
        if action is Action.A:
            return self._press(self.focused_key)
        if action is Action.B:
            if self.buffer:
                self.buffer = self.buffer[:-1]
                return HANDLED
            return NavOutcome(handled=True, close_overlay=True)
        if action is Action.LB:
            return self._press(KEY_BACKSPACE)
        if action is Action.RB:
            return self._press(KEY_SPACE)
        return IGNORED

    def _press(self, key: str) -> NavOutcome:
        if key == KEY_SUBMIT:
            return NavOutcome(
                handled=True,
                close_overlay=True,
                intent="text_submitted",
                payload=self.buffer,
            )
        if key == KEY_BACKSPACE:
            self.buffer = self.buffer[:-1]
            return HANDLED
        char = " " if key == KEY_SPACE else key
        if len(char) != 1 or not char.isprintable():
            return IGNORED
        if len(self.buffer) >= self.max_len:
            return HANDLED
        self.buffer += char
        return HANDLED

    def _clamp_col(self) -> None:
        self.col = max(0, min(self.col, len(self.rows[self.row]) - 1))


__all__ = [
    "DEFAULT_KEY_ROWS",
    "KEY_BACKSPACE",
    "KEY_SPACE",
    "KEY_SUBMIT",
    "CharEntryState",
]
