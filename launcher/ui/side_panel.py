"""Side panel (platform filters) navigation model."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from launcher.app.zones import Zone
from launcher.ui.outcome import HANDLED, IGNORED, NavOutcome
from navinput.api import Action

DEFAULT_PANEL_ENTRIES = ("all", "steam", "custom")


@dataclass(slots=True)
class SidePanel:
    """Vertical list of filter entries beside the grid."""

    entries: Sequence[str] = field(default=DEFAULT_PANEL_ENTRIES)
    selected: int = 0
    active: str | None = None

    def __post_init__(self) -> None:
        self.entries = tuple(self.entries)
        self.selected = max(0, min(self.selected, len(self.entries) - 1))

    @property
    def focused_entry(self) -> str | None:
        if not self.entries:
            return None
        return self.entries[self.selected]

    def move(self, action: Action) -> NavOutcome:
        """Apply one action to the panel selection."""
        if action in (Action.RIGHT, Action.B):
            return NavOutcome(handled=True, hand_off=Zone.GRID)
        if not self.entries:
            return IGNORED
        if action is Action.UP:
            self.selected = max(0, self.selected - 1)
            return HANDLED
        if action is Action.DOWN:
            self.selected = min(len(self.entries) - 1, self.selected + 1)
            return HANDLED
        if action is Action.A:
            self.active = self.entries[self.selected]
            return NavOutcome(handled=True, intent="filter_selected", payload=self.active)
        return IGNORED


__all__ = ["DEFAULT_PANEL_ENTRIES", "SidePanel"]
