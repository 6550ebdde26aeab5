"""Library grid navigation model."""

from __future__ import annotations

from dataclasses import dataclass

from launcher.app.zones import Zone
from launcher.ui.outcome import HANDLED, IGNORED, NavOutcome
from navinput.api import Action


def columns_for_width(container_width: float, item_width: float, gap: float = 0.0) -> int:
    """Return how many fixed-width items fit on one grid row (at least one)."""
    if item_width <= 0.0:
        raise ValueError("item_width must be > 0")
    stride = item_width + max(0.0, gap)
    return max(1, int((max(0.0, container_width) + max(0.0, gap)) // stride))


@dataclass(slots=True)
class GridNavigator:
    """Row-major selection over a grid of library items."""

    item_count: int
    columns: int = 1
    selected: int = 0
    page_rows: int = 3

    def __post_init__(self) -> None:
        self.item_count = max(0, self.item_count)
        self.columns = max(1, self.columns)
        self.page_rows = max(1, self.page_rows)
        self.selected = self._clamp(self.selected)

    @property
    def row(self) -> int:
        return self.selected // self.columns

    @property
    def column(self) -> int:
        return self.selected % self.columns

    @property
    def last_row(self) -> int:
        return max(0, self.item_count - 1) // self.columns

    def resize(self, columns: int) -> None:
        """Change column count (window resize) keeping the selected item."""
        self.columns = max(1, columns)

    def set_item_count(self, item_count: int) -> None:
        """Replace the item count (filter change) and clamp the selection."""
        self.item_count = max(0, item_count)
        self.selected = self._clamp(self.selected)

    def move(self, action: Action) -> NavOutcome:
        """Apply one action to the grid selection."""
        if action is Action.LEFT and self.column == 0:
            return NavOutcome(handled=True, hand_off=Zone.SIDE_PANEL)
        if self.item_count == 0:
            return IGNORED
        if action is Action.UP:
            if self.row > 0:
                self.selected -= self.columns
            return HANDLED
        if action is Action.DOWN:
            return self._down(rows=1)
        if action is Action.LEFT:
            self.selected -= 1
            return HANDLED
        if action is Action.RIGHT:
            if self.column < self.columns - 1 and self.selected + 1 < self.item_count:
                self.selected += 1
            return HANDLED
        if action is Action.LB:
            rows = min(self.page_rows, self.row)
            self.selected -= rows * self.columns
            return HANDLED
        if action is Action.RB:
            return self._down(rows=self.page_rows)
        if action is Action.A:
            return NavOutcome(
                handled=True,
                open_overlay=Zone.MODAL,
                intent="item_selected",
                payload=str(self.selected),
            )
        return IGNORED

    def _down(self, *, rows: int) -> NavOutcome:
        target_row = min(self.row + rows, self.last_row)
        if target_row != self.row:
            # Partial last row: land on its final item.
            self.selected = min(target_row * self.columns + self.column, self.item_count - 1)
        return HANDLED

    def _clamp(self, index: int) -> int:
        if self.item_count == 0:
            return 0
        return max(0, min(index, self.item_count - 1))


__all__ = ["GridNavigator", "columns_for_width"]
