"""Single-owner focus routing over a base zone plus overlay stack."""

from __future__ import annotations

import logging
from collections.abc import Callable

from launcher.app.events import FocusChanged
from launcher.app.zones import Zone, is_overlay
from navinput.api import EventBus

logger = logging.getLogger(__name__)


class FocusRouter:
    """Decide which zone owns input.

    Exactly one zone owns input at any time: the topmost open overlay, or the
    base zone when no overlay is open. Consumers read ownership through
    :meth:`enabled_predicate`, so a change here takes effect on each consumer's
    next tick.
    """

    def __init__(self, initial: Zone = Zone.GRID, *, events: EventBus | None = None) -> None:
        if is_overlay(initial):
            raise ValueError(f"initial zone must be a base zone: {initial.value}")
        self._base = initial
        self._overlays: list[Zone] = []
        self._events = events

    @property
    def owner(self) -> Zone:
        if self._overlays:
            return self._overlays[-1]
        return self._base

    @property
    def base(self) -> Zone:
        return self._base

    def overlays(self) -> tuple[Zone, ...]:
        """Return bottom-first overlay snapshot."""
        return tuple(self._overlays)

    def is_owner(self, zone: Zone) -> bool:
        return self.owner is zone

    def enabled_predicate(self, zone: Zone) -> Callable[[], bool]:
        """Return a predicate that is true only while ``zone`` owns input."""
        return lambda: self.owner is zone

    def hand_off(self, zone: Zone) -> None:
        """Move base ownership to another non-overlay zone."""
        if is_overlay(zone):
            raise ValueError(f"cannot hand off to overlay zone: {zone.value}")
        if self._overlays:
            raise RuntimeError("cannot hand off base zone while an overlay is open")
        if zone is self._base:
            return
        previous = self.owner
        self._base = zone
        self._changed(previous, "hand_off")

    def open_overlay(self, zone: Zone) -> None:
        """Push an overlay zone; it owns input until closed."""
        if not is_overlay(zone):
            raise ValueError(f"not an overlay zone: {zone.value}")
        previous = self.owner
        self._overlays.append(zone)
        self._changed(previous, "open_overlay")

    def close_overlay(self) -> Zone:
        """Pop the topmost overlay and return it."""
        if not self._overlays:
            raise RuntimeError("no overlay is open")
        previous = self.owner
        closed = self._overlays.pop()
        self._changed(previous, "close_overlay")
        return closed

    def _changed(self, previous: Zone, reason: str) -> None:
        current = self.owner
        logger.debug(
            "focus_changed previous=%s current=%s reason=%s overlays=%d",
            previous.value,
            current.value,
            reason,
            len(self._overlays),
        )
        if self._events is not None:
            self._events.publish(FocusChanged(previous=previous, current=current, reason=reason))


__all__ = ["FocusRouter"]
