"""Shared result type for navigation models."""

from __future__ import annotations

from dataclasses import dataclass

from launcher.app.zones import Zone


@dataclass(frozen=True, slots=True)
class NavOutcome:
    """Outcome of routing one action into a navigation model."""

    handled: bool
    hand_off: Zone | None = None
    open_overlay: Zone | None = None
    close_overlay: bool = False
    intent: str | None = None
    payload: str = ""


IGNORED = NavOutcome(handled=False)
HANDLED = NavOutcome(handled=True)

__all__ = ["HANDLED", "IGNORED", "NavOutcome"]
