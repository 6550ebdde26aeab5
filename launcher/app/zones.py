"""Input ownership zones."""

from __future__ import annotations

from enum import Enum


class Zone(str, Enum):
    """UI surface that can own navigation input."""

    GRID = "grid"
    SIDE_PANEL = "side_panel"
    MODAL = "modal"
    DIALOG = "dialog"
    KEYBOARD = "keyboard"


BASE_ZONES: frozenset[Zone] = frozenset({Zone.GRID, Zone.SIDE_PANEL})
OVERLAY_ZONES: frozenset[Zone] = frozenset({Zone.MODAL, Zone.DIALOG, Zone.KEYBOARD})


def is_overlay(zone: Zone) -> bool:
    return zone in OVERLAY_ZONES


__all__ = ["BASE_ZONES", "OVERLAY_ZONES", "Zone", "is_overlay"]
