"""Launcher event payloads published on the event bus."""

from __future__ import annotations

from dataclasses import dataclass

from launcher.app.zones import Zone
from navinput.api import Action


@dataclass(frozen=True, slots=True)
class FocusChanged:
    """Input ownership moved between zones."""

    previous: Zone
    current: Zone
    reason: str


@dataclass(frozen=True, slots=True)
class ActionRouted:
    """One logical action delivered to the owning zone."""

    zone: Zone
    action: Action
    channel: str


@dataclass(frozen=True, slots=True)
class LauncherIntent:
    """Request for a collaborator (launch, confirm, text submit)."""

    kind: str
    zone: Zone
    payload: str = ""


__all__ = ["ActionRouted", "FocusChanged", "LauncherIntent"]
