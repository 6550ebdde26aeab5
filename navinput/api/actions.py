"""Public logical action set."""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """Logical UI action produced by the dispatcher."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    A = "a"
    B = "b"
    LB = "lb"
    RB = "rb"


DIRECTIONAL_ACTIONS: frozenset[Action] = frozenset(
    {Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT}
)


def parse_action(name: str) -> Action:
    """Resolve an action from its name."""
    normalized = str(name).strip().lower()
    try:
        return Action(normalized)
    except ValueError:
        raise ValueError(f"unknown action: {name!r}") from None


__all__ = ["DIRECTIONAL_ACTIONS", "Action", "parse_action"]
