"""Physical-to-logical controller profile contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from navinput.api.actions import Action, parse_action


@dataclass(frozen=True, slots=True)
class AxisMap:
    """Left-stick axis indices."""

    x: int = 0
    y: int = 1


@dataclass(frozen=True, slots=True)
class GamepadProfile:
    """Button-index to action table plus stick axes and activation threshold.

    The button table does not need to be total or injective: several physical
    buttons may drive the same action, and unmapped buttons are ignored.
    """

    buttons: Mapping[int, Action]
    axes: AxisMap = field(default_factory=AxisMap)
    threshold: float = 0.5

    def __post_init__(self) -> None:
        # Read-only view over a private copy.
        object.__setattr__(self, "buttons", MappingProxyType(dict(self.buttons)))

    def actions(self) -> tuple[Action, ...]:
        """Return tracked actions in first-seen table order."""
        seen: dict[Action, None] = {}
        for action in self.buttons.values():
            seen.setdefault(action, None)
        return tuple(seen)

    def button_indices_for(self, action: Action) -> tuple[int, ...]:
        """Return every physical button index mapped to an action."""
        return tuple(index for index, mapped in self.buttons.items() if mapped is action)


# W3C "standard" gamepad layout; matches Xbox One/Series and PS4/PS5 pads.
STANDARD_PROFILE = GamepadProfile(
    buttons={
        0: Action.A,  # Xbox A / PS Cross
        1: Action.B,  # Xbox B / PS Circle
        4: Action.LB,
        5: Action.RB,
        12: Action.UP,
        13: Action.DOWN,
        14: Action.LEFT,
        15: Action.RIGHT,
    },
    axes=AxisMap(x=0, y=1),
    threshold=0.5,
)


def profile_from_mapping(raw: Mapping[str, object]) -> GamepadProfile:
    """Build a profile from a plain mapping (e.g. parsed JSON)."""
    raw_buttons = raw.get("buttons")
    if raw_buttons is None:
        buttons: dict[int, Action] = dict(STANDARD_PROFILE.buttons)
    elif isinstance(raw_buttons, Mapping):
        buttons = {int(index): parse_action(str(name)) for index, name in raw_buttons.items()}
    else:
        raise ValueError("buttons must be a mapping of button index to action name")

    raw_axes = raw.get("axes")
    axes = STANDARD_PROFILE.axes
    if isinstance(raw_axes, Mapping):
        axes = AxisMap(
            x=int(raw_axes.get("x", axes.x)),
            y=int(raw_axes.get("y", axes.y)),
        )

    raw_threshold = raw.get("threshold")
    threshold = STANDARD_PROFILE.threshold if raw_threshold is None else float(raw_threshold)
    return GamepadProfile(buttons=buttons, axes=axes, threshold=threshold)


__all__ = ["STANDARD_PROFILE", "AxisMap", "GamepadProfile", "profile_from_mapping"]
