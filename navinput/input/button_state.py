"""Per-key press/hold/repeat state machine and repeat-fire policy.

Each tracked key (device index + action) is in exactly one phase:

- ``Idle``: not physically active.
- ``Pressed``: held; only the initial press has fired (or the hold started
  while the gate was closed).
- ``Repeating``: held; at least one repeat has fired.
- ``SuppressedUntilRelease``: held across a gate re-open or consumer creation.
  It can never fire; only a physical release returns it to ``Idle``.

Transitions are pure functions so the consumer owns all mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Idle:
    """Key released."""


@dataclass(frozen=True, slots=True)
class Pressed:
    """Key held, first fire only."""

    since_ms: float
    last_fired_ms: float


@dataclass(frozen=True, slots=True)
class Repeating:
    """Key held, repeat-firing."""

    since_ms: float
    last_fired_ms: float


@dataclass(frozen=True, slots=True)
class SuppressedUntilRelease:
    """Key held but blocked until full release."""


ButtonState: TypeAlias = Idle | Pressed | Repeating | SuppressedUntilRelease

IDLE = Idle()
SUPPRESSED = SuppressedUntilRelease()


@dataclass(frozen=True, slots=True)
class RepeatTiming:
    """Key-repeat tuning in milliseconds."""

    delay_ms: float = 400.0
    interval_ms: float = 150.0


@dataclass(frozen=True, slots=True)
class TrackerStep:
    """Result of advancing one key by one tick."""

    state: ButtonState
    fired: bool = False
    repeat: bool = False


def is_held(state: ButtonState) -> bool:
    """Return whether the tracker believes the key is physically down."""
    return not isinstance(state, Idle)


def should_repeat(
    since_ms: float,
    last_fired_ms: float,
    now_ms: float,
    timing: RepeatTiming,
) -> bool:
    """Return whether a held key is due for a repeat fire.

    The hold must exceed the delay strictly; consecutive fires are spaced by at
    least one full interval.
    """
    # Interval check is inclusive: with default timing a hold from t=0 fires at
    # 0, 401 and 551, and 551 - 401 is exactly one interval.
    return (now_ms - since_ms) > timing.delay_ms and (now_ms - last_fired_ms) >= timing.interval_ms


def advance(
    state: ButtonState,
    *,
    physical: bool,
    enabled: bool,
    now_ms: float,
    timing: RepeatTiming,
) -> TrackerStep:
    """Advance one key by one tick."""
    if not physical:
        return TrackerStep(state=IDLE)

    if isinstance(state, SuppressedUntilRelease):
        return TrackerStep(state=state)

    if not enabled:
        # Gated: mirror the hold, last fire follows now.
        if isinstance(state, Idle):
            return TrackerStep(state=Pressed(since_ms=now_ms, last_fired_ms=now_ms))
        return TrackerStep(state=type(state)(since_ms=state.since_ms, last_fired_ms=now_ms))

    if isinstance(state, Idle):
        return TrackerStep(state=Pressed(since_ms=now_ms, last_fired_ms=now_ms), fired=True)

    if should_repeat(state.since_ms, state.last_fired_ms, now_ms, timing):
        return TrackerStep(
            state=Repeating(since_ms=state.since_ms, last_fired_ms=now_ms),
            fired=True,
            repeat=True,
        )
    return TrackerStep(state=state)


__all__ = [
    "IDLE",
    "SUPPRESSED",
    "ButtonState",
    "Idle",
    "Pressed",
    "RepeatTiming",
    "Repeating",
    "SuppressedUntilRelease",
    "TrackerStep",
    "advance",
    "is_held",
    "should_repeat",
]
