"""Public gamepad consumer contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Protocol, TypeAlias

from navinput.api.actions import Action
from navinput.api.config import NavInputConfig
from navinput.api.devices import DeviceSource
from navinput.api.frames import FrameScheduler
from navinput.api.profile import STANDARD_PROFILE, GamepadProfile

ActionHandler: TypeAlias = Callable[[Action], None]
EnabledSource: TypeAlias = bool | Callable[[], bool]


def resolve_enabled(source: EnabledSource) -> bool:
    """Sample an enabled source (constant or predicate)."""
    if callable(source):
        return bool(source())
    return bool(source)


@dataclass(frozen=True, slots=True)
class ConsumerOptions:
    """Per-consumer configuration surface.

    Tuning values are used as given. Non-positive delays degrade to firing every
    tick and out-of-range thresholds to never/always activating the stick.
    """

    enabled: EnabledSource = True
    repeat_delay_ms: float = 400.0
    repeat_interval_ms: float = 150.0
    profile: GamepadProfile = field(default=STANDARD_PROFILE)
    input_trace: bool = False

    @classmethod
    def from_config(
        cls,
        config: NavInputConfig,
        *,
        enabled: EnabledSource = True,
        profile: GamepadProfile | None = None,
    ) -> "ConsumerOptions":
        """Derive consumer defaults from resolved configuration.

        The configured stick threshold applies to the default profile only; an
        explicit profile keeps its own threshold.
        """
        if profile is None:
            profile = replace(STANDARD_PROFILE, threshold=config.stick_threshold)
        return cls(
            enabled=enabled,
            repeat_delay_ms=config.repeat_delay_ms,
            repeat_interval_ms=config.repeat_interval_ms,
            profile=profile,
            input_trace=config.input_trace_enabled,
        )


class Consumer(Protocol):
    """Independent dispatcher instance competing for input ownership."""

    @property
    def mounted(self) -> bool:
        """Return whether the consumer is currently scheduling ticks."""

    def mount(self) -> None:
        """Snapshot held buttons and start ticking."""

    def tick(self, now_ms: float) -> None:
        """Process one frame."""

    def unmount(self) -> None:
        """Stop ticking and drop tracked state."""


def create_consumer(
    handler: ActionHandler,
    *,
    source: DeviceSource,
    frames: FrameScheduler,
    options: ConsumerOptions | None = None,
    name: str = "",
) -> Consumer:
    """Create default consumer implementation (not yet mounted)."""
    from navinput.input.consumer import GamepadConsumer

    return GamepadConsumer(handler, source=source, frames=frames, options=options, name=name)


__all__ = [
    "ActionHandler",
    "Consumer",
    "ConsumerOptions",
    "EnabledSource",
    "create_consumer",
    "resolve_enabled",
]
