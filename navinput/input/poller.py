"""Per-frame physical signal sampling from device snapshots."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from navinput.api.actions import Action
from navinput.api.devices import DeviceState
from navinput.api.profile import GamepadProfile


@dataclass(frozen=True, slots=True)
class ActionSignal:
    """Physical activity of one action on one device for one frame."""

    device_index: int
    action: Action
    physical: bool


class DevicePoller:
    """Compute per-(device, action) physical signals for a profile."""

    def __init__(self, profile: GamepadProfile) -> None:
        self._profile = profile
        self._bindings: tuple[tuple[Action, tuple[int, ...]], ...] = tuple(
            (action, profile.button_indices_for(action)) for action in profile.actions()
        )

    @property
    def profile(self) -> GamepadProfile:
        return self._profile

    def sample(self, devices: Sequence[DeviceState | None]) -> list[ActionSignal]:
        """Return signals in device order, then profile action order."""
        signals: list[ActionSignal] = []
        for device in devices:
            if device is None:
                continue
            for action, button_indices in self._bindings:
                signals.append(
                    ActionSignal(
                        device_index=device.index,
                        action=action,
                        physical=self.is_physical(device, action, button_indices),
                    )
                )
        return signals

    def is_physical(
        self,
        device: DeviceState,
        action: Action,
        button_indices: Sequence[int] | None = None,
    ) -> bool:
        """Digital press on any mapped button, or stick past threshold."""
        indices = (
            self._profile.button_indices_for(action) if button_indices is None else button_indices
        )
        if any(device.button(index) for index in indices):
            return True
        threshold = self._profile.threshold
        if action is Action.RIGHT:
            return device.axis(self._profile.axes.x) > threshold
        if action is Action.LEFT:
            return device.axis(self._profile.axes.x) < -threshold
        if action is Action.DOWN:
            return device.axis(self._profile.axes.y) > threshold
        if action is Action.UP:
            return device.axis(self._profile.axes.y) < -threshold
        return False


__all__ = ["ActionSignal", "DevicePoller"]
