"""Device snapshot and device-source contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from navinput.api.config import NavInputConfig


@dataclass(frozen=True, slots=True)
class DeviceState:
    """Point-in-time snapshot of one connected controller."""

    index: int
    buttons: tuple[bool, ...] = ()
    axes: tuple[float, ...] = ()
    name: str = ""

    def button(self, button_index: int) -> bool:
        """Return digital state for a button; missing buttons read as released."""
        if 0 <= button_index < len(self.buttons):
            return bool(self.buttons[button_index])
        return False

    def axis(self, axis_index: int) -> float:
        """Return axis value; missing axes read as centered."""
        if 0 <= axis_index < len(self.axes):
            return float(self.axes[axis_index])
        return 0.0


class DeviceSource(Protocol):
    """Platform device-state query, invoked once per tick."""

    def poll(self) -> Sequence[DeviceState | None]:
        """Return one slot per device; `None` marks a disconnected slot."""

    def close(self) -> None:
        """Release backend resources."""


def create_device_source(
    backend: str | None = None,
    *,
    config: NavInputConfig | None = None,
) -> DeviceSource:
    """Create a device source for a named backend (`glfw` or `none`).

    Without a backend name the configured one is used; the config also supplies
    the gamepad mappings path.
    """
    from navinput.devices.factory import create_device_source as runtime_create_device_source

    return runtime_create_device_source(backend, config=config)


__all__ = ["DeviceSource", "DeviceState", "create_device_source"]
