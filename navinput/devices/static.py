"""In-memory device sources."""

from __future__ import annotations

from collections.abc import Iterable

from navinput.api.devices import DeviceState


class NullDeviceSource:
    """Source with no connected devices."""

    def poll(self) -> list[DeviceState | None]:
        return []

    def close(self) -> None:
        return None


class StaticDeviceSource:
    """Source returning whatever snapshot was last assigned."""

    def __init__(self, devices: Iterable[DeviceState | None] = ()) -> None:
        self._devices: list[DeviceState | None] = list(devices)
        self.poll_count = 0

    def set_devices(self, devices: Iterable[DeviceState | None]) -> None:
        """Replace the full slot list."""
        self._devices = list(devices)

    def set_device(self, device: DeviceState) -> None:
        """Insert or replace the slot matching the device index."""
        while len(self._devices) <= device.index:
            self._devices.append(None)
        self._devices[device.index] = device

    def disconnect(self, index: int) -> None:
        if 0 <= index < len(self._devices):
            self._devices[index] = None

    def poll(self) -> list[DeviceState | None]:
        self.poll_count += 1
        return list(self._devices)

    def close(self) -> None:
        self._devices.clear()


__all__ = ["NullDeviceSource", "StaticDeviceSource"]
