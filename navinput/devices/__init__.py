"""Device backends."""

from navinput.devices.factory import create_device_source
from navinput.devices.static import NullDeviceSource, StaticDeviceSource

__all__ = ["NullDeviceSource", "StaticDeviceSource", "create_device_source"]
