"""Device backend selection and factory helpers."""

from __future__ import annotations

from navinput.api.config import NavInputConfig
from navinput.api.devices import DeviceSource
from navinput.devices.static import NullDeviceSource
from navinput.runtime.config import load_navinput_config, normalize_device_backend


def create_device_source(
    backend: str | None = None,
    *,
    config: NavInputConfig | None = None,
) -> DeviceSource:
    """Build the device source for ``backend`` or the configured backend."""
    resolved_config = config or load_navinput_config()
    resolved = normalize_device_backend(
        backend if backend is not None else resolved_config.device_backend
    )
    if resolved == "none":
        return NullDeviceSource()
    if resolved == "glfw":
        from navinput.devices.glfw_source import GlfwDeviceSource

        return GlfwDeviceSource(mappings_path=resolved_config.gamepad_mappings_path)
    raise RuntimeError(f"Unsupported NAVINPUT_DEVICE_BACKEND: {resolved!r}")


__all__ = ["create_device_source"]
