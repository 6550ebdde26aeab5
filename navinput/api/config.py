"""Public dispatcher configuration contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NavInputConfig:
    """Resolved dispatcher configuration."""

    repeat_delay_ms: float = 400.0
    repeat_interval_ms: float = 150.0
    stick_threshold: float = 0.5
    device_backend: str = "glfw"
    gamepad_mappings_path: str | None = None
    input_trace_enabled: bool = False
    log_level: str = "INFO"


def load_config(*, env: Mapping[str, str] | None = None) -> NavInputConfig:
    """Load configuration from environment (or an explicit mapping)."""
    from navinput.runtime.config import load_navinput_config

    return load_navinput_config(env=env)


__all__ = ["NavInputConfig", "load_config"]
