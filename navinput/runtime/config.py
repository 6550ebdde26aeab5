"""Environment-sourced dispatcher configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

from navinput.api.config import NavInputConfig


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(name: str, default: float, *, env: Mapping[str, str] | None = None) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return float(default)
    try:
        return float(raw.strip())
    except ValueError:
        return float(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def normalize_device_backend(raw: str) -> str:
    """Normalize backend aliases; unknown names pass through unchanged."""
    value = str(raw).strip().lower()
    if value in {"glfw", "gamepad", "joystick"}:
        return "glfw"
    if value in {"none", "null", "off", "disabled"}:
        return "none"
    return value


def resolve_log_level_name(
    default: str = "INFO", *, env: Mapping[str, str] | None = None
) -> str:
    """Resolve log level with dispatcher-prefixed override."""
    value = _raw("NAVINPUT_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_navinput_config(*, env: Mapping[str, str] | None = None) -> NavInputConfig:
    """Load configuration; tuning values are not range-checked."""
    mappings_path = _text("NAVINPUT_GAMEPAD_MAPPINGS", "", env=env)
    return NavInputConfig(
        repeat_delay_ms=_float("NAVINPUT_REPEAT_DELAY_MS", 400.0, env=env),
        repeat_interval_ms=_float("NAVINPUT_REPEAT_INTERVAL_MS", 150.0, env=env),
        stick_threshold=_float("NAVINPUT_STICK_THRESHOLD", 0.5, env=env),
        device_backend=normalize_device_backend(_text("NAVINPUT_DEVICE_BACKEND", "glfw", env=env)),
        gamepad_mappings_path=mappings_path or None,
        input_trace_enabled=_flag("NAVINPUT_INPUT_TRACE_ENABLED", False, env=env),
        log_level=resolve_log_level_name(env=env),
    )


__all__ = [
    "load_navinput_config",
    "normalize_device_backend",
    "resolve_log_level_name",
]
