"""Launcher logging policy over the navinput logging API."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from navinput.api import LoggingConfig, NavInputConfig, configure_logging

__all__ = ["resolve_logging_config", "setup_logging"]


def setup_logging(config: NavInputConfig | None = None) -> None:
    """Configure launcher logging via the navinput logging API."""
    logging_config = resolve_logging_config(config)
    configure_logging(logging_config)
    if logging_config.file_path:
        logging.getLogger(__name__).info("logging_file=%s", logging_config.file_path)


def resolve_logging_config(config: NavInputConfig | None = None) -> LoggingConfig:
    """Build logging config from LAUNCHER_* / LOG_* environment variables.

    ``LAUNCHER_LOG_LEVEL`` wins; otherwise the dispatcher config's level is used,
    then ``LOG_LEVEL``.
    """
    fallback_level = config.log_level if config is not None else os.getenv("LOG_LEVEL", "INFO")
    level_name = os.getenv("LAUNCHER_LOG_LEVEL", fallback_level).upper()
    console_format = os.getenv("LOG_FORMAT", "text").lower()
    return LoggingConfig(
        level_name=level_name,
        console_format=console_format,
        file_path=_resolve_run_log_file_path(),
        file_format="json",
    )


def _resolve_run_log_file_path() -> str | None:
    configured = os.getenv("LAUNCHER_LOG_DIR", "").strip()
    if not configured:
        return None
    base_dir = Path(configured)
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"launcher_run_{stamp}.jsonl")
