"""Public logging API."""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging through the runtime implementation."""
    from navinput.runtime.logging import configure_logging as runtime_configure_logging

    runtime_configure_logging(config)


def shutdown_logging() -> None:
    """Flush and stop queued log handlers."""
    from navinput.runtime.logging import shutdown_logging as runtime_shutdown_logging

    runtime_shutdown_logging()


def get_logger(name: str) -> logging.Logger:
    """Return namespaced logger instance."""
    return logging.getLogger(name)


__all__ = ["LoggingConfig", "configure_logging", "get_logger", "shutdown_logging"]
