"""Launcher env-file loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

DEFAULT_ENV_FILES = (".env.navinput", ".env.navinput.local", ".env", ".env.local")


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> int:
    """Load KEY=VALUE pairs from an env file into the process environment.

    Returns the number of variables written. Missing files load nothing.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return 0

    written = 0
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value
            written += 1
    return written


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left-to-right; later files overwrite earlier values."""
    for path in DEFAULT_ENV_FILES if paths is None else tuple(paths):
        load_env_file(path, override_existing=override_existing)


__all__ = ["DEFAULT_ENV_FILES", "load_default_env_files", "load_env_file"]
