"""Launcher navigation entry point (headless)."""

from __future__ import annotations

import argparse

from launcher.app.controller import LauncherController
from launcher.app.events import FocusChanged, LauncherIntent
from launcher.infra.config import load_default_env_files
from launcher.infra.logging import setup_logging
from navinput.api import (
    create_device_source,
    create_input_host,
    get_logger,
    load_config,
    shutdown_logging,
)

logger = get_logger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run launcher navigation against live devices.")
    parser.add_argument("--items", type=int, default=24, help="number of library items")
    parser.add_argument("--columns", type=int, default=6, help="grid columns")
    parser.add_argument("--frames", type=int, default=None, help="stop after N frames")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the launcher input loop until interrupted."""
    load_default_env_files()
    args = _parse_args(argv)
    config = load_config()
    setup_logging(config)
    source = create_device_source(config=config)
    host = create_input_host(source, config=config)
    controller = LauncherController(host, item_count=args.items, columns=args.columns)
    controller.events.subscribe(
        LauncherIntent,
        lambda intent: logger.info(
            "launcher_intent kind=%s zone=%s payload=%s",
            intent.kind,
            intent.zone.value,
            intent.payload,
        ),
    )
    controller.events.subscribe(
        FocusChanged,
        lambda change: logger.info(
            "focus owner=%s reason=%s", change.current.value, change.reason
        ),
    )
    logger.info(
        "launcher_start backend=%s items=%d columns=%d",
        config.device_backend,
        args.items,
        args.columns,
    )
    try:
        host.run(max_frames=args.frames)
    except KeyboardInterrupt:
        logger.info("launcher_interrupted")
    finally:
        controller.close()
        host.close()
        source.close()
        shutdown_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
