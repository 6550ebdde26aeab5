"""Quick device probe: poll gamepads and print every fired action."""

from __future__ import annotations

import argparse
import json
import time
from typing import Any

from navinput.api import (
    Action,
    ConsumerOptions,
    DeviceSource,
    DeviceState,
    NavInputConfig,
    create_device_source,
    create_input_host,
    load_config,
)
from navinput.devices.static import StaticDeviceSource
from navinput.runtime.logging import setup_logging


class _ScriptedPadSource(StaticDeviceSource):
    """One pad that holds A between two poll counts, then releases it."""

    def __init__(self, *, press_at: int = 10, release_at: int = 100) -> None:
        super().__init__([_pad(a_held=False)])
        self._press_at = press_at
        self._release_at = release_at

    def poll(self) -> list[DeviceState | None]:
        if self.poll_count == self._press_at:
            self.set_device(_pad(a_held=True))
        elif self.poll_count == self._release_at:
            self.set_device(_pad(a_held=False))
        return super().poll()


def _pad(*, a_held: bool) -> DeviceState:
    buttons = [False] * 17
    buttons[0] = a_held
    return DeviceState(index=0, buttons=tuple(buttons), axes=(0.0, 0.0, 0.0, 0.0), name="scripted")


def _build_source(backend: str, config: NavInputConfig) -> DeviceSource:
    if backend == "static":
        return _ScriptedPadSource()
    return create_device_source(backend, config=config)


def _describe_devices(source: DeviceSource) -> list[dict[str, Any]]:
    described: list[dict[str, Any]] = []
    for device in source.poll():
        if device is None:
            continue
        described.append(
            {
                "index": device.index,
                "name": device.name,
                "buttons": len(device.buttons),
                "axes": len(device.axes),
            }
        )
    return described


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--backend", choices=("glfw", "none", "static"), default="glfw")
    parser.add_argument("--frames", type=int, default=600, help="frames to run (0 = forever)")
    parser.add_argument("--interval", type=float, default=1.0 / 60.0, help="seconds per frame")
    parser.add_argument("--json", action="store_true", help="print fires as JSON lines")
    args = parser.parse_args(argv)

    config = load_config()
    setup_logging(config)
    source = _build_source(args.backend, config)
    host = create_input_host(source, config=config)
    started = time.perf_counter()
    fired = 0

    def on_action(action: Action) -> None:
        nonlocal fired
        fired += 1
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        if args.json:
            print(json.dumps({"t_ms": round(elapsed_ms, 1), "action": action.value}), flush=True)
        else:
            print(f"{elapsed_ms:9.1f} ms  {action.value}", flush=True)

    print(json.dumps({"backend": args.backend, "devices": _describe_devices(source)}))
    host.create_consumer(on_action, ConsumerOptions.from_config(config), name="probe")
    try:
        host.run(max_frames=args.frames or None, frame_interval_s=args.interval)
    except KeyboardInterrupt:
        pass
    finally:
        host.close()
        source.close()
    print(json.dumps({"fired": fired}))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
