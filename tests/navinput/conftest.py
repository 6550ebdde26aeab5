from __future__ import annotations

from navinput.api import STANDARD_PROFILE, Action, ConsumerOptions, DeviceState, EnabledSource
from navinput.input.consumer import GamepadConsumer
from navinput.runtime.scheduler import RuntimeFrameScheduler

_STANDARD_BUTTONS = {action: index for index, action in STANDARD_PROFILE.buttons.items()}


def pad(*held: Action, index: int = 0, x: float = 0.0, y: float = 0.0) -> DeviceState:
    buttons = [False] * 17
    for action in held:
        buttons[_STANDARD_BUTTONS[action]] = True
    return DeviceState(index=index, buttons=tuple(buttons), axes=(x, y, 0.0, 0.0))


class FakeDeviceSource:
    def __init__(self, *devices: DeviceState | None) -> None:
        self.devices: list[DeviceState | None] = list(devices)
        self.poll_count = 0
        self.closed = False

    def set(self, *devices: DeviceState | None) -> None:
        self.devices = list(devices)

    def poll(self) -> list[DeviceState | None]:
        self.poll_count += 1
        return list(self.devices)

    def close(self) -> None:
        self.closed = True


class Recorder:
    def __init__(self) -> None:
        self.actions: list[Action] = []

    def __call__(self, action: Action) -> None:
        self.actions.append(action)

    def take(self) -> list[Action]:
        taken = list(self.actions)
        self.actions.clear()
        return taken


class Switch:
    def __init__(self, value: bool = True) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self.value


def build_consumer(
    source: FakeDeviceSource,
    *,
    enabled: EnabledSource = True,
    delay_ms: float = 400.0,
    interval_ms: float = 150.0,
    frames: RuntimeFrameScheduler | None = None,
    name: str = "",
    trace: bool = False,
) -> tuple[GamepadConsumer, RuntimeFrameScheduler, Recorder]:
    scheduler = frames or RuntimeFrameScheduler()
    recorder = Recorder()
    consumer = GamepadConsumer(
        recorder,
        source=source,
        frames=scheduler,
        options=ConsumerOptions(
            enabled=enabled,
            repeat_delay_ms=delay_ms,
            repeat_interval_ms=interval_ms,
            input_trace=trace,
        ),
        name=name,
    )
    return consumer, scheduler, recorder
