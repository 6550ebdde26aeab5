from __future__ import annotations

import logging

import pytest

from navinput.api import Action
from navinput.input.button_state import Idle, Pressed, Repeating, SuppressedUntilRelease
from navinput.input.consumer import GamepadConsumer
from navinput.runtime.scheduler import RuntimeFrameScheduler
from tests.navinput.conftest import FakeDeviceSource, Switch, build_consumer, pad


def test_press_fires_once_then_repeats_on_delay_and_interval() -> None:
    source = FakeDeviceSource(pad())
    consumer, frames, recorder = build_consumer(source)
    consumer.mount()

    source.set(pad(Action.A))
    frames.run_frame(0.0)
    assert recorder.take() == [Action.A]
    frames.run_frame(399.0)
    assert recorder.take() == []
    frames.run_frame(401.0)
    assert recorder.take() == [Action.A]
    frames.run_frame(550.0)
    assert recorder.take() == []
    frames.run_frame(551.0)
    assert recorder.take() == [Action.A]


def test_delay_boundary_is_strict() -> None:
    source = FakeDeviceSource(pad())
    consumer, frames, recorder = build_consumer(source)
    consumer.mount()

    source.set(pad(Action.DOWN))
    frames.run_frame(0.0)
    frames.run_frame(400.0)
    assert recorder.take() == [Action.DOWN]
    frames.run_frame(400.5)
    assert recorder.take() == [Action.DOWN]


def test_hold_fires_at_most_once_per_interval_window_and_stops_on_release() -> None:
    source = FakeDeviceSource(pad())
    consumer, frames, recorder = build_consumer(source)
    consumer.mount()

    source.set(pad(Action.RIGHT))
    fire_times: list[float] = []
    for step in range(0, 200):
        now = step * 16.0
        frames.run_frame(now)
        if recorder.take():
            fire_times.append(now)

    assert fire_times[0] == 0.0
    assert all(t > 400.0 for t in fire_times[1:])
    gaps = [b - a for a, b in zip(fire_times[1:], fire_times[2:])]
    assert gaps and all(gap >= 150.0 for gap in gaps)

    source.set(pad())
    for step in range(200, 260):
        frames.run_frame(step * 16.0)
    assert recorder.take() == []
    assert isinstance(consumer.state_for(0, Action.RIGHT), Idle)


def test_release_then_repress_fires_immediately_without_throttle() -> None:
    source = FakeDeviceSource(pad())
    consumer, frames, recorder = build_consumer(source)
    consumer.mount()

    source.set(pad(Action.A))
    frames.run_frame(0.0)
    source.set(pad())
    frames.run_frame(16.0)
    source.set(pad(Action.A))
    frames.run_frame(32.0)
    assert recorder.take() == [Action.A, Action.A]


def test_two_devices_fire_independently() -> None:
    source = FakeDeviceSource(pad(index=0), pad(index=1))
    consumer, frames, recorder = build_consumer(source)
    consumer.mount()

    source.set(pad(Action.A, index=0), pad(index=1))
    frames.run_frame(0.0)
    assert recorder.take() == [Action.A]

    source.set(pad(Action.A, index=0), pad(Action.A, index=1))
    frames.run_frame(200.0)
    assert recorder.take() == [Action.A]
    assert consumer.state_for(0, Action.A) == Pressed(since_ms=0.0, last_fired_ms=0.0)
    assert consumer.state_for(1, Action.A) == Pressed(since_ms=200.0, last_fired_ms=200.0)

    frames.run_frame(401.0)
    assert recorder.take() == [Action.A]
    assert isinstance(consumer.state_for(0, Action.A), Repeating)
    assert isinstance(consumer.state_for(1, Action.A), Pressed)


def test_disconnected_slot_is_skipped_and_state_kept() -> None:
    source = FakeDeviceSource(pad(index=0))
    consumer, frames, recorder = build_consumer(source)
    consumer.mount()

    source.set(pad(Action.B, index=0))
    frames.run_frame(0.0)
    source.set(None, pad(index=1))
    frames.run_frame(16.0)

    assert recorder.take() == [Action.B]
    assert isinstance(consumer.state_for(0, Action.B), Pressed)


def test_disable_mid_hold_then_reenable_suppresses_until_release() -> None:
    switch = Switch(True)
    source = FakeDeviceSource(pad())
    consumer, frames, recorder = build_consumer(source, enabled=switch)
    consumer.mount()

    source.set(pad(Action.A))
    frames.run_frame(0.0)
    assert recorder.take() == [Action.A]

    switch.value = False
    frames.run_frame(100.0)
    frames.run_frame(500.0)
    switch.value = True
    for now in (900.0, 920.0, 940.0):
        frames.run_frame(now)
    assert recorder.take() == []
    assert isinstance(consumer.state_for(0, Action.A), SuppressedUntilRelease)

    source.set(pad())
    frames.run_frame(950.0)
    assert recorder.take() == []
    source.set(pad(Action.A))
    frames.run_frame(1000.0)
    assert recorder.take() == [Action.A]


def test_disabled_consumer_tracks_without_firing() -> None:
    source = FakeDeviceSource(pad())
    consumer, frames, recorder = build_consumer(source, enabled=False)
    consumer.mount()

    source.set(pad(Action.LB))
    frames.run_frame(0.0)
    frames.run_frame(1000.0)

    assert recorder.take() == []
    assert consumer.state_for(0, Action.LB) == Pressed(since_ms=0.0, last_fired_ms=1000.0)
    assert consumer.enabled_last_tick is False


def test_enabled_predicate_sampled_at_mount_and_once_per_tick() -> None:
    switch = Switch(True)
    source = FakeDeviceSource(pad(Action.A), pad(Action.B, index=1))
    consumer, frames, _ = build_consumer(source, enabled=switch)
    consumer.mount()

    frames.run_frame(0.0)
    frames.run_frame(16.0)

    assert switch.calls == 3


def test_consumer_mounted_while_held_never_fires_for_that_hold() -> None:
    source = FakeDeviceSource(pad(Action.UP))
    consumer, frames, recorder = build_consumer(source)
    consumer.mount()

    for step in range(0, 60):
        frames.run_frame(step * 16.0)
    assert recorder.take() == []

    source.set(pad())
    frames.run_frame(1000.0)
    source.set(pad(Action.UP))
    frames.run_frame(1016.0)
    assert recorder.take() == [Action.UP]


def test_mount_snapshot_only_suppresses_held_keys() -> None:
    source = FakeDeviceSource(pad(Action.UP))
    consumer, frames, recorder = build_consumer(source)
    consumer.mount()

    assert consumer.tracked_keys() == ((0, Action.UP),)
    source.set(pad(Action.UP, Action.A))
    frames.run_frame(0.0)
    assert recorder.take() == [Action.A]


def test_stick_deflection_counts_as_direction() -> None:
    source = FakeDeviceSource(pad())
    consumer, frames, recorder = build_consumer(source)
    consumer.mount()

    source.set(pad(x=0.8))
    frames.run_frame(0.0)
    source.set(pad(x=0.8, y=-0.9))
    frames.run_frame(16.0)
    assert recorder.take() == [Action.RIGHT, Action.UP]


def test_fires_follow_device_then_profile_action_order() -> None:
    source = FakeDeviceSource(pad(index=0), pad(index=1))
    consumer, frames, recorder = build_consumer(source)
    consumer.mount()

    source.set(pad(Action.RIGHT, Action.A, index=0), pad(Action.B, index=1))
    frames.run_frame(0.0)
    assert recorder.take() == [Action.A, Action.RIGHT, Action.B]


def test_ownership_transfer_mid_hold_has_no_ghost_press() -> None:
    owner = {"zone": "grid"}
    source = FakeDeviceSource(pad())
    grid, frames, grid_fires = build_consumer(source, enabled=lambda: owner["zone"] == "grid")
    panel, _, panel_fires = build_consumer(
        source, enabled=lambda: owner["zone"] == "panel", frames=frames
    )
    grid.mount()
    panel.mount()

    source.set(pad(Action.A))
    frames.run_frame(0.0)
    assert grid_fires.take() == [Action.A]

    owner["zone"] = "panel"
    for step in range(1, 80):
        frames.run_frame(step * 16.0)
    assert grid_fires.take() == []
    assert panel_fires.take() == []

    source.set(pad())
    frames.run_frame(2000.0)
    source.set(pad(Action.A))
    frames.run_frame(2016.0)
    assert panel_fires.take() == [Action.A]
    assert grid_fires.take() == []


def test_one_tick_per_frame_and_unmount_stops_ticks() -> None:
    source = FakeDeviceSource(pad())
    consumer, frames, _ = build_consumer(source)
    consumer.mount()
    consumer.mount()

    assert frames.pending_count == 1
    frames.run_frame(0.0)
    frames.run_frame(16.0)
    assert source.poll_count == 3
    assert frames.pending_count == 1

    consumer.unmount()
    consumer.unmount()
    assert frames.pending_count == 0
    frames.run_frame(32.0)
    assert source.poll_count == 3
    assert consumer.tracked_keys() == ()
    assert consumer.mounted is False


def test_handler_exception_propagates_and_ticking_continues() -> None:
    source = FakeDeviceSource(pad())
    frames = RuntimeFrameScheduler()

    def explode(action: Action) -> None:
        raise RuntimeError(f"handler failed on {action.value}")

    consumer = GamepadConsumer(explode, source=source, frames=frames)
    consumer.mount()

    source.set(pad(Action.A))
    with pytest.raises(RuntimeError, match="handler failed on a"):
        frames.run_frame(0.0)
    assert frames.pending_count == 1
    assert isinstance(consumer.state_for(0, Action.A), Pressed)

    frames.run_frame(16.0)
    assert source.poll_count == 3


def test_handler_unmounting_its_consumer_ends_the_tick() -> None:
    source = FakeDeviceSource(pad())
    frames = RuntimeFrameScheduler()
    received: list[Action] = []
    consumer: GamepadConsumer | None = None

    def handler(action: Action) -> None:
        received.append(action)
        assert consumer is not None
        consumer.unmount()

    consumer = GamepadConsumer(handler, source=source, frames=frames)
    consumer.mount()

    source.set(pad(Action.A, Action.B))
    frames.run_frame(0.0)

    assert received == [Action.A]
    assert frames.pending_count == 0
    assert consumer.tracked_keys() == ()


def test_input_trace_logs_fire_phase(caplog) -> None:
    source = FakeDeviceSource(pad())
    consumer, frames, _ = build_consumer(source, name="grid", trace=True)
    consumer.mount()

    source.set(pad(Action.A))
    with caplog.at_level(logging.DEBUG, logger="navinput.input.consumer"):
        frames.run_frame(0.0)
        frames.run_frame(401.0)

    fires = [r.getMessage() for r in caplog.records if r.getMessage().startswith("input_fire")]
    assert len(fires) == 2
    assert "consumer=grid" in fires[0]
    assert "phase=press" in fires[0]
    assert "phase=repeat" in fires[1]


def test_gaining_ownership_on_first_tick_does_not_fire_held_press() -> None:
    switch = Switch(False)
    source = FakeDeviceSource(pad())
    consumer, frames, recorder = build_consumer(source, enabled=switch)
    consumer.mount()

    assert consumer.enabled_last_tick is False
    source.set(pad(Action.LEFT))
    switch.value = True
    frames.run_frame(0.0)

    assert recorder.take() == []
    assert isinstance(consumer.state_for(0, Action.LEFT), SuppressedUntilRelease)
