from __future__ import annotations

from launcher.app.controller import CHANNEL_GAMEPAD, CHANNEL_KEYBOARD, LauncherController
from launcher.app.events import ActionRouted, LauncherIntent
from launcher.app.zones import Zone
from navinput.api import Action, KeyEvent, NavInputConfig, create_input_host
from tests.navinput.conftest import FakeDeviceSource, pad

SCRIPT: tuple[tuple[Action, str], ...] = (
    (Action.RIGHT, "arrowright"),
    (Action.DOWN, "arrowdown"),
    (Action.LEFT, "arrowleft"),
    (Action.LEFT, "arrowleft"),
    (Action.DOWN, "s"),
    (Action.A, "enter"),
    (Action.RIGHT, "d"),
    (Action.A, "space"),
    (Action.B, "escape"),
)


def _controller(source: FakeDeviceSource) -> tuple[LauncherController, list[ActionRouted]]:
    host = create_input_host(source, config=NavInputConfig())
    controller = LauncherController(host, item_count=12, columns=4)
    routed: list[ActionRouted] = []
    controller.events.subscribe(ActionRouted, routed.append)
    return controller, routed


def test_gamepad_and_keyboard_produce_same_routed_sequence() -> None:
    gamepad_source = FakeDeviceSource(pad())
    gamepad, gamepad_routed = _controller(gamepad_source)
    now = 0.0
    for action, _ in SCRIPT:
        gamepad_source.set(pad(action))
        _step(gamepad, now)
        gamepad_source.set(pad())
        _step(gamepad, now + 16.0)
        now += 32.0

    keyboard, keyboard_routed = _controller(FakeDeviceSource(pad()))
    for _, key in SCRIPT:
        keyboard.handle_key(KeyEvent("key_down", key))
        keyboard.handle_key(KeyEvent("key_up", key))

    assert {event.channel for event in gamepad_routed} == {CHANNEL_GAMEPAD}
    assert {event.channel for event in keyboard_routed} == {CHANNEL_KEYBOARD}
    assert [(e.zone, e.action) for e in gamepad_routed] == [
        (e.zone, e.action) for e in keyboard_routed
    ]
    assert [(e.zone, e.action) for e in gamepad_routed] == [
        (Zone.GRID, Action.RIGHT),
        (Zone.GRID, Action.DOWN),
        (Zone.GRID, Action.LEFT),
        (Zone.GRID, Action.LEFT),
        (Zone.SIDE_PANEL, Action.DOWN),
        (Zone.SIDE_PANEL, Action.A),
        (Zone.SIDE_PANEL, Action.RIGHT),
        (Zone.GRID, Action.A),
        (Zone.MODAL, Action.B),
    ]
    assert gamepad.router.owner is keyboard.router.owner is Zone.GRID


def test_held_press_that_opens_overlay_does_not_fire_inside_it() -> None:
    source = FakeDeviceSource(pad())
    controller, routed = _controller(source)
    intents: list[LauncherIntent] = []
    controller.events.subscribe(LauncherIntent, intents.append)

    source.set(pad(Action.A))
    for step in range(0, 80):
        _step(controller, step * 16.0)

    assert [(e.zone, e.action) for e in routed] == [(Zone.GRID, Action.A)]
    assert controller.router.owner is Zone.MODAL
    assert [intent.kind for intent in intents] == ["item_selected"]

    source.set(pad())
    _step(controller, 2000.0)
    source.set(pad(Action.A))
    _step(controller, 2016.0)

    assert [(e.zone, e.action) for e in routed][-1] == (Zone.MODAL, Action.A)
    assert intents[-1] == LauncherIntent(kind="modal_button", zone=Zone.MODAL, payload="launch")


def test_hand_off_mid_hold_stops_repeats_and_blocks_new_owner() -> None:
    source = FakeDeviceSource(pad())
    controller, routed = _controller(source)

    source.set(pad(Action.LEFT))
    for step in range(0, 80):
        _step(controller, step * 16.0)

    assert [(e.zone, e.action) for e in routed] == [(Zone.GRID, Action.LEFT)]
    assert controller.router.owner is Zone.SIDE_PANEL

    source.set(pad())
    _step(controller, 2000.0)
    source.set(pad(Action.DOWN))
    _step(controller, 2016.0)
    assert [(e.zone, e.action) for e in routed][-1] == (Zone.SIDE_PANEL, Action.DOWN)


def test_held_direction_repeats_within_one_zone() -> None:
    source = FakeDeviceSource(pad())
    controller, routed = _controller(source)

    source.set(pad(Action.RIGHT))
    for timestamp in (0.0, 200.0, 401.0, 551.0, 701.0):
        _step(controller, timestamp)

    assert [(e.zone, e.action) for e in routed] == [(Zone.GRID, Action.RIGHT)] * 4
    assert controller.grid.selected == 3


def test_closing_overlay_with_held_button_does_not_fire_on_lower_zone() -> None:
    source = FakeDeviceSource(pad())
    controller, routed = _controller(source)
    now = _tap(controller, source, Action.A, 0.0)
    assert controller.router.owner is Zone.MODAL

    source.set(pad(Action.B))
    for step in range(0, 80):
        _step(controller, now + step * 16.0)

    assert [(e.zone, e.action) for e in routed] == [(Zone.GRID, Action.A), (Zone.MODAL, Action.B)]
    assert controller.router.owner is Zone.GRID
    assert controller.router.overlays() == ()


def test_dialog_confirm_with_held_a_returns_to_modal_without_pressing_it() -> None:
    source = FakeDeviceSource(pad())
    controller, routed = _controller(source)
    intents: list[LauncherIntent] = []
    controller.events.subscribe(LauncherIntent, intents.append)
    now = 0.0
    for action in (Action.A, Action.RIGHT, Action.RIGHT, Action.A):
        now = _tap(controller, source, action, now)
    assert controller.router.owner is Zone.DIALOG
    assert controller.dialog.subject == "remove"

    source.set(pad(Action.A))
    for step in range(0, 80):
        _step(controller, now + step * 16.0)

    assert [(e.zone, e.action) for e in routed][-2:] == [
        (Zone.MODAL, Action.A),
        (Zone.DIALOG, Action.A),
    ]
    assert controller.router.owner is Zone.MODAL
    assert controller.router.overlays() == (Zone.MODAL,)
    assert controller.modal.focused_button == "remove"
    assert intents[-1] == LauncherIntent(
        kind="confirm_dialog", zone=Zone.DIALOG, payload="remove:no"
    )


def _tap(
    controller: LauncherController, source: FakeDeviceSource, action: Action, now_ms: float
) -> float:
    source.set(pad(action))
    _step(controller, now_ms)
    source.set(pad())
    _step(controller, now_ms + 16.0)
    return now_ms + 32.0


def _step(controller: LauncherController, now_ms: float) -> None:
    controller.host.step(now_ms)
