"""Launcher input controller wiring consumers, key channel and focus router."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from launcher.app.events import ActionRouted, LauncherIntent
from launcher.app.focus_router import FocusRouter
from launcher.app.zones import Zone
from launcher.ui.char_entry import CharEntryState
from launcher.ui.confirm_dialog import ConfirmDialogState
from launcher.ui.grid_nav import GridNavigator
from launcher.ui.modal import ModalState
from launcher.ui.outcome import NavOutcome
from launcher.ui.side_panel import DEFAULT_PANEL_ENTRIES, SidePanel
from navinput.api import (
    Action,
    ActionHandler,
    Consumer,
    ConsumerOptions,
    EventBus,
    InputHost,
    KeyEvent,
    create_event_bus,
    create_key_channel,
)

logger = logging.getLogger(__name__)

CHANNEL_GAMEPAD = "gamepad"
CHANNEL_KEYBOARD = "keyboard"


class LauncherController:
    """Route logical actions from both input channels to the owning zone.

    One gamepad consumer per zone stays mounted for the controller's lifetime,
    each gated on its zone owning focus. Keyboard actions go straight to the
    current owner.
    """

    def __init__(
        self,
        host: InputHost,
        *,
        item_count: int = 0,
        columns: int = 4,
        panel_entries: Sequence[str] = DEFAULT_PANEL_ENTRIES,
        events: EventBus | None = None,
    ) -> None:
        self._events = events or create_event_bus()
        self._router = FocusRouter(events=self._events)
        self._grid = GridNavigator(item_count=item_count, columns=columns)
        self._panel = SidePanel(entries=panel_entries)
        self._modal = ModalState()
        self._dialog = ConfirmDialogState()
        self._keyboard = CharEntryState()
        self._host = host
        self._consumers: dict[Zone, Consumer] = {}
        for zone in Zone:
            options = ConsumerOptions.from_config(
                host.config,
                enabled=self._router.enabled_predicate(zone),
            )
            self._consumers[zone] = host.create_consumer(
                self._gamepad_handler(zone),
                options,
                name=f"zone:{zone.value}",
            )
        self._keys = create_key_channel(self._keyboard_handler)

    @property
    def events(self) -> EventBus:
        return self._events

    @property
    def host(self) -> InputHost:
        return self._host

    @property
    def router(self) -> FocusRouter:
        return self._router

    @property
    def grid(self) -> GridNavigator:
        return self._grid

    @property
    def panel(self) -> SidePanel:
        return self._panel

    @property
    def modal(self) -> ModalState:
        return self._modal

    @property
    def dialog(self) -> ConfirmDialogState:
        return self._dialog

    @property
    def keyboard(self) -> CharEntryState:
        return self._keyboard

    def consumer_for(self, zone: Zone) -> Consumer:
        return self._consumers[zone]

    def handle_key(self, event: KeyEvent) -> Action | None:
        """Feed one keyboard event through the alternate channel."""
        return self._keys.handle(event)

    def route(self, action: Action, channel: str, *, zone: Zone | None = None) -> bool:
        """Dispatch an action to the owning zone; return whether it was delivered.

        ``zone`` names the zone the action was produced for. Actions produced for
        a zone that no longer owns focus are dropped.
        """
        owner = self._router.owner
        if zone is not None and zone is not owner:
            logger.debug(
                "action_dropped zone=%s owner=%s action=%s channel=%s",
                zone.value,
                owner.value,
                action.value,
                channel,
            )
            return False
        self._events.publish(ActionRouted(zone=owner, action=action, channel=channel))
        outcome = self._model_move(owner, action)
        self._apply(owner, outcome)
        return True

    def close(self) -> None:
        """Release every zone consumer."""
        for consumer in self._consumers.values():
            self._host.release_consumer(consumer)
        self._consumers.clear()

    def _gamepad_handler(self, zone: Zone) -> ActionHandler:
        def handle(action: Action) -> None:
            self.route(action, CHANNEL_GAMEPAD, zone=zone)

        return handle

    def _keyboard_handler(self, action: Action) -> None:
        self.route(action, CHANNEL_KEYBOARD)

    def _model_move(self, zone: Zone, action: Action) -> NavOutcome:
        if zone is Zone.GRID:
            return self._grid.move(action)
        if zone is Zone.SIDE_PANEL:
            return self._panel.move(action)
        if zone is Zone.MODAL:
            return self._modal.move(action)
        if zone is Zone.DIALOG:
            return self._dialog.move(action)
        return self._keyboard.move(action)

    def _apply(self, zone: Zone, outcome: NavOutcome) -> None:
        if outcome.intent is not None:
            self._events.publish(
                LauncherIntent(kind=outcome.intent, zone=zone, payload=outcome.payload)
            )
        if outcome.close_overlay:
            self._router.close_overlay()
        if outcome.hand_off is not None:
            self._router.hand_off(outcome.hand_off)
        if outcome.open_overlay is not None:
            self._prepare_overlay(outcome.open_overlay, outcome.payload)
            self._router.open_overlay(outcome.open_overlay)

    def _prepare_overlay(self, zone: Zone, payload: str) -> None:
        if zone is Zone.MODAL:
            self._modal.reset()
        elif zone is Zone.DIALOG:
            self._dialog.open(payload)
        elif zone is Zone.KEYBOARD:
            self._keyboard.open(payload)


__all__ = ["CHANNEL_GAMEPAD", "CHANNEL_KEYBOARD", "LauncherController"]
