"""Gamepad consumer: per-frame polling, key tracking and the enable gate."""

from __future__ import annotations

import logging

from navinput.api.actions import Action
from navinput.api.consumer import ActionHandler, ConsumerOptions, resolve_enabled
from navinput.api.devices import DeviceSource
from navinput.api.frames import FrameScheduler
from navinput.input.button_state import (
    IDLE,
    SUPPRESSED,
    ButtonState,
    RepeatTiming,
    advance,
)
from navinput.input.poller import ActionSignal, DevicePoller

logger = logging.getLogger(__name__)

ButtonKey = tuple[int, Action]


class GamepadConsumer:
    """Independent dispatcher instance with its own key-state table.

    Every tick the consumer polls its device source, samples its ``enabled``
    source once and advances each tracked key. Fires reach the handler only
    while enabled; the table keeps tracking physical reality while disabled.
    On the tick the gate reopens, and once at mount, every physically held key
    is suppressed until release so a press that belonged to another surface
    cannot fire here. The gate is sampled at mount as well, so a consumer that
    gains ownership on its very first tick still sees an edge.
    """

    def __init__(
        self,
        handler: ActionHandler,
        *,
        source: DeviceSource,
        frames: FrameScheduler,
        options: ConsumerOptions | None = None,
        name: str = "",
    ) -> None:
        resolved = options or ConsumerOptions()
        self._handler = handler
        self._source = source
        self._frames = frames
        self._enabled_source = resolved.enabled
        self._timing = RepeatTiming(
            delay_ms=resolved.repeat_delay_ms,
            interval_ms=resolved.repeat_interval_ms,
        )
        self._poller = DevicePoller(resolved.profile)
        self._states: dict[ButtonKey, ButtonState] = {}
        self._previous_enabled = True
        self._request_id: int | None = None
        self._mounted = False
        self._name = name or "consumer"
        self._trace = resolved.input_trace

    @property
    def name(self) -> str:
        return self._name

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def enabled_last_tick(self) -> bool:
        return self._previous_enabled

    @property
    def timing(self) -> RepeatTiming:
        return self._timing

    def state_for(self, device_index: int, action: Action) -> ButtonState:
        """Return tracked state for a key; unseen keys read as idle."""
        return self._states.get((device_index, action), IDLE)

    def tracked_keys(self) -> tuple[ButtonKey, ...]:
        return tuple(self._states)

    def mount(self) -> None:
        """Snapshot already-held buttons and the gate, then request the first tick."""
        if self._mounted:
            return
        self._suppress_held(self._poller.sample(self._source.poll()))
        self._previous_enabled = resolve_enabled(self._enabled_source)
        self._mounted = True
        self._request_id = self._frames.request_frame(self.tick)
        logger.debug(
            "consumer_mount name=%s suppressed=%d", self._name, len(self._states)
        )

    def unmount(self) -> None:
        """Cancel the pending tick and discard tracked state."""
        if not self._mounted:
            return
        self._mounted = False
        if self._request_id is not None:
            self._frames.cancel_frame(self._request_id)
            self._request_id = None
        self._states.clear()
        logger.debug("consumer_unmount name=%s", self._name)

    def tick(self, now_ms: float) -> None:
        """Process one frame and request the next one."""
        if not self._mounted:
            return
        self._request_id = None
        try:
            self._process(now_ms)
        finally:
            if self._mounted and self._request_id is None:
                self._request_id = self._frames.request_frame(self.tick)

    def _process(self, now_ms: float) -> None:
        signals = self._poller.sample(self._source.poll())
        enabled = resolve_enabled(self._enabled_source)
        if enabled and not self._previous_enabled:
            self._suppress_held(signals)
        self._previous_enabled = enabled

        for signal in signals:
            key = (signal.device_index, signal.action)
            step = advance(
                self._states.get(key, IDLE),
                physical=signal.physical,
                enabled=enabled,
                now_ms=now_ms,
                timing=self._timing,
            )
            self._states[key] = step.state
            if not step.fired:
                continue
            if self._trace:
                logger.debug(
                    "input_fire consumer=%s device=%d action=%s phase=%s t_ms=%.1f",
                    self._name,
                    signal.device_index,
                    signal.action.value,
                    "repeat" if step.repeat else "press",
                    now_ms,
                )
            self._handler(signal.action)
            if not self._mounted:
                # Handler tore this consumer down; stop touching its state.
                return

    def _suppress_held(self, signals: list[ActionSignal]) -> None:
        for signal in signals:
            if signal.physical:
                self._states[(signal.device_index, signal.action)] = SUPPRESSED


__all__ = ["ButtonKey", "GamepadConsumer"]
