"""Single-threaded frame host driving every mounted consumer."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from navinput.api.config import NavInputConfig
from navinput.api.consumer import ActionHandler, ConsumerOptions
from navinput.api.devices import DeviceSource
from navinput.input.consumer import GamepadConsumer
from navinput.runtime.config import load_navinput_config
from navinput.runtime.scheduler import RuntimeFrameScheduler
from navinput.runtime.time import MillisecondClock

logger = logging.getLogger(__name__)


class RuntimeInputHost:
    """Own the frame scheduler, device source and clock for a set of consumers."""

    def __init__(
        self,
        source: DeviceSource,
        *,
        clock: MillisecondClock | None = None,
        config: NavInputConfig | None = None,
    ) -> None:
        self._source = source
        self._clock = clock or MillisecondClock()
        self._config = config or load_navinput_config()
        self._frames = RuntimeFrameScheduler()
        self._consumers: list[GamepadConsumer] = []

    @property
    def source(self) -> DeviceSource:
        return self._source

    @property
    def frames(self) -> RuntimeFrameScheduler:
        return self._frames

    @property
    def config(self) -> NavInputConfig:
        return self._config

    def consumers(self) -> tuple[GamepadConsumer, ...]:
        return tuple(self._consumers)

    def create_consumer(
        self,
        handler: ActionHandler,
        options: ConsumerOptions | None = None,
        *,
        name: str = "",
        mount: bool = True,
    ) -> GamepadConsumer:
        """Build a consumer bound to this host; mounted unless told otherwise."""
        consumer = GamepadConsumer(
            handler,
            source=self._source,
            frames=self._frames,
            options=options or ConsumerOptions.from_config(self._config),
            name=name,
        )
        self._consumers.append(consumer)
        if mount:
            consumer.mount()
        return consumer

    def release_consumer(self, consumer: GamepadConsumer) -> None:
        """Unmount and forget a consumer."""
        consumer.unmount()
        if consumer in self._consumers:
            self._consumers.remove(consumer)

    def step(self, now_ms: float | None = None) -> int:
        """Run one frame; return number of consumer ticks executed."""
        timestamp = self._clock.now_ms() if now_ms is None else now_ms
        return self._frames.run_frame(timestamp)

    def run(
        self,
        *,
        max_frames: int | None = None,
        frame_interval_s: float = 1.0 / 60.0,
        should_stop: Callable[[], bool] | None = None,
    ) -> int:
        """Blocking frame loop; return number of frames run."""
        frames_run = 0
        while max_frames is None or frames_run < max_frames:
            if should_stop is not None and should_stop():
                break
            started = time.perf_counter()
            self.step()
            frames_run += 1
            remaining = frame_interval_s - (time.perf_counter() - started)
            if remaining > 0.0:
                time.sleep(remaining)
        logger.debug("host_run_stopped frames=%d", frames_run)
        return frames_run

    def close(self) -> None:
        """Unmount every consumer created by this host."""
        for consumer in tuple(self._consumers):
            consumer.unmount()
        self._consumers.clear()


InputHost = RuntimeInputHost
