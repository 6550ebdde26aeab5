"""Public frame-host contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from navinput.api.config import NavInputConfig
from navinput.api.consumer import ActionHandler, Consumer, ConsumerOptions
from navinput.api.devices import DeviceSource


class InputHost(Protocol):
    """Frame driver shared by every consumer of one application."""

    @property
    def config(self) -> NavInputConfig:
        """Return resolved configuration."""

    def create_consumer(
        self,
        handler: ActionHandler,
        options: ConsumerOptions | None = None,
        *,
        name: str = "",
        mount: bool = True,
    ) -> Consumer:
        """Create (and by default mount) a consumer."""

    def release_consumer(self, consumer: Consumer) -> None:
        """Unmount and forget a consumer."""

    def step(self, now_ms: float | None = None) -> int:
        """Run one frame."""

    def run(
        self,
        *,
        max_frames: int | None = None,
        frame_interval_s: float = 1.0 / 60.0,
        should_stop: Callable[[], bool] | None = None,
    ) -> int:
        """Run a blocking frame loop."""

    def close(self) -> None:
        """Unmount all consumers."""


def create_input_host(
    source: DeviceSource,
    *,
    config: NavInputConfig | None = None,
) -> InputHost:
    """Create default frame host implementation."""
    from navinput.runtime.host import RuntimeInputHost

    return RuntimeInputHost(source, config=config)


__all__ = ["InputHost", "create_input_host"]
