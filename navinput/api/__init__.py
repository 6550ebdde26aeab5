"""Public navinput API contracts."""

from navinput.api.actions import DIRECTIONAL_ACTIONS, Action, parse_action
from navinput.api.config import NavInputConfig, load_config
from navinput.api.consumer import (
    ActionHandler,
    Consumer,
    ConsumerOptions,
    EnabledSource,
    create_consumer,
    resolve_enabled,
)
from navinput.api.devices import DeviceSource, DeviceState, create_device_source
from navinput.api.events import EventBus, Subscription, create_event_bus
from navinput.api.frames import FrameCallback, FrameScheduler, create_frame_scheduler
from navinput.api.host import InputHost, create_input_host
from navinput.api.input_events import KeyChannel, KeyEvent, create_key_channel, map_key_to_action
from navinput.api.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from navinput.api.profile import STANDARD_PROFILE, AxisMap, GamepadProfile, profile_from_mapping

__all__ = [
    "DIRECTIONAL_ACTIONS",
    "STANDARD_PROFILE",
    "Action",
    "ActionHandler",
    "AxisMap",
    "Consumer",
    "ConsumerOptions",
    "DeviceSource",
    "DeviceState",
    "EnabledSource",
    "EventBus",
    "FrameCallback",
    "FrameScheduler",
    "GamepadProfile",
    "InputHost",
    "KeyChannel",
    "KeyEvent",
    "LoggingConfig",
    "NavInputConfig",
    "Subscription",
    "configure_logging",
    "create_consumer",
    "create_device_source",
    "create_event_bus",
    "create_frame_scheduler",
    "create_input_host",
    "create_key_channel",
    "get_logger",
    "load_config",
    "map_key_to_action",
    "parse_action",
    "profile_from_mapping",
    "resolve_enabled",
    "shutdown_logging",
]
