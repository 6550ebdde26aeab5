"""GLFW-backed joystick/gamepad device source."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import glfw

from navinput.api.devices import DeviceState

logger = logging.getLogger(__name__)

# W3C standard-gamepad slot -> GLFW gamepad button. Slots 6/7 are the analog
# triggers, which GLFW reports as axes.
_STANDARD_BUTTON_SOURCES: tuple[int | None, ...] = (
    glfw.GAMEPAD_BUTTON_A,
    glfw.GAMEPAD_BUTTON_B,
    glfw.GAMEPAD_BUTTON_X,
    glfw.GAMEPAD_BUTTON_Y,
    glfw.GAMEPAD_BUTTON_LEFT_BUMPER,
    glfw.GAMEPAD_BUTTON_RIGHT_BUMPER,
    None,
    None,
    glfw.GAMEPAD_BUTTON_BACK,
    glfw.GAMEPAD_BUTTON_START,
    glfw.GAMEPAD_BUTTON_LEFT_THUMB,
    glfw.GAMEPAD_BUTTON_RIGHT_THUMB,
    glfw.GAMEPAD_BUTTON_DPAD_UP,
    glfw.GAMEPAD_BUTTON_DPAD_DOWN,
    glfw.GAMEPAD_BUTTON_DPAD_LEFT,
    glfw.GAMEPAD_BUTTON_DPAD_RIGHT,
    glfw.GAMEPAD_BUTTON_GUIDE,
)
_STANDARD_TRIGGER_AXES = {
    6: glfw.GAMEPAD_AXIS_LEFT_TRIGGER,
    7: glfw.GAMEPAD_AXIS_RIGHT_TRIGGER,
}
_STANDARD_STICK_AXES = (
    glfw.GAMEPAD_AXIS_LEFT_X,
    glfw.GAMEPAD_AXIS_LEFT_Y,
    glfw.GAMEPAD_AXIS_RIGHT_X,
    glfw.GAMEPAD_AXIS_RIGHT_Y,
)


def standard_state_from_gamepad(
    index: int,
    buttons: Sequence[int],
    axes: Sequence[float],
    *,
    name: str = "",
) -> DeviceState:
    """Reorder a GLFW gamepad state into W3C standard-gamepad layout."""
    standard_buttons: list[bool] = []
    for slot, source in enumerate(_STANDARD_BUTTON_SOURCES):
        if source is None:
            trigger_axis = _STANDARD_TRIGGER_AXES[slot]
            # GLFW triggers rest at -1.0 and reach 1.0 when fully pulled.
            standard_buttons.append(_at(axes, trigger_axis, -1.0) > 0.0)
            continue
        standard_buttons.append(int(_at(buttons, source, 0)) == glfw.PRESS)
    standard_axes = tuple(float(_at(axes, axis, 0.0)) for axis in _STANDARD_STICK_AXES)
    return DeviceState(
        index=index,
        buttons=tuple(standard_buttons),
        axes=standard_axes,
        name=name,
    )


def load_gamepad_mappings(path: str | Path) -> bool:
    """Load an SDL_GameControllerDB file into GLFW."""
    mappings_path = Path(path)
    if not mappings_path.exists():
        logger.warning("gamepad_mappings_missing path=%s", mappings_path)
        return False
    content = mappings_path.read_text(encoding="utf-8")
    loaded = bool(glfw.update_gamepad_mappings(content))
    logger.info("gamepad_mappings_loaded path=%s ok=%s", mappings_path, loaded)
    return loaded


class GlfwDeviceSource:
    """Poll GLFW joystick slots into device snapshots.

    Joysticks with a known gamepad mapping are exposed in standard layout;
    unmapped joysticks expose their raw button and axis arrays.
    """

    def __init__(self, *, max_devices: int = 16, mappings_path: str | None = None) -> None:
        self._max_devices = max(1, min(int(max_devices), glfw.JOYSTICK_LAST + 1))
        self._available = bool(glfw.init())
        if not self._available:
            logger.warning("glfw_init_failed devices=disabled")
            return
        if mappings_path:
            load_gamepad_mappings(mappings_path)

    @property
    def available(self) -> bool:
        return self._available

    def poll(self) -> list[DeviceState | None]:
        """Return one slot per joystick id; absent joysticks are `None`."""
        if not self._available:
            return []
        slots: list[DeviceState | None] = []
        for joystick_id in range(glfw.JOYSTICK_1, glfw.JOYSTICK_1 + self._max_devices):
            slots.append(self._read_slot(joystick_id))
        return slots

    def close(self) -> None:
        if self._available:
            glfw.terminate()
            self._available = False

    def _read_slot(self, joystick_id: int) -> DeviceState | None:
        try:
            if not glfw.joystick_present(joystick_id):
                return None
            index = joystick_id - glfw.JOYSTICK_1
            if glfw.joystick_is_gamepad(joystick_id):
                state = glfw.get_gamepad_state(joystick_id)
                if state:
                    return standard_state_from_gamepad(
                        index,
                        state.buttons,
                        state.axes,
                        name=_text(glfw.get_gamepad_name(joystick_id)),
                    )
            buttons = _read_array(glfw.get_joystick_buttons(joystick_id))
            axes = _read_array(glfw.get_joystick_axes(joystick_id))
            return DeviceState(
                index=index,
                buttons=tuple(int(value) == glfw.PRESS for value in buttons),
                axes=tuple(float(value) for value in axes),
                name=_text(glfw.get_joystick_name(joystick_id)),
            )
        except (glfw.GLFWError, OSError):
            # Slot reads as disconnected for this poll.
            logger.warning("glfw_joystick_read_failed joystick=%d", joystick_id, exc_info=True)
            return None


def _read_array(result: Any) -> list[Any]:
    # pyGLFW returns (pointer, count); some builds return a plain sequence.
    if result is None:
        return []
    if (
        isinstance(result, tuple)
        and len(result) == 2
        and isinstance(result[1], int)
        and not isinstance(result[0], (int, float))
    ):
        values, count = result
        return [values[i] for i in range(count)] if count > 0 else []
    return list(result)


def _at(values: Sequence[Any], index: int, default: Any) -> Any:
    if 0 <= index < len(values):
        return values[index]
    return default


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


__all__ = ["GlfwDeviceSource", "load_gamepad_mappings", "standard_state_from_gamepad"]
