"""Keyboard and mouse state with edge detection between frames."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from .vector import Vector2


class MouseButton(enum.IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    BACK = 3
    FORWARD = 4


class InputManager:
    """Tracks which keys and buttons are held now and on the previous frame."""

    def __init__(self) -> None:
        self._keys: frozenset = frozenset()
        self._prev_keys: frozenset = frozenset()
        self._buttons: frozenset[MouseButton] = frozenset()
        self._prev_buttons: frozenset[MouseButton] = frozenset()
        self._mouse_position = Vector2()

    @property
    def mouse_position(self) -> Vector2:
        return self._mouse_position

    def update(
        self,
        keys: Iterable = (),
        mouse_buttons: Iterable[MouseButton] = (),
        mouse_position: tuple[float, float] | Vector2 = (0, 0),
    ) -> None:
        """Record the keys and buttons held this frame and the mouse position."""
        self._keys = frozenset(keys)
        self._buttons = frozenset(MouseButton(b) for b in mouse_buttons)
        x, y = mouse_position
        self._mouse_position = Vector2(float(x), float(y))

    def update_prev_input(self) -> None:
        """Make the current state the previous one, for the next frame's edges."""
        self._prev_keys = self._keys
        self._prev_buttons = self._buttons

    def key_down(self, key) -> bool:
        return key in self._keys

    def key_pressed(self, key) -> bool:
        return key in self._keys and key not in self._prev_keys

    def key_released(self, key) -> bool:
        return key in self._prev_keys and key not in self._keys

    def mouse_button_down(self, button: MouseButton) -> bool:
        return button in self._buttons

    def mouse_button_pressed(self, button: MouseButton) -> bool:
        return button in self._buttons and button not in self._prev_buttons

    def mouse_button_released(self, button: MouseButton) -> bool:
        return button in self._prev_buttons and button not in self._buttons