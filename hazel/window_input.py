"""Input state kept up to date from window events."""

from __future__ import annotations

from hazel.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
)
from hazel.input import InputBackend


class WindowInput(InputBackend):
    """Input backend that remembers held keys, held buttons and the cursor position."""

    def __init__(self) -> None:
        self._keys: set[int] = set()
        self._buttons: set[int] = set()
        self._position: tuple[float, float] = (0.0, 0.0)

    def key_pressed(self, keycode: int) -> bool:
        return int(keycode) in self._keys

    def mouse_button_pressed(self, button: int) -> bool:
        return int(button) in self._buttons

    def mouse_position(self) -> tuple[float, float]:
        return self._position

    def mouse_x(self) -> float:
        return self._position[0]

    def mouse_y(self) -> float:
        return self._position[1]

    def on_event(self, event: Event) -> None:
        """Update the remembered state from an event; the event is left unhandled."""
        if isinstance(event, KeyPressedEvent):
            self._keys.add(int(event.key_code))
        elif isinstance(event, KeyReleasedEvent):
            self._keys.discard(int(event.key_code))
        elif isinstance(event, MouseButtonPressedEvent):
            self._buttons.add(int(event.button))
        elif isinstance(event, MouseButtonReleasedEvent):
            self._buttons.discard(int(event.button))
        elif isinstance(event, MouseMovedEvent):
            self._position = (float(event.x), float(event.y))