from hazel.events import (
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
)
from hazel.input import Key, MouseButton
from hazel.window_input import WindowInput


def test_nothing_pressed_initially():
    backend = WindowInput()
    assert backend.key_pressed(Key.A) is False
    assert backend.mouse_button_pressed(MouseButton.LEFT) is False
    assert backend.mouse_position() == (0.0, 0.0)


def test_key_press_and_release():
    backend = WindowInput()
    backend.on_event(KeyPressedEvent(Key.A, 0))
    assert backend.key_pressed(Key.A) is True
    assert backend.key_pressed(Key.B) is False
    backend.on_event(KeyReleasedEvent(Key.A))
    assert backend.key_pressed(Key.A) is False


def test_typed_event_does_not_hold_key():
    backend = WindowInput()
    backend.on_event(KeyTypedEvent(Key.A))
    assert backend.key_pressed(Key.A) is False


def test_mouse_button_press_and_release():
    backend = WindowInput()
    backend.on_event(MouseButtonPressedEvent(MouseButton.RIGHT))
    assert backend.mouse_button_pressed(MouseButton.RIGHT) is True
    backend.on_event(MouseButtonReleasedEvent(MouseButton.RIGHT))
    assert backend.mouse_button_pressed(MouseButton.RIGHT) is False


def test_mouse_position_follows_moves():
    backend = WindowInput()
    backend.on_event(MouseMovedEvent(3.5, 7.0))
    assert backend.mouse_position() == (3.5, 7.0)
    assert backend.mouse_x() == 3.5
    assert backend.mouse_y() == 7.0


def test_events_are_left_unhandled():
    backend = WindowInput()
    event = KeyPressedEvent(Key.SPACE, 0)
    backend.on_event(event)
    assert event.handled is False