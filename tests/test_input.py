import pytest

from hazel import input as hz_input
from hazel.input import InputBackend, Key, MouseButton


class FakeBackend(InputBackend):
    def __init__(self, keys=(), buttons=(), position=(0.0, 0.0)):
        self.keys = set(keys)
        self.buttons = set(buttons)
        self.position = position

    def key_pressed(self, keycode):
        return keycode in self.keys

    def mouse_button_pressed(self, button):
        return button in self.buttons

    def mouse_position(self):
        return self.position


@pytest.fixture
def backend():
    fake = FakeBackend(keys={Key.A, Key.LEFT}, buttons={MouseButton.LEFT}, position=(3.5, 7.25))
    previous = hz_input.set_backend(fake)
    yield fake
    hz_input.set_backend(previous)


def test_key_codes_match_glfw_values():
    assert Key(32) is Key.SPACE
    assert Key(65) is Key.A
    assert Key(256) is Key.ESCAPE
    assert Key(348) is Key.MENU


def test_mouse_button_aliases():
    assert MouseButton(0) is MouseButton.LEFT
    assert MouseButton(1) is MouseButton.RIGHT
    assert MouseButton(2) is MouseButton.MIDDLE
    assert MouseButton(7) is MouseButton.LAST


def test_key_pressed_delegates(backend):
    assert hz_input.is_key_pressed(Key.A) is True
    assert hz_input.is_key_pressed(Key.D) is False
    assert hz_input.is_key_pressed(263) is True


def test_mouse_button_pressed_delegates(backend):
    assert hz_input.is_mouse_button_pressed(MouseButton.LEFT) is True
    assert hz_input.is_mouse_button_pressed(MouseButton.RIGHT) is False


def test_mouse_position(backend):
    assert hz_input.get_mouse_position() == (3.5, 7.25)
    assert hz_input.get_mouse_x() == 3.5
    assert hz_input.get_mouse_y() == 7.25


def test_set_backend_returns_previous(backend):
    other = FakeBackend()
    assert hz_input.set_backend(other) is backend
    assert hz_input.set_backend(backend) is other


def test_no_backend_raises():
    previous = hz_input.set_backend(None)
    try:
        with pytest.raises(RuntimeError):
            hz_input.is_key_pressed(Key.A)
        with pytest.raises(RuntimeError):
            hz_input.get_mouse_position()
    finally:
        hz_input.set_backend(previous)


def test_backend_is_abstract():
    with pytest.raises(TypeError):
        InputBackend()