"""Desktop windows that turn native input into engine events."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Callable

from hazel.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from hazel.input import Key, MouseButton
from hazel.log import core_logger
from hazel.renderer_api import GraphicsContext

EventCallback = Callable[[Event], None]


@dataclass
class WindowProps:
    """Title and initial size of a window."""

    title: str = "Hazel Engine"
    width: int = 1280
    height: int = 720


class Window(abc.ABC):
    """A desktop window that reports its events through one callback."""

    @abc.abstractmethod
    def on_update(self) -> None:
        """Process pending native events and present the frame."""

    @property
    @abc.abstractmethod
    def width(self) -> int:
        """Current width in pixels."""

    @property
    @abc.abstractmethod
    def height(self) -> int:
        """Current height in pixels."""

    @abc.abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Set the function every event is passed to."""

    @property
    @abc.abstractmethod
    def vsync(self) -> bool:
        """Whether buffer swaps wait for the vertical refresh."""

    @vsync.setter
    @abc.abstractmethod
    def vsync(self, enabled: bool) -> None: ...

    @property
    @abc.abstractmethod
    def native_window(self) -> Any:
        """The underlying platform window object."""


# Key symbols of the windowing toolkit mapped to engine key codes.
_KEY_MAP: dict[int, Key] = {k.value: k for k in Key if k.value < 128}
_KEY_MAP.update({ord(chr(k.value).lower()): k for k in Key if Key.A <= k <= Key.Z})
_KEY_MAP.update(
    {
        0xFF1B: Key.ESCAPE,
        0xFF0D: Key.ENTER,
        0xFF09: Key.TAB,
        0xFF08: Key.BACKSPACE,
        0xFF63: Key.INSERT,
        0xFFFF: Key.DELETE,
        0xFF53: Key.RIGHT,
        0xFF51: Key.LEFT,
        0xFF54: Key.DOWN,
        0xFF52: Key.UP,
        0xFF55: Key.PAGE_UP,
        0xFF56: Key.PAGE_DOWN,
        0xFF50: Key.HOME,
        0xFF57: Key.END,
        0xFFE5: Key.CAPS_LOCK,
        0xFF14: Key.SCROLL_LOCK,
        0xFF7F: Key.NUM_LOCK,
        0xFF61: Key.PRINT_SCREEN,
        0xFF13: Key.PAUSE,
        0xFFAE: Key.KP_DECIMAL,
        0xFFAF: Key.KP_DIVIDE,
        0xFFAA: Key.KP_MULTIPLY,
        0xFFAD: Key.KP_SUBTRACT,
        0xFFAB: Key.KP_ADD,
        0xFF8D: Key.KP_ENTER,
        0xFFBD: Key.KP_EQUAL,
        0xFFE1: Key.LEFT_SHIFT,
        0xFFE3: Key.LEFT_CONTROL,
        0xFFE9: Key.LEFT_ALT,
        0xFFEB: Key.LEFT_SUPER,
        0xFFE2: Key.RIGHT_SHIFT,
        0xFFE4: Key.RIGHT_CONTROL,
        0xFFEA: Key.RIGHT_ALT,
        0xFFEC: Key.RIGHT_SUPER,
        0xFF67: Key.MENU,
    }
)
_KEY_MAP.update({0xFFBE + i: Key(Key.F1 + i) for i in range(20)})
_KEY_MAP.update({0xFFB0 + i: Key(Key.KP_0 + i) for i in range(10)})

_MOUSE_MAP: dict[int, MouseButton] = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    4: MouseButton.RIGHT,
    8: MouseButton.BUTTON_4,
    16: MouseButton.BUTTON_5,
}


def to_key_code(symbol: int) -> Key | None:
    """Return the engine key for a toolkit key symbol, or None if it has none."""
    return _KEY_MAP.get(symbol)


def to_mouse_button(button: int) -> MouseButton | None:
    """Return the engine mouse button for a toolkit button, or None if it has none."""
    return _MOUSE_MAP.get(button)


def _create_native(props: WindowProps) -> Any:
    import pyglet

    return pyglet.window.Window(
        width=props.width, height=props.height, caption=props.title, resizable=True, vsync=True
    )


def _create_context(handle: Any) -> GraphicsContext:
    from hazel.gl_renderer_api import OpenGLContext

    return OpenGLContext(handle)


def _ignore(event: Event) -> None:
    """Default callback until one is set."""


class PygletWindow(Window):
    """A window backed by the pyglet toolkit with an OpenGL context."""

    def __init__(
        self,
        props: WindowProps | None = None,
        *,
        native_factory: Callable[[WindowProps], Any] | None = None,
        context_factory: Callable[[Any], GraphicsContext] | None = None,
    ) -> None:
        props = props if props is not None else WindowProps()
        self.title = props.title
        self._width = props.width
        self._height = props.height
        self._vsync = False
        self._callback: EventCallback = _ignore

        core_logger().info(
            "Creating window %s (%s, %s)", props.title, props.width, props.height
        )
        self._native = (native_factory or _create_native)(props)
        self._context = (context_factory or _create_context)(self._native)
        self._context.init()
        self.vsync = True

        self._native.push_handlers(
            on_resize=self._on_resize,
            on_close=self._on_close,
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_text=self._on_text,
            on_mouse_press=self._on_mouse_press,
            on_mouse_release=self._on_mouse_release,
            on_mouse_scroll=self._on_mouse_scroll,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
        )

    # Native handlers

    def _on_resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._callback(WindowResizeEvent(width, height))

    def _on_close(self) -> bool:
        self._callback(WindowCloseEvent())
        return True

    def _on_key_press(self, symbol: int, modifiers: int) -> None:
        key = to_key_code(symbol)
        if key is not None:
            self._callback(KeyPressedEvent(key, 0))

    def _on_key_release(self, symbol: int, modifiers: int) -> None:
        key = to_key_code(symbol)
        if key is not None:
            self._callback(KeyReleasedEvent(key))

    def _on_text(self, text: str) -> None:
        for char in text:
            self._callback(KeyTypedEvent(ord(char)))

    def _on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        mapped = to_mouse_button(button)
        if mapped is not None:
            self._callback(MouseButtonPressedEvent(mapped))

    def _on_mouse_release(self, x: int, y: int, button: int, modifiers: int) -> None:
        mapped = to_mouse_button(button)
        if mapped is not None:
            self._callback(MouseButtonReleasedEvent(mapped))

    def _on_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float) -> None:
        self._callback(MouseScrolledEvent(float(scroll_x), float(scroll_y)))

    def _on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        """Send the cursor position with y measured down from the top edge."""
        self._callback(MouseMovedEvent(float(x), float(self._height - y)))

    def _on_mouse_drag(
        self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int
    ) -> None:
        self._on_mouse_motion(x, y, dx, dy)

    # Window interface

    def on_update(self) -> None:
        self._native.dispatch_events()
        self._context.swap_buffers()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_event_callback(self, callback: EventCallback) -> None:
        self._callback = callback

    @property
    def vsync(self) -> bool:
        return self._vsync

    @vsync.setter
    def vsync(self, enabled: bool) -> None:
        self._native.set_vsync(bool(enabled))
        self._vsync = bool(enabled)

    @property
    def native_window(self) -> Any:
        return self._native

    def close(self) -> None:
        """Destroy the native window."""
        self._native.close()


def create_window(props: WindowProps | None = None) -> Window:
    """Create a window for the current platform."""
    return PygletWindow(props if props is not None else WindowProps())