"""Blocking window, application and input events and their dispatcher."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, ClassVar, TypeVar


def bit(x: int) -> int:
    """Return an integer with only bit x set."""
    return 1 << x


class EventType(enum.Enum):
    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15


class EventCategory(enum.IntFlag):
    NONE = 0
    APPLICATION = bit(0)
    INPUT = bit(1)
    KEYBOARD = bit(2)
    MOUSE = bit(3)
    MOUSE_BUTTON = bit(4)


@dataclass
class Event:
    """Base of all events; concrete kinds set event_type, name and category_flags."""

    event_type: ClassVar[EventType | None] = None
    name: ClassVar[str] = ""
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    handled: bool = field(default=False, kw_only=True, compare=False)

    def __post_init__(self) -> None:
        if type(self).event_type is None:
            raise TypeError(f"{type(self).__name__} is not a concrete event type")

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler when the event is of the exact requested kind."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call func if the event matches event_class; its result marks the event handled."""
        if event_class.event_type is None or self.event.event_type != event_class.event_type:
            return False
        self.event.handled = bool(func(self.event))  # type: ignore[arg-type]
        return True


def _num(value: float) -> str:
    return f"{value:g}"


# Application events


@dataclass
class WindowResizeEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    name: ClassVar[str] = "WindowResize"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    width: int
    height: int

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


@dataclass
class WindowCloseEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    name: ClassVar[str] = "WindowClose"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppTickEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_TICK
    name: ClassVar[str] = "AppTick"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppUpdateEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_UPDATE
    name: ClassVar[str] = "AppUpdate"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppRenderEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_RENDER
    name: ClassVar[str] = "AppRender"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


# Key events


@dataclass
class KeyEvent(Event):
    category_flags: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT

    key_code: int


@dataclass
class KeyPressedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_PRESSED
    name: ClassVar[str] = "KeyPressed"

    repeat_count: int = 0

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ({self.repeat_count} repeats)"


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_RELEASED
    name: ClassVar[str] = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


@dataclass
class KeyTypedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_TYPED
    name: ClassVar[str] = "KeyTyped"

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self.key_code}"


# Mouse events


@dataclass
class MouseMovedEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_MOVED
    name: ClassVar[str] = "MouseMoved"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    x: float
    y: float

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self.x)}, {_num(self.y)}"


@dataclass
class MouseScrolledEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLLED
    name: ClassVar[str] = "MouseScrolled"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    x_offset: float
    y_offset: float

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self.x_offset)}, {_num(self.y_offset)}"


@dataclass
class MouseButtonEvent(Event):
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    button: int


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED
    name: ClassVar[str] = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED
    name: ClassVar[str] = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"