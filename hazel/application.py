"""The application: owns the window and layer stack and runs the frame loop."""

from __future__ import annotations

import time
from typing import Callable, ClassVar

from hazel import input as hazel_input
from hazel import log, renderer
from hazel.events import Event, EventDispatcher, WindowCloseEvent
from hazel.layer import Layer
from hazel.layer_stack import LayerStack
from hazel.log import HazelAssertionError
from hazel.timestep import Timestep
from hazel.window import Window, create_window
from hazel.window_input import WindowInput


class ApplicationExistsError(HazelAssertionError):
    """Raised when a second application is created while one is alive."""


class Application:
    """The single running application; subclasses push their layers in __init__."""

    _instance: ClassVar[Application | None] = None

    def __init__(
        self,
        window: Window | None = None,
        *,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if Application._instance is not None:
            log.core_logger().error("Assertion Failed: %s", "Application already exists!")
            raise ApplicationExistsError("Application already exists!")
        Application._instance = self
        self._closed = False
        try:
            self._window = window if window is not None else create_window()
            self._window.set_event_callback(self.on_event)
            self._input = WindowInput()
            self._previous_backend = hazel_input.set_backend(self._input)
            renderer.init()
        except BaseException:
            Application._instance = None
            raise
        self._layer_stack = LayerStack()
        self._running = True
        self._clock = clock
        self._last_frame_time = clock()

    @property
    def window(self) -> Window:
        return self._window

    @property
    def running(self) -> bool:
        return self._running

    def push_layer(self, layer: Layer) -> None:
        self._layer_stack.push_layer(layer)

    def push_overlay(self, overlay: Layer) -> None:
        self._layer_stack.push_overlay(overlay)

    def on_event(self, event: Event) -> None:
        """Handle window closing, record input state, then offer the event top-down to layers."""
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_close)
        self._input.on_event(event)
        for layer in reversed(self._layer_stack):
            layer.on_event(event)
            if event.handled:
                break

    def run(self) -> None:
        """Update and draw every layer once per frame until the application stops."""
        while self._running:
            now = self._clock()
            timestep = Timestep(now - self._last_frame_time)
            self._last_frame_time = now

            for layer in self._layer_stack:
                layer.on_update(timestep)
            for layer in self._layer_stack:
                layer.on_imgui_render()

            self._window.on_update()

    def close(self) -> None:
        """Stop the frame loop, close the window and release the application slot."""
        if self._closed:
            return
        self._closed = True
        self._running = False
        closer = getattr(self._window, "close", None)
        if callable(closer):
            closer()
        current = hazel_input.set_backend(self._previous_backend)
        if current is not self._input:
            hazel_input.set_backend(current)
        if Application._instance is self:
            Application._instance = None

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True


def get_application() -> Application:
    """Return the running application."""
    if Application._instance is None:
        raise RuntimeError("no application is running")
    return Application._instance


def run_application(factory: Callable[[], Application]) -> Application:
    """Set up logging, create the application, run it to completion and close it."""
    log.init()
    log.core_logger().warning("Initialized Log!")
    app = factory()
    try:
        app.run()
    finally:
        app.close()
    return app