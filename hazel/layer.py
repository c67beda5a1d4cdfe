"""Layers: units of per-frame update, UI drawing and event handling."""

from __future__ import annotations

from hazel.events import Event
from hazel.timestep import Timestep


class Layer:
    """A layer in the application's layer stack; subclasses override the hooks they need."""

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.last_timestep: Timestep | None = None
        self.ui_frames = 0
        self.last_event: Event | None = None

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is popped from a stack."""
        self.attached = False

    def on_update(self, timestep: Timestep) -> None:
        """Called once per frame with the time since the previous frame."""
        self.last_timestep = timestep

    def on_imgui_render(self) -> None:
        """Called once per frame while the debug UI is being built."""
        self.ui_frames += 1

    def on_event(self, event: Event) -> None:
        """Called for each event that reaches this layer; leaves it unhandled."""
        self.last_event = event

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"