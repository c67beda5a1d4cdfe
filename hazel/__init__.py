"""A layered game engine with events, input polling, an orthographic camera and an OpenGL renderer."""

__version__ = "0.1.0"