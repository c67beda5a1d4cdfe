"""Rendering API selection and the low-level drawing and context interfaces."""

from __future__ import annotations

import abc
import enum
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from hazel.vertex_array import VertexArray


class API(enum.Enum):
    NONE = 0
    OPENGL = 1


_api = API.OPENGL


def get_api() -> API:
    """Return the rendering API in use."""
    return _api


class RendererAPI(abc.ABC):
    """Low-level drawing operations of one rendering API."""

    @abc.abstractmethod
    def init(self) -> None:
        """Set up global render state."""

    @abc.abstractmethod
    def set_clear_color(self, color: Sequence[float]) -> None:
        """Set the RGBA color used when clearing."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Clear the color and depth buffers."""

    @abc.abstractmethod
    def draw_indexed(self, vertex_array: VertexArray) -> None:
        """Draw the triangles of a vertex array through its index buffer."""


class GraphicsContext(abc.ABC):
    """A rendering context bound to a window."""

    @abc.abstractmethod
    def init(self) -> None:
        """Make the context current and ready for drawing."""

    @abc.abstractmethod
    def swap_buffers(self) -> None:
        """Present the back buffer."""