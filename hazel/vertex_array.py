"""Vertex array interface tying vertex buffers to an index buffer."""

from __future__ import annotations

import abc

from hazel.buffer import IndexBuffer, VertexBuffer
from hazel.log import core_assert
from hazel.renderer_api import API, get_api


class VertexArray(abc.ABC):
    """A set of vertex buffers and one index buffer drawn together."""

    @abc.abstractmethod
    def bind(self) -> None:
        """Make this vertex array current."""

    @abc.abstractmethod
    def unbind(self) -> None:
        """Clear the current vertex array."""

    @abc.abstractmethod
    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        """Attach a vertex buffer and enable the attributes of its layout."""

    @abc.abstractmethod
    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        """Attach the index buffer used for drawing."""

    @property
    @abc.abstractmethod
    def vertex_buffers(self) -> list[VertexBuffer]:
        """The attached vertex buffers, in the order they were added."""

    @property
    @abc.abstractmethod
    def index_buffer(self) -> IndexBuffer | None:
        """The attached index buffer, if any."""


def create_vertex_array() -> VertexArray:
    """Create a vertex array for the active rendering API."""
    api = get_api()
    core_assert(api is not API.NONE, "RendererAPI.NONE is currently not supported!")
    core_assert(api is API.OPENGL, "Unknown RendererAPI!")
    from hazel.gl_vertex_array import OpenGLVertexArray

    return OpenGLVertexArray()