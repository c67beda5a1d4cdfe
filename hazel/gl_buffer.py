"""OpenGL vertex and index buffers."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from hazel.buffer import BufferLayout, IndexBuffer, VertexBuffer


def _default_gl() -> Any:
    import pyglet.gl as gl

    return gl


def _generate_buffer(gl: Any) -> int:
    handle = gl.GLuint()
    gl.glGenBuffers(1, handle)
    return handle.value


class OpenGLVertexBuffer(VertexBuffer):
    """Vertex data uploaded once into an OpenGL array buffer."""

    def __init__(self, vertices: Sequence[float], gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()
        data = np.asarray(vertices, dtype=np.float32).tobytes()
        self.renderer_id = _generate_buffer(self._gl)
        self.size = len(data)
        self.layout = BufferLayout()
        self._gl.glBindBuffer(self._gl.GL_ARRAY_BUFFER, self.renderer_id)
        self._gl.glBufferData(self._gl.GL_ARRAY_BUFFER, self.size, data, self._gl.GL_STATIC_DRAW)

    def bind(self) -> None:
        self._gl.glBindBuffer(self._gl.GL_ARRAY_BUFFER, self.renderer_id)

    def unbind(self) -> None:
        self._gl.glBindBuffer(self._gl.GL_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        """Release the GPU buffer."""
        self._gl.glDeleteBuffers(1, self._gl.GLuint(self.renderer_id))


class OpenGLIndexBuffer(IndexBuffer):
    """Unsigned 32-bit triangle indices in an OpenGL buffer."""

    def __init__(self, indices: Sequence[int], gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()
        self._count = len(indices)
        data = np.asarray(indices, dtype=np.uint32).tobytes()
        self.renderer_id = _generate_buffer(self._gl)
        self._gl.glBindBuffer(self._gl.GL_ARRAY_BUFFER, self.renderer_id)
        self._gl.glBufferData(
            self._gl.GL_ARRAY_BUFFER, len(data), data, self._gl.GL_STATIC_DRAW
        )

    def bind(self) -> None:
        self._gl.glBindBuffer(self._gl.GL_ELEMENT_ARRAY_BUFFER, self.renderer_id)

    def unbind(self) -> None:
        self._gl.glBindBuffer(self._gl.GL_ELEMENT_ARRAY_BUFFER, 0)

    @property
    def count(self) -> int:
        return self._count

    def delete(self) -> None:
        """Release the GPU buffer."""
        self._gl.glDeleteBuffers(1, self._gl.GLuint(self.renderer_id))