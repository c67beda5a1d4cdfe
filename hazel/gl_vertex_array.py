"""OpenGL vertex array objects."""

from __future__ import annotations

from typing import Any

from hazel.buffer import IndexBuffer, ShaderDataType, VertexBuffer
from hazel.log import core_assert
from hazel.vertex_array import VertexArray

# Component type enumerants fixed by the OpenGL specification.
_GL_INT = 0x1404
_GL_FLOAT = 0x1406
_GL_BOOL = 0x8B56

_BASE_TYPES = {
    ShaderDataType.FLOAT: _GL_FLOAT,
    ShaderDataType.FLOAT2: _GL_FLOAT,
    ShaderDataType.FLOAT3: _GL_FLOAT,
    ShaderDataType.FLOAT4: _GL_FLOAT,
    ShaderDataType.MAT3: _GL_FLOAT,
    ShaderDataType.MAT4: _GL_FLOAT,
    ShaderDataType.INT: _GL_INT,
    ShaderDataType.INT2: _GL_INT,
    ShaderDataType.INT3: _GL_INT,
    ShaderDataType.INT4: _GL_INT,
    ShaderDataType.BOOL: _GL_BOOL,
}


def _default_gl() -> Any:
    import pyglet.gl as gl

    return gl


def shader_data_type_to_gl_base_type(data_type: ShaderDataType) -> int:
    """Return the OpenGL component type of a shader data type."""
    base_type = _BASE_TYPES.get(data_type)
    core_assert(base_type is not None, "Unknown ShaderDataType!")
    return base_type  # type: ignore[return-value]


class OpenGLVertexArray(VertexArray):
    """An OpenGL vertex array whose attributes are numbered across all added buffers."""

    def __init__(self, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()
        handle = self._gl.GLuint()
        self._gl.glCreateVertexArrays(1, handle)
        self.renderer_id = handle.value
        self._attribute_index = 0
        self._vertex_buffers: list[VertexBuffer] = []
        self._index_buffer: IndexBuffer | None = None

    def bind(self) -> None:
        self._gl.glBindVertexArray(self.renderer_id)

    def unbind(self) -> None:
        self._gl.glBindVertexArray(0)

    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        layout = vertex_buffer.layout
        core_assert(len(layout) > 0, "Vertex Buffer has no layout!")
        gl = self._gl
        gl.glBindVertexArray(self.renderer_id)
        vertex_buffer.bind()
        for element in layout:
            gl.glEnableVertexAttribArray(self._attribute_index)
            gl.glVertexAttribPointer(
                self._attribute_index,
                element.component_count,
                shader_data_type_to_gl_base_type(element.data_type),
                gl.GL_TRUE if element.normalized else gl.GL_FALSE,
                layout.stride,
                element.offset,
            )
            self._attribute_index += 1
        self._vertex_buffers.append(vertex_buffer)

    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        self._gl.glBindVertexArray(self.renderer_id)
        index_buffer.bind()
        self._index_buffer = index_buffer

    @property
    def vertex_buffers(self) -> list[VertexBuffer]:
        return list(self._vertex_buffers)

    @property
    def index_buffer(self) -> IndexBuffer | None:
        return self._index_buffer

    def delete(self) -> None:
        """Release the GPU vertex array."""
        self._gl.glDeleteVertexArrays(1, self._gl.GLuint(self.renderer_id))