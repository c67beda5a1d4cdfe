"""Vertex layouts and the vertex and index buffer interfaces."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Sequence, Union

from hazel.log import core_assert
from hazel.renderer_api import API, get_api


class ShaderDataType(enum.Enum):
    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENT_COUNTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Return the size in bytes of one value of the given shader type."""
    size = _SIZES.get(data_type)
    core_assert(size is not None, "Unknown ShaderDataType!")
    return size  # type: ignore[return-value]


@dataclass(frozen=True)
class BufferElement:
    """One named attribute within a vertex layout."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    offset: int = 0

    def __post_init__(self) -> None:
        shader_data_type_size(self.data_type)

    @property
    def size(self) -> int:
        return shader_data_type_size(self.data_type)

    @property
    def component_count(self) -> int:
        count = _COMPONENT_COUNTS.get(self.data_type)
        core_assert(count is not None, "Unknown ShaderDataType!")
        return count  # type: ignore[return-value]


ElementSpec = Union[BufferElement, Sequence]


class BufferLayout:
    """Ordered vertex attributes with their byte offsets and the total stride."""

    def __init__(self, elements: Iterable[ElementSpec] = ()) -> None:
        placed: list[BufferElement] = []
        offset = 0
        for spec in elements:
            element = spec if isinstance(spec, BufferElement) else BufferElement(*spec)
            placed.append(replace(element, offset=offset))
            offset += element.size
        self._elements = tuple(placed)
        self._stride = offset

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def elements(self) -> tuple[BufferElement, ...]:
        return self._elements

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BufferLayout):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"BufferLayout({list(self._elements)!r})"


class VertexBuffer(abc.ABC):
    """GPU buffer of vertex data described by a layout."""

    layout: BufferLayout = BufferLayout()

    @abc.abstractmethod
    def bind(self) -> None:
        """Make this buffer current."""

    @abc.abstractmethod
    def unbind(self) -> None:
        """Clear the current vertex buffer."""


class IndexBuffer(abc.ABC):
    """GPU buffer of triangle indices."""

    @abc.abstractmethod
    def bind(self) -> None:
        """Make this buffer current."""

    @abc.abstractmethod
    def unbind(self) -> None:
        """Clear the current index buffer."""

    @property
    @abc.abstractmethod
    def count(self) -> int:
        """Number of indices held."""


def create_vertex_buffer(vertices: Sequence[float]) -> VertexBuffer:
    """Create a vertex buffer for the active rendering API."""
    api = get_api()
    core_assert(api is not API.NONE, "RendererAPI.NONE is currently not supported!")
    core_assert(api is API.OPENGL, "Unknown RendererAPI!")
    from hazel.gl_buffer import OpenGLVertexBuffer

    return OpenGLVertexBuffer(vertices)


def create_index_buffer(indices: Sequence[int]) -> IndexBuffer:
    """Create an index buffer for the active rendering API."""
    api = get_api()
    core_assert(api is not API.NONE, "RendererAPI.NONE is currently not supported!")
    core_assert(api is API.OPENGL, "Unknown RendererAPI!")
    from hazel.gl_buffer import OpenGLIndexBuffer

    return OpenGLIndexBuffer(indices)