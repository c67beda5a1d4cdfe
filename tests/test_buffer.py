import pytest

from hazel import renderer_api
from hazel.buffer import (
    BufferElement,
    BufferLayout,
    IndexBuffer,
    ShaderDataType,
    VertexBuffer,
    create_index_buffer,
    create_vertex_buffer,
    shader_data_type_size,
)
from hazel.log import HazelAssertionError
from hazel.renderer_api import API


def test_pinned_sizes_and_counts():
    assert shader_data_type_size(ShaderDataType.MAT4) == 4 * 4 * 4
    assert shader_data_type_size(ShaderDataType.BOOL) == 1
    assert BufferElement(ShaderDataType.MAT3, "m").component_count == 3 * 3


@pytest.mark.parametrize(
    "data_type",
    [t for t in ShaderDataType if t is not ShaderDataType.NONE],
)
def test_size_is_consistent_with_components(data_type):
    element = BufferElement(data_type, "x")
    if data_type is ShaderDataType.BOOL:
        assert element.size == element.component_count
    else:
        assert element.size == 4 * element.component_count


def test_none_type_is_rejected():
    with pytest.raises(HazelAssertionError):
        shader_data_type_size(ShaderDataType.NONE)
    with pytest.raises(HazelAssertionError):
        BufferElement(ShaderDataType.NONE, "x")


def test_layout_offsets_and_stride():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT4, "a_Color"),
            BufferElement(ShaderDataType.FLOAT2, "a_TexCoord"),
        ]
    )
    elements = list(layout)
    assert [e.name for e in elements] == ["a_Position", "a_Color", "a_TexCoord"]
    assert elements[0].offset == 0
    assert elements[1].offset == elements[0].size
    assert elements[2].offset == elements[0].size + elements[1].size
    assert layout.stride == sum(e.size for e in elements)
    assert len(layout) == len(layout.elements)


def test_layout_accepts_tuples():
    from_tuples = BufferLayout(
        [(ShaderDataType.FLOAT3, "a_Position"), (ShaderDataType.FLOAT2, "a_TexCoord", True)]
    )
    from_elements = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT2, "a_TexCoord", True),
        ]
    )
    assert from_tuples == from_elements
    assert from_tuples.elements[1].normalized is True


def test_empty_layout():
    layout = BufferLayout()
    assert layout.stride == 0
    assert len(layout) == 0


def test_buffers_are_abstract():
    with pytest.raises(TypeError):
        VertexBuffer()
    with pytest.raises(TypeError):
        IndexBuffer()


def test_factories_reject_none_api(monkeypatch):
    monkeypatch.setattr(renderer_api, "_api", API.NONE)
    with pytest.raises(HazelAssertionError):
        create_vertex_buffer([0.0, 1.0, 2.0])
    with pytest.raises(HazelAssertionError):
        create_index_buffer([0, 1, 2])