import pytest

from hazel import renderer_api
from hazel.log import HazelAssertionError
from hazel.renderer_api import API
from hazel.vertex_array import VertexArray, create_vertex_array


def test_vertex_array_is_abstract():
    with pytest.raises(TypeError):
        VertexArray()


def test_create_rejects_none_api(monkeypatch):
    monkeypatch.setattr(renderer_api, "_api", API.NONE)
    with pytest.raises(HazelAssertionError):
        create_vertex_array()