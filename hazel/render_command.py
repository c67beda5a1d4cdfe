"""Render commands forwarded to the active low-level rendering API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from hazel.renderer_api import RendererAPI

if TYPE_CHECKING:
    from hazel.vertex_array import VertexArray

_renderer_api: RendererAPI | None = None


def set_renderer_api(api: RendererAPI | None) -> RendererAPI | None:
    """Install the rendering API commands go to; return the previous one."""
    global _renderer_api
    previous, _renderer_api = _renderer_api, api
    return previous


def _current() -> RendererAPI:
    global _renderer_api
    if _renderer_api is None:
        from hazel.gl_renderer_api import OpenGLRendererAPI

        _renderer_api = OpenGLRendererAPI()
    return _renderer_api


def init() -> None:
    _current().init()


def set_clear_color(color: Sequence[float]) -> None:
    _current().set_clear_color(color)


def clear() -> None:
    _current().clear()


def draw_indexed(vertex_array: VertexArray) -> None:
    _current().draw_indexed(vertex_array)