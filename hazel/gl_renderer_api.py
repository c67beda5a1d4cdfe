"""OpenGL implementation of the rendering API and the window graphics context."""

from __future__ import annotations

import itertools
from typing import Any, Sequence

from hazel.log import core_assert, core_logger
from hazel.renderer_api import GraphicsContext, RendererAPI


def _default_gl() -> Any:
    import pyglet.gl as gl

    return gl


class OpenGLRendererAPI(RendererAPI):
    """Drawing operations issued through OpenGL."""

    def __init__(self, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()

    def init(self) -> None:
        self._gl.glEnable(self._gl.GL_BLEND)
        self._gl.glBlendFunc(self._gl.GL_SRC_ALPHA, self._gl.GL_ONE_MINUS_SRC_ALPHA)

    def set_clear_color(self, color: Sequence[float]) -> None:
        r, g, b, a = color
        self._gl.glClearColor(float(r), float(g), float(b), float(a))

    def clear(self) -> None:
        self._gl.glClear(self._gl.GL_COLOR_BUFFER_BIT | self._gl.GL_DEPTH_BUFFER_BIT)

    def draw_indexed(self, vertex_array: Any) -> None:
        self._gl.glDrawElements(
            self._gl.GL_TRIANGLES,
            vertex_array.index_buffer.count,
            self._gl.GL_UNSIGNED_INT,
            None,
        )


def _gl_string(gl: Any, name: int) -> str:
    value = gl.glGetString(name)
    if not value:
        return ""
    if not isinstance(value, bytes):
        # A pointer to a NUL-terminated byte string.
        value = bytes(itertools.takewhile(bool, (value[i] for i in itertools.count())))
    return value.decode("utf-8", "replace")


class OpenGLContext(GraphicsContext):
    """OpenGL context of a window that can switch_to() and flip()."""

    def __init__(self, window_handle: Any, gl: Any = None) -> None:
        core_assert(window_handle is not None, "Window handle is null!")
        self.window_handle = window_handle
        self._gl = gl if gl is not None else _default_gl()

    def init(self) -> None:
        self.window_handle.switch_to()
        log = core_logger()
        log.info("OpenGL Info:")
        log.info("  Vendor: %s", _gl_string(self._gl, self._gl.GL_VENDOR))
        log.info("  Renderer: %s", _gl_string(self._gl, self._gl.GL_RENDERER))
        log.info("  Version: %s", _gl_string(self._gl, self._gl.GL_VERSION))

    def swap_buffers(self) -> None:
        self.window_handle.flip()