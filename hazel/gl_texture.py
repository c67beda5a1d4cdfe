"""OpenGL 2D textures loaded from image files."""

from __future__ import annotations

from typing import Any

from PIL import Image

from hazel.log import core_assert
from hazel.texture import Texture2D


def _default_gl() -> Any:
    import pyglet.gl as gl

    return gl


def load_image(path: str) -> tuple[int, int, int, bytes]:
    """Return (width, height, channels, pixels) with rows flipped bottom-up."""
    try:
        with Image.open(path) as img:
            img.load()
            flipped = img.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    except OSError:
        core_assert(False, "Failed to load image!")
        raise
    return flipped.width, flipped.height, len(flipped.getbands()), flipped.tobytes()


class OpenGLTexture2D(Texture2D):
    """An RGB or RGBA image stored in an immutable OpenGL texture."""

    def __init__(self, path: str, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()
        self.path = path
        width, height, channels, pixels = load_image(path)
        self._width = width
        self._height = height
        gl = self._gl
        if channels == 4:
            internal_format, data_format = gl.GL_RGBA8, gl.GL_RGBA
        elif channels == 3:
            internal_format, data_format = gl.GL_RGB8, gl.GL_RGB
        else:
            internal_format = data_format = 0
        core_assert(internal_format and data_format, "Format not supported!")

        handle = gl.GLuint()
        gl.glCreateTextures(gl.GL_TEXTURE_2D, 1, handle)
        self.renderer_id = handle.value
        gl.glTextureStorage2D(self.renderer_id, 1, internal_format, width, height)
        gl.glTextureParameteri(self.renderer_id, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
        gl.glTextureParameteri(self.renderer_id, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
        gl.glTextureSubImage2D(
            self.renderer_id, 0, 0, 0, width, height, data_format, gl.GL_UNSIGNED_BYTE, pixels
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def bind(self, slot: int = 0) -> None:
        self._gl.glBindTextureUnit(slot, self.renderer_id)

    def delete(self) -> None:
        """Release the GPU texture."""
        self._gl.glDeleteTextures(1, self._gl.GLuint(self.renderer_id))