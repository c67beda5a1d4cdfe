"""Texture interfaces."""

from __future__ import annotations

import abc

from hazel.log import core_assert
from hazel.renderer_api import API, get_api


class Texture(abc.ABC):
    """An image held by the GPU."""

    @property
    @abc.abstractmethod
    def width(self) -> int:
        """Width in pixels."""

    @property
    @abc.abstractmethod
    def height(self) -> int:
        """Height in pixels."""

    @abc.abstractmethod
    def bind(self, slot: int = 0) -> None:
        """Bind the texture to a texture unit."""


class Texture2D(Texture):
    """A two-dimensional texture."""


def create_texture2d(path: str) -> Texture2D:
    """Load an image file into a 2D texture for the active rendering API."""
    api = get_api()
    core_assert(api is not API.NONE, "RendererAPI.NONE is currently not supported!")
    core_assert(api is API.OPENGL, "Unknown RendererAPI!")
    from hazel.gl_texture import OpenGLTexture2D

    return OpenGLTexture2D(path)