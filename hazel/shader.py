"""Shader interface and a name-keyed library of shaders."""

from __future__ import annotations

import abc

from hazel.log import core_assert
from hazel.renderer_api import API, get_api


class Shader(abc.ABC):
    """A compiled GPU program."""

    @abc.abstractmethod
    def bind(self) -> None:
        """Make this program current."""

    @abc.abstractmethod
    def unbind(self) -> None:
        """Clear the current program."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """The name the shader is known by."""


def _require_opengl() -> None:
    api = get_api()
    core_assert(api is not API.NONE, "RendererAPI.NONE is currently not supported!")
    core_assert(api is API.OPENGL, "Unknown RendererAPI!")


def create_shader(filepath: str) -> Shader:
    """Load and compile a shader file for the active rendering API."""
    _require_opengl()
    from hazel.gl_shader import OpenGLShader

    return OpenGLShader.from_file(filepath)


def create_shader_from_sources(name: str, vertex_src: str, fragment_src: str) -> Shader:
    """Compile a shader from vertex and fragment sources for the active rendering API."""
    _require_opengl()
    from hazel.gl_shader import OpenGLShader

    return OpenGLShader(name, vertex_src, fragment_src)


class ShaderLibrary:
    """Shaders stored by name; each name may be used once."""

    def __init__(self) -> None:
        self._shaders: dict[str, Shader] = {}

    def add(self, shader: Shader, name: str | None = None) -> None:
        """Store a shader under name, or under its own name when none is given."""
        key = shader.name if name is None else name
        core_assert(not self.exists(key), "Shader already exists!")
        self._shaders[key] = shader

    def load(self, filepath: str, name: str | None = None) -> Shader:
        """Create a shader from a file, store it and return it."""
        shader = create_shader(filepath)
        self.add(shader, name)
        return shader

    def get(self, name: str) -> Shader:
        core_assert(self.exists(name), "Shader not found!")
        return self._shaders[name]

    def exists(self, name: str) -> bool:
        return name in self._shaders

    def __contains__(self, name: object) -> bool:
        return name in self._shaders