"""OpenGL shader programs and the single-file shader source format."""

from __future__ import annotations

import enum
from typing import Any, Sequence

import numpy as np

from hazel.log import core_assert, core_logger
from hazel.shader import Shader

TYPE_TOKEN = "#type"


class ShaderStage(enum.Enum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"


class ShaderCompileError(RuntimeError):
    """Raised when a shader stage fails to compile or a program fails to link."""


def _default_gl() -> Any:
    import pyglet.gl as gl

    return gl


def shader_type_from_string(type_name: str) -> ShaderStage:
    """Map a #type name to its stage; 'pixel' is a synonym for 'fragment'."""
    if type_name == "vertex":
        return ShaderStage.VERTEX
    if type_name in ("fragment", "pixel"):
        return ShaderStage.FRAGMENT
    core_assert(False, "Unknown shader type!")
    raise AssertionError("unreachable")


def _find_first_of(text: str, chars: str, start: int) -> int:
    return next((i for i in range(start, len(text)) if text[i] in chars), -1)


def _find_first_not_of(text: str, chars: str, start: int) -> int:
    return next((i for i in range(start, len(text)) if text[i] not in chars), -1)


def preprocess(source: str) -> dict[ShaderStage, str]:
    """Split a combined source into stages, each introduced by a '#type <name>' line."""
    sources: dict[ShaderStage, str] = {}
    pos = source.find(TYPE_TOKEN)
    while pos != -1:
        eol = _find_first_of(source, "\r\n", pos)
        core_assert(eol != -1, "Syntax error")
        begin = pos + len(TYPE_TOKEN) + 1
        stage = shader_type_from_string(source[begin:eol])
        next_line = _find_first_not_of(source, "\r\n", eol)
        if next_line == -1:
            sources[stage] = ""
            break
        pos = source.find(TYPE_TOKEN, next_line)
        sources[stage] = source[next_line:pos] if pos != -1 else source[next_line:]
    return sources


def read_file(filepath: str) -> str:
    """Return the file's text, or an empty string after logging if it cannot be read."""
    try:
        with open(filepath, "rb") as handle:
            return handle.read().decode("utf-8")
    except OSError:
        core_logger().error("Could not open file '%s'", filepath)
        return ""


def shader_name_from_path(filepath: str) -> str:
    """Return the file name without directory and without its last extension."""
    last_slash = max(filepath.rfind("/"), filepath.rfind("\\"))
    start = 0 if last_slash == -1 else last_slash + 1
    last_dot = filepath.rfind(".")
    if last_dot == -1 or last_dot < start:
        return filepath[start:]
    return filepath[start:last_dot]


def _c_string(gl: Any, text: str) -> Any:
    encoded = text.encode("utf-8") + b"\0"
    return (gl.GLchar * len(encoded)).from_buffer_copy(encoded)


def _column_major(gl: Any, matrix: Any, size: int) -> Any:
    m = np.asarray(matrix, dtype=np.float32).reshape(size, size)
    return (gl.GLfloat * (size * size))(*m.T.flatten().tolist())


class OpenGLShader(Shader):
    """A linked OpenGL program built from a vertex and a fragment stage."""

    def __init__(
        self, name: str, vertex_src: str, fragment_src: str, gl: Any = None
    ) -> None:
        self._setup(
            name,
            {ShaderStage.VERTEX: vertex_src, ShaderStage.FRAGMENT: fragment_src},
            gl,
        )

    @classmethod
    def from_file(cls, filepath: str) -> OpenGLShader:
        """Build a shader from a '#type'-sectioned file, named after the file."""
        sources = preprocess(read_file(filepath))
        shader = cls.__new__(cls)
        shader._setup(shader_name_from_path(filepath), sources, None)
        return shader

    def _setup(self, name: str, sources: dict[ShaderStage, str], gl: Any) -> None:
        self._gl = gl if gl is not None else _default_gl()
        self._name = name
        self.renderer_id = 0
        self._compile(sources)

    def _stage_enum(self, stage: ShaderStage) -> int:
        if stage is ShaderStage.VERTEX:
            return self._gl.GL_VERTEX_SHADER
        return self._gl.GL_FRAGMENT_SHADER

    def _set_source(self, shader: int, source: str) -> None:
        gl = self._gl
        encoded = source.encode("utf-8")
        text = _c_string(gl, source)
        # The element type of the source-string array the driver call expects.
        char_pointer = gl.glShaderSource.argtypes[2]._type_
        strings = (char_pointer * 1)(text)
        lengths = (gl.GLint * 1)(len(encoded))
        gl.glShaderSource(shader, 1, strings, lengths)

    def _compile(self, sources: dict[ShaderStage, str]) -> None:
        gl = self._gl
        core_assert(len(sources) <= 2, "We only support 2 shaders for now")
        program = gl.glCreateProgram()
        shader_ids: list[int] = []
        for stage, source in sources.items():
            shader = gl.glCreateShader(self._stage_enum(stage))
            self._set_source(shader, source)
            gl.glCompileShader(shader)
            status = gl.GLint(0)
            gl.glGetShaderiv(shader, gl.GL_COMPILE_STATUS, status)
            if not status.value:
                length = gl.GLint(0)
                gl.glGetShaderiv(shader, gl.GL_INFO_LOG_LENGTH, length)
                info = (gl.GLchar * max(length.value, 1))()
                gl.glGetShaderInfoLog(shader, length.value, None, info)
                gl.glDeleteShader(shader)
                message = info.value.decode("utf-8", "replace")
                core_logger().error("%s", message)
                raise ShaderCompileError(f"Shader compilation failure! {message}".strip())
            gl.glAttachShader(program, shader)
            shader_ids.append(shader)

        self.renderer_id = program
        gl.glLinkProgram(program)
        linked = gl.GLint(0)
        gl.glGetProgramiv(program, gl.GL_LINK_STATUS, linked)
        if not linked.value:
            length = gl.GLint(0)
            gl.glGetProgramiv(program, gl.GL_INFO_LOG_LENGTH, length)
            info = (gl.GLchar * max(length.value, 1))()
            gl.glGetProgramInfoLog(program, length.value, None, info)
            gl.glDeleteProgram(program)
            for shader_id in shader_ids:
                gl.glDeleteShader(shader_id)
            message = info.value.decode("utf-8", "replace")
            core_logger().error("%s", message)
            raise ShaderCompileError(f"Shader link failure! {message}".strip())
        for shader_id in shader_ids:
            gl.glDetachShader(program, shader_id)

    @property
    def name(self) -> str:
        return self._name

    def bind(self) -> None:
        self._gl.glUseProgram(self.renderer_id)

    def unbind(self) -> None:
        self._gl.glUseProgram(0)

    def delete(self) -> None:
        """Release the GPU program."""
        self._gl.glDeleteProgram(self.renderer_id)

    def _location(self, name: str) -> int:
        return self._gl.glGetUniformLocation(self.renderer_id, _c_string(self._gl, name))

    def upload_uniform_int(self, name: str, value: int) -> None:
        self._gl.glUniform1i(self._location(name), int(value))

    def upload_uniform_float(self, name: str, value: float) -> None:
        self._gl.glUniform1f(self._location(name), float(value))

    def upload_uniform_float2(self, name: str, value: Sequence[float]) -> None:
        x, y = (float(v) for v in value)
        self._gl.glUniform2f(self._location(name), x, y)

    def upload_uniform_float3(self, name: str, value: Sequence[float]) -> None:
        x, y, z = (float(v) for v in value)
        self._gl.glUniform3f(self._location(name), x, y, z)

    def upload_uniform_float4(self, name: str, value: Sequence[float]) -> None:
        x, y, z, w = (float(v) for v in value)
        self._gl.glUniform4f(self._location(name), x, y, z, w)

    def upload_uniform_mat3(self, name: str, matrix: Any) -> None:
        self._gl.glUniformMatrix3fv(
            self._location(name), 1, self._gl.GL_FALSE, _column_major(self._gl, matrix, 3)
        )

    def upload_uniform_mat4(self, name: str, matrix: Any) -> None:
        self._gl.glUniformMatrix4fv(
            self._location(name), 1, self._gl.GL_FALSE, _column_major(self._gl, matrix, 4)
        )