import numpy as np
import pytest

from hazel.gl_shader import (
    OpenGLShader,
    ShaderCompileError,
    ShaderStage,
    preprocess,
    read_file,
    shader_name_from_path,
    shader_type_from_string,
)
from hazel.log import HazelAssertionError


class FakeGL:
    def __init__(self, compile_ok=1, link_ok=1):
        self.calls = []
        self._consts = {}
        self.compile_ok = compile_ok
        self.link_ok = link_ok
        self._next_shader = 10

    def __getattr__(self, name):
        if name.startswith("GL_"):
            return self._consts.setdefault(name, 1 << len(self._consts))
        if name.startswith("gl"):
            def fn(*args):
                self.calls.append((name, args))
                if name == "glCreateProgram":
                    return 3
                if name == "glCreateShader":
                    self._next_shader += 1
                    return self._next_shader
                if name == "glGetUniformLocation":
                    return 5
                if name == "glGetShaderiv" and args[1] == self.GL_COMPILE_STATUS:
                    args[2]._obj.value = self.compile_ok
                if name == "glGetProgramiv" and args[1] == self.GL_LINK_STATUS:
                    args[2]._obj.value = self.link_ok
                return None
            return fn
        raise AttributeError(name)

    def named(self, name):
        return [args for n, args in self.calls if n == name]


def test_shader_type_names():
    assert shader_type_from_string("vertex") is ShaderStage.VERTEX
    assert shader_type_from_string("fragment") is ShaderStage.FRAGMENT
    assert shader_type_from_string("pixel") is ShaderStage.FRAGMENT
    with pytest.raises(HazelAssertionError):
        shader_type_from_string("geometry")


def test_preprocess_splits_sections():
    source = "#type vertex\nAAA\n#type fragment\nBBB\n"
    assert preprocess(source) == {ShaderStage.VERTEX: "AAA\n", ShaderStage.FRAGMENT: "BBB\n"}


def test_preprocess_without_sections_is_empty():
    assert preprocess("void main() {}") == {}


def test_preprocess_errors():
    with pytest.raises(HazelAssertionError):
        preprocess("#type vertex")
    with pytest.raises(HazelAssertionError):
        preprocess("#type compute\nX\n")


def test_shader_name_from_path():
    assert shader_name_from_path("assets/shaders/Texture.glsl") == "Texture"
    assert shader_name_from_path("C:\\shaders\\Flat.glsl") == "Flat"
    assert shader_name_from_path("Plain") == "Plain"
    assert shader_name_from_path("dir.d/Plain") == "Plain"


def test_read_file(tmp_path):
    path = tmp_path / "s.glsl"
    path.write_text("#type vertex\nX\n")
    assert read_file(str(path)) == "#type vertex\nX\n"
    assert read_file(str(tmp_path / "missing.glsl")) == ""


def test_compile_links_and_detaches():
    gl = FakeGL()
    shader = OpenGLShader("Flat", "v", "f", gl=gl)
    assert shader.name == "Flat"
    assert shader.renderer_id == 3
    assert len(gl.named("glAttachShader")) == 2
    assert len(gl.named("glDetachShader")) == 2
    assert gl.named("glLinkProgram") == [(3,)]


def test_compile_failure_raises():
    gl = FakeGL(compile_ok=0)
    with pytest.raises(ShaderCompileError):
        OpenGLShader("Bad", "v", "f", gl=gl)
    assert len(gl.named("glDeleteShader")) == 1


def test_link_failure_raises_and_cleans_up():
    gl = FakeGL(link_ok=0)
    with pytest.raises(ShaderCompileError):
        OpenGLShader("Bad", "v", "f", gl=gl)
    assert gl.named("glDeleteProgram") == [(3,)]
    assert len(gl.named("glDeleteShader")) == 2


def test_shader_file_sections_and_name(tmp_path):
    path = tmp_path / "Texture.glsl"
    path.write_text("#type vertex\nV\n#type fragment\nF\n")
    sources = preprocess(read_file(str(path)))
    assert sources == {ShaderStage.VERTEX: "V\n", ShaderStage.FRAGMENT: "F\n"}
    assert shader_name_from_path(str(path)) == "Texture"


def test_bind_unbind_delete():
    gl = FakeGL()
    shader = OpenGLShader("S", "v", "f", gl=gl)
    shader.bind()
    shader.unbind()
    shader.delete()
    assert gl.named("glUseProgram") == [(3,), (0,)]
    assert gl.named("glDeleteProgram") == [(3,)]


def test_scalar_and_vector_uniforms():
    gl = FakeGL()
    shader = OpenGLShader("S", "v", "f", gl=gl)
    shader.upload_uniform_int("u_Texture", 0)
    shader.upload_uniform_float("u_F", 0.5)
    shader.upload_uniform_float2("u_V2", (1, 2))
    shader.upload_uniform_float3("u_Color", (0.25, 0.5, 1.0))
    shader.upload_uniform_float4("u_V4", (1, 2, 3, 4))
    assert gl.named("glUniform1i") == [(5, 0)]
    assert gl.named("glUniform1f") == [(5, 0.5)]
    assert gl.named("glUniform2f") == [(5, 1.0, 2.0)]
    assert gl.named("glUniform3f") == [(5, 0.25, 0.5, 1.0)]
    assert gl.named("glUniform4f") == [(5, 1.0, 2.0, 3.0, 4.0)]
    assert gl.named("glGetUniformLocation")[0] == (3, b"u_Texture")


def test_matrix_uniform_is_column_major():
    gl = FakeGL()
    shader = OpenGLShader("S", "v", "f", gl=gl)
    matrix = np.arange(16, dtype=np.float32).reshape(4, 4)
    shader.upload_uniform_mat4("u_Transform", matrix)
    location, count, transpose, data = gl.named("glUniformMatrix4fv")[0]
    assert (location, count, transpose) == (5, 1, gl.GL_FALSE)
    assert list(data) == matrix.T.flatten().tolist()
    m3 = np.arange(9, dtype=np.float32).reshape(3, 3)
    shader.upload_uniform_mat3("u_M3", m3)
    assert list(gl.named("glUniformMatrix3fv")[0][3]) == m3.T.flatten().tolist()