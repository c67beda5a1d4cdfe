"""Scene-level rendering: camera setup and submission of draw calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from hazel import render_command

if TYPE_CHECKING:
    from hazel.camera import OrthographicCamera
    from hazel.shader import Shader
    from hazel.vertex_array import VertexArray


def _identity() -> np.ndarray:
    return np.identity(4, dtype=np.float32)


@dataclass
class SceneData:
    """State shared by every submission within one scene."""

    view_projection_matrix: np.ndarray = field(default_factory=_identity)


_scene = SceneData()


def init() -> None:
    """Set up render state for the active rendering API."""
    render_command.init()


def begin_scene(camera: OrthographicCamera) -> None:
    """Start a scene seen through camera."""
    _scene.view_projection_matrix = np.array(camera.view_projection_matrix, dtype=np.float32)


def end_scene() -> None:
    """Finish the current scene; submissions are drawn immediately, so nothing is pending."""


def submit(
    shader: Shader, vertex_array: VertexArray, transform: np.ndarray | None = None
) -> None:
    """Draw vertex_array with shader, placed in the scene by transform."""
    model = _identity() if transform is None else np.asarray(transform, dtype=np.float32)
    shader.bind()
    shader.upload_uniform_mat4("u_ViewProjection", _scene.view_projection_matrix)  # type: ignore[attr-defined]
    shader.upload_uniform_mat4("u_Transform", model)  # type: ignore[attr-defined]
    vertex_array.bind()
    render_command.draw_indexed(vertex_array)


def scene_data() -> SceneData:
    """Return the data of the current scene."""
    return _scene