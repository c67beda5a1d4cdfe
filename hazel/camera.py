"""2D orthographic camera and the matrix helpers it uses.

Matrices are 4x4 float32 arrays in row-major order acting on column vectors.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

Vector3 = Union[Sequence[float], np.ndarray]


def ortho(
    left: float, right: float, bottom: float, top: float, z_near: float, z_far: float
) -> np.ndarray:
    """Return an orthographic projection mapping the given box to clip space."""
    m = np.identity(4, dtype=np.float32)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (z_far - z_near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(z_far + z_near) / (z_far - z_near)
    return m


def _vec3(value: Vector3) -> np.ndarray:
    vec = np.asarray(value, dtype=np.float32).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"expected 3 components, got {vec.shape[0]}")
    return vec.copy()


def translation(offset: Vector3) -> np.ndarray:
    """Return a matrix translating by offset."""
    m = np.identity(4, dtype=np.float32)
    m[:3, 3] = _vec3(offset)
    return m


def rotation_z(degrees: float) -> np.ndarray:
    """Return a matrix rotating counter-clockwise about the z axis."""
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    m = np.identity(4, dtype=np.float32)
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def scaling(factors: Union[float, Vector3]) -> np.ndarray:
    """Return a matrix scaling by one factor on every axis or by three per-axis factors."""
    vec = np.broadcast_to(np.asarray(factors, dtype=np.float32), (3,))
    return np.diag(np.append(vec, np.float32(1.0))).astype(np.float32)


def _readonly(matrix: np.ndarray) -> np.ndarray:
    view = matrix.view()
    view.flags.writeable = False
    return view


class OrthographicCamera:
    """Camera with an orthographic projection, a position and a rotation about z."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = ortho(left, right, bottom, top, -1.0, 1.0)
        self._position = np.zeros(3, dtype=np.float32)
        self._rotation = 0.0
        self._recalculate_view()

    @property
    def position(self) -> np.ndarray:
        return _readonly(self._position)

    @position.setter
    def position(self, value: Vector3) -> None:
        self._position = _vec3(value)
        self._recalculate_view()

    @property
    def rotation(self) -> float:
        """Rotation about z, in degrees."""
        return self._rotation

    @rotation.setter
    def rotation(self, degrees: float) -> None:
        self._rotation = float(degrees)
        self._recalculate_view()

    @property
    def projection_matrix(self) -> np.ndarray:
        return _readonly(self._projection)

    @property
    def view_matrix(self) -> np.ndarray:
        return _readonly(self._view)

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return _readonly(self._view_projection)

    def _recalculate_view(self) -> None:
        transform = translation(self._position) @ rotation_z(self._rotation)
        self._view = np.linalg.inv(transform).astype(np.float32)
        self._view_projection = (self._projection @ self._view).astype(np.float32)