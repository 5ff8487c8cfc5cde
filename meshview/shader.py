"""Shader program loading and the spinning model transform."""

from __future__ import annotations

import math
import os
from pathlib import Path

import numpy as np


class ShaderSourceError(OSError):
    """Raised when a shader source file cannot be read."""


def rotation(angle_degrees: float, axis) -> np.ndarray:
    """Return a 4x4 matrix rotating by ``angle_degrees`` around ``axis``."""
    direction = np.asarray(axis, dtype=np.float64)
    length = np.linalg.norm(direction)
    if direction.shape != (3,) or length == 0.0:
        raise ValueError("axis must be a non-zero 3-vector")
    x, y, z = direction / length
    angle = math.radians(angle_degrees)
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [c + t * x * x, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, c + t * y * y, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, c + t * z * z],
    ]
    return matrix


class Transform:
    """Model matrix that turns a little further on every step."""

    def __init__(self, yaw_step: float = 0.1, pitch_step: float = 0.03) -> None:
        self.matrix = np.identity(4)
        self._step = rotation(yaw_step, (0.0, 1.0, 0.0)) @ rotation(pitch_step, (1.0, 0.0, 0.0))

    def step(self) -> np.ndarray:
        """Advance the rotation once and return the new matrix."""
        self.matrix = self.matrix @ self._step
        return self.matrix


def read_shader_sources(
    vertex_path: str | os.PathLike[str], fragment_path: str | os.PathLike[str]
) -> tuple[str, str]:
    """Read the vertex and fragment shader sources."""
    try:
        vertex_code = Path(vertex_path).read_text(encoding="utf-8")
        fragment_code = Path(fragment_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ShaderSourceError(f"shader file not successfully read: {exc}") from exc
    return vertex_code, fragment_code


class Shader:
    """A linked GL program whose ``transform`` uniform spins each frame.

    Needs a current OpenGL context.
    """

    def __init__(
        self,
        vertex_path: str | os.PathLike[str],
        fragment_path: str | os.PathLike[str],
    ) -> None:
        from pyglet.graphics.shader import Shader as GLShader
        from pyglet.graphics.shader import ShaderProgram

        vertex_code, fragment_code = read_shader_sources(vertex_path, fragment_path)
        self.program = ShaderProgram(
            GLShader(vertex_code, "vertex"),
            GLShader(fragment_code, "fragment"),
        )
        self.transform = Transform()

    def use(self) -> None:
        """Bind the program and upload the next transform."""
        self.program.use()
        matrix = self.transform.step()
        # GL expects column-major order.
        self.program["transform"] = tuple(float(v) for v in matrix.T.flatten())