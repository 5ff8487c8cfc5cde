"""Turning a loaded mesh into GPU buffers and drawing it as a wireframe."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from meshview.objloader import ObjModel, load_obj
from meshview.shader import Shader

DEFAULT_MODEL_PATH = Path("../../objects/monkey.obj")
DEFAULT_VERTEX_SHADER = Path("../../shaders/default.vert")
DEFAULT_FRAGMENT_SHADER = Path("../../shaders/default.frag")

COMPONENTS_PER_VERTEX = 3
CLEAR_COLOR = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class MeshBuffers:
    """Vertex and index data laid out the way the GPU takes it."""

    vertices: np.ndarray
    indices: np.ndarray

    @property
    def vertex_count(self) -> int:
        """Number of three-component positions in ``vertices``."""
        return len(self.vertices) // COMPONENTS_PER_VERTEX

    @property
    def index_count(self) -> int:
        """Number of entries in ``indices``."""
        return len(self.indices)

    @property
    def stride(self) -> int:
        """Size in bytes of one vertex position."""
        return COMPONENTS_PER_VERTEX * self.vertices.itemsize


def build_buffers(model: ObjModel) -> MeshBuffers:
    """Pack a model's positions as float32 and its face indices as uint32."""
    vertices = np.asarray(model.vertices, dtype=np.float32)
    raw_indices = np.asarray(model.indices, dtype=np.int64)
    if raw_indices.size and raw_indices.min() < 0:
        raise ValueError("face indices must refer to vertices counted from 1")
    return MeshBuffers(vertices=vertices, indices=raw_indices.astype(np.uint32))


def _position_attribute(program) -> str:
    attributes = program.attributes
    if not attributes:
        raise ValueError("shader program declares no vertex attributes")
    return min(attributes.items(), key=lambda item: item[1]["location"])[0]


class Renderer:
    """Draws one mesh as a spinning wireframe into a window.

    Needs the window's OpenGL context to be current.
    """

    def __init__(
        self,
        window,
        model: ObjModel | None = None,
        vertex_path: str | os.PathLike[str] = DEFAULT_VERTEX_SHADER,
        fragment_path: str | os.PathLike[str] = DEFAULT_FRAGMENT_SHADER,
    ) -> None:
        from pyglet import gl

        self.window = window
        self.shader = Shader(vertex_path, fragment_path)
        if model is None:
            model = load_obj(DEFAULT_MODEL_PATH)
        self.buffers = build_buffers(model)
        self._vertex_list = self._create_vertex_list()
        gl.glEnable(gl.GL_DEPTH_TEST)

    def _create_vertex_list(self):
        from pyglet import gl

        program = self.shader.program
        name = _position_attribute(program)
        return program.vertex_list_indexed(
            self.buffers.vertex_count,
            gl.GL_TRIANGLES,
            self.buffers.indices.tolist(),
            **{name: ("f", self.buffers.vertices.tolist())},
        )

    def render_cycle(self) -> None:
        """Clear, draw the mesh once, present the frame and handle events."""
        from pyglet import gl

        gl.glClearColor(*CLEAR_COLOR)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glPolygonMode(gl.GL_FRONT_AND_BACK, gl.GL_LINE)

        self.shader.use()
        self._vertex_list.draw(gl.GL_TRIANGLES)

        self.window.flip()
        self.window.dispatch_events()

    def close(self) -> None:
        """Release the GPU buffers."""
        if self._vertex_list is not None:
            self._vertex_list.delete()
            self._vertex_list = None