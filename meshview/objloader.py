"""Reading Wavefront OBJ meshes into flat vertex and index lists."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field


class ObjParseError(ValueError):
    """Raised when a line of an OBJ file cannot be understood."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"line {line_number}: {reason}: {line!r}")
        self.line_number = line_number
        self.line = line


@dataclass
class ObjModel:
    """Geometry read from an OBJ file.

    ``vertices`` and ``normals`` are flat lists of floats, in file order.
    ``indices`` holds zero-based vertex indices taken from the face records.
    """

    vertices: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


def _parse_floats(values: list[str], line_number: int, line: str) -> list[float]:
    try:
        return [float(value) for value in values]
    except ValueError as exc:
        raise ObjParseError(line_number, line, "invalid number") from exc


def _parse_face(values: list[str], line_number: int, line: str) -> list[int]:
    indices = []
    for value in values:
        vertex_ref = value.split("/", 1)[0]
        try:
            indices.append(int(vertex_ref) - 1)
        except ValueError as exc:
            raise ObjParseError(line_number, line, "invalid face index") from exc
    return indices


def parse_obj(lines: Iterable[str] | str) -> ObjModel:
    """Parse OBJ text, given as a string or as an iterable of lines."""
    if isinstance(lines, str):
        lines = lines.splitlines()

    model = ObjModel()
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line or line.startswith("#"):
            continue
        keyword, *values = line.split()
        if keyword not in ("v", "vn", "f"):
            continue
        if not values:
            raise ObjParseError(line_number, line, f"'{keyword}' record without values")
        if keyword == "v":
            model.vertices.extend(_parse_floats(values, line_number, line))
        elif keyword == "vn":
            model.normals.extend(_parse_floats(values, line_number, line))
        else:
            model.indices.extend(_parse_face(values, line_number, line))
    return model


def load_obj(path: str | os.PathLike[str]) -> ObjModel:
    """Read and parse the OBJ file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)