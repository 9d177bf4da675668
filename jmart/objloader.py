"""Wavefront OBJ reading and vertex de-duplication."""

from __future__ import annotations

import os
import re
import struct
from collections.abc import Iterable, Sequence

from jmart.vertex import Color, Position, TexCoord, Vertex

_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT = re.compile(r"\s*([+-]?\d+)")
_TRIANGLE_FIELDS = 9
_QUAD_FIELDS = 12


class ObjParseError(ValueError):
    """Raised when an OBJ file cannot be read by the parser."""


def _scan_floats(text: str, limit: int) -> list[float]:
    values: list[float] = []
    pos = 0
    while len(values) < limit:
        match = _FLOAT.match(text, pos)
        if not match:
            break
        values.append(float(match.group(1)))
        pos = match.end()
    return values


def _scan_face(text: str) -> list[int]:
    values: list[int] = []
    pos = 0
    for field_no in range(_QUAD_FIELDS):
        if field_no % 3:
            if not text.startswith("/", pos):
                break
            pos += 1
        match = _INT.match(text, pos)
        if not match:
            break
        values.append(int(match.group(1)))
        pos = match.end()
    return values


def _lookup(table: Sequence, index: int, what: str, line: str):
    if not 1 <= index <= len(table):
        raise ObjParseError(f"{what} index {index} out of range in line: {line}")
    return table[index - 1]


def parse_obj(
    lines: Iterable[str],
) -> tuple[list[Position], list[TexCoord], list[Position]]:
    """Read OBJ text and return per-corner positions, texture coordinates and normals.

    Triangles and quads with ``v/vt/vn`` corners are supported; quads are split
    into two triangles.
    """
    positions: list[Position] = []
    uvs: list[TexCoord] = []
    normals: list[Position] = []
    corners: list[tuple[int, int, int, str]] = []

    for raw in lines:
        line = raw.rstrip("\n")
        if line.startswith("v "):
            positions.append(Position(*_scan_floats(line[2:], 3)))
        elif line.startswith("vt "):
            uvs.append(TexCoord(*_scan_floats(line[2:], 2)))
        elif line.startswith("vn "):
            normals.append(Position(*_scan_floats(line[2:], 3)))
        elif line.startswith("f "):
            fields = _scan_face(line[2:])
            triples = [tuple(fields[n:n + 3]) for n in range(0, len(fields), 3)]
            if len(fields) == _TRIANGLE_FIELDS:
                order = (0, 1, 2)
            elif len(fields) == _QUAD_FIELDS:
                order = (0, 1, 2, 2, 3, 0)
            else:
                raise ObjParseError(f"file can't be read by parser, line: {line}")
            corners.extend((*triples[n], line) for n in order)

    out_positions: list[Position] = []
    out_uvs: list[TexCoord] = []
    out_normals: list[Position] = []
    for vertex_index, uv_index, normal_index, line in corners:
        out_positions.append(_lookup(positions, vertex_index, "vertex", line))
        out_uvs.append(_lookup(uvs, uv_index, "texture", line))
        out_normals.append(_lookup(normals, normal_index, "normal", line))
    return out_positions, out_uvs, out_normals


def load_obj(
    path: str | os.PathLike[str],
) -> tuple[list[Position], list[TexCoord], list[Position]]:
    """Read an OBJ file from disk; see :func:`parse_obj`."""
    with open(path, encoding="utf-8", errors="replace") as stream:
        return parse_obj(stream)


def _packed_key(position: Position, uv: TexCoord, normal: Position) -> bytes:
    return struct.pack("<8f", *position, *uv, *normal)


def index_vbo(
    positions: Sequence[Position],
    uvs: Sequence[TexCoord],
    normals: Sequence[Position],
) -> tuple[list[int], list[Vertex]]:
    """Merge identical corners into shared vertices.

    Returns the index list and the unique vertices, coloured white.
    """
    seen: dict[bytes, int] = {}
    indices: list[int] = []
    vertices: list[Vertex] = []
    try:
        triples = list(zip(positions, uvs, normals, strict=True))
    except ValueError as exc:
        raise ValueError("positions, uvs and normals must have the same length") from exc
    for position, uv, normal in triples:
        key = _packed_key(position, uv, normal)
        index = seen.get(key)
        if index is None:
            vertices.append(
                Vertex(pos=position, color=Color(), normal=normal, tex_coord=uv)
            )
            index = len(vertices) - 1
            seen[key] = index
        indices.append(index)
    return indices, vertices