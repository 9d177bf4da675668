"""Builders for loaded and textured meshes: OBJ models, text, pictures and solids."""

from __future__ import annotations

import math
import os
from collections.abc import Sequence

from jmart.mesh import DrawMode, Mesh
from jmart.objloader import index_vbo, load_obj
from jmart.vertex import Color, Position, TexCoord, Vertex

GLYPH_CELL_PIXELS = 64
GLYPHS_PER_ROW = 16
_QUAD_CORNERS = (
    Position(-0.5, -0.5, 0.0),
    Position(0.5, -0.5, 0.0),
    Position(0.5, 0.5, 0.0),
    Position(-0.5, 0.5, 0.0),
)
_QUAD_INDICES = (0, 1, 2, 0, 2, 3)


def _check_count(value: int, what: str) -> None:
    if value < 1:
        raise ValueError(f"{what} must be at least 1")


def generate_obj(name: str, file_path: str | os.PathLike[str]) -> Mesh:
    """Load an OBJ model and index its corners into a triangle mesh.

    Raises ``OSError`` when the file cannot be opened and
    :class:`~jmart.objloader.ObjParseError` when it cannot be parsed.
    """
    positions, uvs, normals = load_obj(file_path)
    indices, vertices = index_vbo(positions, uvs, normals)
    return Mesh(name, vertices, indices, DrawMode.TRIANGLES)


def _grid_mesh(name: str, num_row: int, num_col: int, widths: Sequence[float]) -> Mesh:
    """One textured quad per cell of a ``num_row`` by ``num_col`` texture atlas."""
    cell_w = 1.0 / num_col
    cell_h = 1.0 / num_row
    vertices: list[Vertex] = []
    indices: list[int] = []
    cells = ((row, col) for row in range(num_row) for col in range(num_col))
    for (row, col), glyph_w in zip(cells, widths):
        u1 = col * cell_w
        v1 = 1.0 - cell_h - row * cell_h
        uvs = (
            TexCoord(u1, v1),
            TexCoord(u1 + glyph_w, v1),
            TexCoord(u1 + glyph_w, v1 + cell_h),
            TexCoord(u1, v1 + cell_h),
        )
        base = len(vertices)
        vertices.extend(
            Vertex(pos=pos, tex_coord=uv) for pos, uv in zip(_QUAD_CORNERS, uvs)
        )
        indices.extend(base + n for n in _QUAD_INDICES)
    return Mesh(name, vertices, indices, DrawMode.TRIANGLES)


def generate_text(
    name: str, num_row: int, num_col: int, font: Sequence[float]
) -> Mesh:
    """A font atlas mesh with one quad per glyph.

    ``font`` holds the pixel width of each glyph, in row order; each glyph quad
    is cut to that width within its cell.
    """
    _check_count(num_row, "num_row")
    _check_count(num_col, "num_col")
    cells = num_row * num_col
    if len(font) < cells:
        raise ValueError(f"font needs {cells} glyph widths, got {len(font)}")
    widths = [w / GLYPH_CELL_PIXELS / GLYPHS_PER_ROW for w in font[:cells]]
    return _grid_mesh(name, num_row, num_col, widths)


def generate_picture(name: str, num_row: int, num_col: int) -> Mesh:
    """A picture atlas mesh with one full-cell quad per cell."""
    _check_count(num_row, "num_row")
    _check_count(num_col, "num_col")
    return _grid_mesh(name, num_row, num_col, [1.0 / num_col] * (num_row * num_col))


def generate_triangle(
    name: str, color: Color, length_x: float, length_y: float
) -> Mesh:
    """An upright triangle facing +z, its apex ``length_y`` above its base."""
    normal = Position(0.0, 0.0, 1.0)
    corners = (
        Position(0.0, length_y, 1.0),
        Position(-0.5 * length_x, 0.0, 1.0),
        Position(0.5 * length_x, 0.0, 1.0),
    )
    vertices = [Vertex(pos=pos, color=color, normal=normal) for pos in corners]
    return Mesh(name, vertices, [0, 1, 2], DrawMode.TRIANGLES)


_STAR_POINTS = (
    (0.0, 3.0, 4.0), (0.0, 3.0, -4.0), (0.0, -1.0, 0.0),
    (0.0, 6.0, 0.0), (0.0, -2.0, -3.0), (0.0, -1.0, 0.0),
    (0.0, 6.0, 0.0), (0.0, -1.0, 0.0), (0.0, -2.0, 3.0),
)


def generate_star(name: str, color: Color, length_x: float, length_y: float) -> Mesh:
    """A fixed-size star of three triangles in the yz plane, facing -x."""
    normal = Position(-1.0, 0.0, 0.0)
    vertices = [
        Vertex(pos=Position(*point), color=color, normal=normal)
        for point in _STAR_POINTS
    ]
    return Mesh(name, vertices, list(range(len(vertices))), DrawMode.TRIANGLES)


def generate_cylinder(
    name: str,
    color: Color,
    num_stack: int,
    num_slice: int,
    height: float,
    radius: float,
) -> Mesh:
    """A capped cylinder around the y axis, centred on the origin, as a triangle strip."""
    _check_count(num_stack, "num_stack")
    _check_count(num_slice, "num_slice")
    slice_step = 360.0 / num_slice
    stack_height = height / num_stack
    half = height / 2.0
    angles = [math.radians(n * slice_step) for n in range(num_slice + 1)]
    rims = [(math.cos(a), math.sin(a)) for a in angles]
    vertices: list[Vertex] = []

    for stack in range(num_stack):
        low = -half + stack * stack_height
        high = -half + (stack + 1) * stack_height
        for cx, cz in rims:
            side = Position(cx, 0.0, cz)
            vertices.append(
                Vertex(pos=Position(radius * cx, low, radius * cz), color=color, normal=side)
            )
            vertices.append(
                Vertex(pos=Position(radius * cx, high, radius * cz), color=color, normal=side)
            )

    up = Position(0.0, 1.0, 0.0)
    for cx, cz in rims:
        vertices.append(
            Vertex(pos=Position(radius * cx, half, radius * cz), color=color, normal=up)
        )
        vertices.append(Vertex(pos=Position(0.0, half, 0.0), color=color, normal=up))

    down = Position(0.0, -1.0, 0.0)
    for cx, cz in rims:
        vertices.append(Vertex(pos=Position(0.0, -half, 0.0), color=color, normal=down))
        vertices.append(
            Vertex(pos=Position(radius * cx, -half, radius * cz), color=color, normal=down)
        )

    return Mesh(name, vertices, list(range(len(vertices))), DrawMode.TRIANGLE_STRIP)