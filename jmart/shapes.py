"""Builders for primitive meshes: axes, quads, cubes, circles, rings and spheres."""

from __future__ import annotations

import math

from jmart.mesh import DrawMode, Mesh
from jmart.vertex import Color, Position, TexCoord, Vertex

AXIS_EXTENT = 1000.0
UP = Position(0.0, 1.0, 0.0)


def _check_count(value: int, what: str) -> None:
    if value < 1:
        raise ValueError(f"{what} must be at least 1")


def _polar(radius: float, degrees: float) -> Position:
    angle = math.radians(degrees)
    return Position(radius * math.cos(angle), 0.0, radius * math.sin(angle))


def generate_axes(name: str, length_x: float, length_y: float, length_z: float) -> Mesh:
    """Reference axes drawn as lines: red x, green y, blue z.

    The lines span a fixed extent in each direction whatever lengths are given.
    """
    red, green, blue = Color(1, 0, 0), Color(0, 1, 0), Color(0, 0, 1)
    e = AXIS_EXTENT
    vertices = [
        Vertex(pos=Position(-e, 0, 0), color=red),
        Vertex(pos=Position(e, 0, 0), color=red),
        Vertex(pos=Position(0, -e, 0), color=green),
        Vertex(pos=Position(0, e, 0), color=green),
        Vertex(pos=Position(0, 0, -e), color=blue),
        Vertex(pos=Position(0, 0, e), color=blue),
    ]
    return Mesh(name, vertices, list(range(6)), DrawMode.LINES)


def generate_quad(name: str, color: Color, length_x: float, length_y: float) -> Mesh:
    """A unit-half-size quad lying in the xz plane, with texture coordinates."""
    corners = [
        (Position(-1.0, 0.0, 1.0), TexCoord(0, 1)),
        (Position(1.0, 0.0, 1.0), TexCoord(1, 1)),
        (Position(-1.0, 0.0, -1.0), TexCoord(0, 0)),
        (Position(1.0, 0.0, -1.0), TexCoord(1, 0)),
    ]
    vertices = [Vertex(pos=pos, color=color, tex_coord=uv) for pos, uv in corners]
    return Mesh(name, vertices, [2, 1, 3, 2, 0, 1], DrawMode.TRIANGLES)


_CUBE_INDICES = [
    7, 4, 6, 5, 6, 4,
    6, 5, 2, 1, 2, 5,
    3, 7, 2, 6, 2, 7,
    2, 1, 3, 0, 3, 1,
    3, 0, 7, 4, 7, 0,
    4, 0, 5, 1, 5, 0,
]


def generate_cube(
    name: str, color: Color, length_x: float, length_y: float, length_z: float
) -> Mesh:
    """A box centred on the origin, drawn as lines over its triangle edges."""
    hx, hy, hz = 0.5 * length_x, 0.5 * length_y, 0.5 * length_z
    corners = [
        (-hx, -hy, -hz), (hx, -hy, -hz), (hx, hy, -hz), (-hx, hy, -hz),
        (-hx, -hy, hz), (hx, -hy, hz), (hx, hy, hz), (-hx, hy, hz),
    ]
    vertices = [Vertex(pos=Position(*corner), color=color) for corner in corners]
    return Mesh(name, vertices, list(_CUBE_INDICES), DrawMode.LINES)


def generate_circle(name: str, color: Color, num_slice: int, radius: float) -> Mesh:
    """A flat disc in the xz plane made of one triangle per slice."""
    _check_count(num_slice, "num_slice")
    step = 360.0 / num_slice
    vertices: list[Vertex] = []
    for slice_no in range(num_slice):
        for pos in (
            _polar(radius, slice_no * step),
            Position(),
            _polar(radius, (slice_no + 1) * step),
        ):
            vertices.append(Vertex(pos=pos, color=color, normal=UP))
    return Mesh(name, vertices, list(range(3 * num_slice)), DrawMode.TRIANGLES)


def generate_ring(
    name: str, color: Color, num_slice: int, outer_r: float, inner_r: float
) -> Mesh:
    """A flat annulus in the xz plane made of two triangles per slice."""
    _check_count(num_slice, "num_slice")
    step = 360.0 / num_slice
    vertices: list[Vertex] = []
    indices: list[int] = []
    for slice_no in range(num_slice):
        theta, theta2 = slice_no * step, (slice_no + 1) * step
        for pos in (
            _polar(outer_r, theta),
            _polar(inner_r, theta),
            _polar(outer_r, theta2),
            _polar(inner_r, theta2),
        ):
            vertices.append(Vertex(pos=pos, color=color, normal=UP))
        base = 4 * slice_no
        indices.extend(base + n for n in (0, 1, 2, 3, 2, 1))
    return Mesh(name, vertices, indices, DrawMode.TRIANGLES)


def _sphere_point(phi: float, theta: float) -> Position:
    p, t = math.radians(phi), math.radians(theta)
    return Position(math.cos(p) * math.cos(t), math.sin(p), math.cos(p) * math.sin(t))


def generate_sphere(
    name: str, color: Color, num_stack: int, num_slice: int, radius: float
) -> Mesh:
    """A UV sphere centred on the origin, drawn as a triangle strip."""
    _check_count(num_stack, "num_stack")
    _check_count(num_slice, "num_slice")
    stack_step = 180.0 / num_stack
    slice_step = 360.0 / num_slice
    vertices: list[Vertex] = []
    for stack in range(num_stack + 1):
        phi = -90.0 + stack * stack_step
        for slice_no in range(num_slice + 1):
            unit = _sphere_point(phi, slice_no * slice_step)
            pos = Position(radius * unit.x, radius * unit.y, radius * unit.z)
            vertices.append(Vertex(pos=pos, color=color, normal=unit))
    row = num_slice + 1
    indices: list[int] = []
    for stack in range(num_stack):
        for slice_no in range(row):
            indices.append(stack * row + slice_no)
            indices.append((stack + 1) * row + slice_no)
    return Mesh(name, vertices, indices, DrawMode.TRIANGLE_STRIP)