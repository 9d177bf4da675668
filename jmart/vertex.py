"""Geometry and shading value types: positions, colours, vertices, materials, lights."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


@dataclass(frozen=True)
class Position:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


@dataclass(frozen=True)
class TexCoord:
    """A texture coordinate."""

    u: float = 0.0
    v: float = 0.0

    def __iter__(self):
        yield self.u
        yield self.v


@dataclass(frozen=True)
class Color:
    """An RGB colour; white by default."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex with position, colour, normal and texture coordinate."""

    pos: Position = field(default_factory=Position)
    color: Color = field(default_factory=Color)
    normal: Position = field(default_factory=Position)
    tex_coord: TexCoord = field(default_factory=TexCoord)


@dataclass(frozen=True)
class Component:
    """One RGB term of a material."""

    r: float = 0.1
    g: float = 0.1
    b: float = 0.1

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b


@dataclass
class Material:
    """Phong material coefficients."""

    ambient: Component = field(default_factory=lambda: Component(0.6, 0.6, 0.6))
    diffuse: Component = field(default_factory=lambda: Component(0.3, 0.3, 0.3))
    specular: Component = field(default_factory=lambda: Component(0.1, 0.1, 0.1))
    shininess: float = 10.0


class LightType(IntEnum):
    """Kinds of light source."""

    POINT = 0
    DIRECTIONAL = 1
    SPOT = 2


@dataclass
class Light:
    """A light source with attenuation and spot parameters."""

    position: Position = field(default_factory=Position)
    color: Color = field(default_factory=Color)
    power: float = 1.0
    k_c: float = 1.0
    k_l: float = 0.0
    k_q: float = 0.0
    type: LightType = LightType.POINT
    spot_direction: Position = field(default_factory=lambda: Position(0.0, 1.0, 0.0))
    cos_cutoff: float = 0.0
    cos_inner: float = 0.0
    exponent: float = 0.0