"""Meshes: vertex and index data with a draw mode and a material."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from jmart.vertex import Material, Vertex


class DrawMode(Enum):
    """How the index list of a mesh is assembled into primitives."""

    TRIANGLES = "triangles"
    TRIANGLE_STRIP = "triangle_strip"
    LINES = "lines"


@dataclass
class Mesh:
    """Vertex data, indices into it, and how to draw them."""

    name: str
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    mode: DrawMode = DrawMode.TRIANGLES
    texture_id: int = 0
    material: Material = field(default_factory=Material)

    @property
    def index_size(self) -> int:
        """Number of indices drawn by a full render."""
        return len(self.indices)

    @property
    def textured(self) -> bool:
        """True when a texture is bound to the mesh."""
        return self.texture_id > 0

    def index_range(self, offset: int, count: int) -> list[int]:
        """Return the ``count`` indices starting at ``offset``.

        This is the part of the index list a partial render draws, as used to
        draw one glyph of a text mesh.
        """
        if offset < 0 or count < 0:
            raise ValueError("offset and count must not be negative")
        if offset + count > len(self.indices):
            raise IndexError(
                f"range {offset}..{offset + count} exceeds {len(self.indices)} indices"
            )
        return self.indices[offset:offset + count]