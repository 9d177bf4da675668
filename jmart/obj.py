"""Collidable shelf slots with bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field

from jmart.vertex import Position

DEFAULT_NUMBER = 9


@dataclass
class Obj:
    """A bounding box that may hold an item identified by number."""

    maximum: Position = field(default_factory=Position)
    minimum: Position = field(default_factory=Position)
    empty: bool = False
    number: int = DEFAULT_NUMBER

    def set_bounds(self, maximum: Position, minimum: Position) -> None:
        """Replace both corners of the bounding box."""
        self.maximum = maximum
        self.minimum = minimum