"""Shop items held on shelves, in the inventory and on the checklist."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Item:
    """A named item with a description and a count."""

    name: str = ""
    description: str = ""
    count: int = 0

    def clear(self) -> None:
        """Reset the item to an empty, nameless entry."""
        self.name = ""
        self.description = ""
        self.count = 0