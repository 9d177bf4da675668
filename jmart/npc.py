"""Non-player characters and their lines."""

from __future__ import annotations

from dataclasses import dataclass, field

DIALOGUE_SLOTS = 6


@dataclass
class Npc:
    """A character in the shop with a name, a role and dialogue lines."""

    name: str = ""
    role: str = ""
    dialogue: list[str] = field(default_factory=lambda: [""] * DIALOGUE_SLOTS)

    def cashier_welcome(self) -> str:
        """Greeting spoken by a cashier."""
        return "Welcome to J Mart"

    def cashier_leave(self) -> str:
        """Farewell spoken by a cashier."""
        return "Thank you for shopping at J Mart"

    def customer_speech(self) -> str:
        """Line spoken by a customer."""
        return "Hello"

    def security_speech(self) -> str:
        """Line spoken by a security guard."""
        return "What ya looking at?"