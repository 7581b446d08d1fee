"""Single-pot accounting for one game."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from holdem.player import Player


@dataclass
class Pot:
    """Running total of every bet placed in the game.

    There are no side pots: the whole amount goes to one winner.
    """

    total: int = 0
    awarded: bool = False

    def add(self, amount: int) -> None:
        """Add chips to the pot."""
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount to the pot: {amount}")
        if self.awarded:
            raise ValueError("Pot has already been awarded")
        self.total += amount

    def award(self, winner: "Player") -> int:
        """Transfer the full pot to the winner and return the amount paid."""
        if self.awarded:
            raise ValueError("Pot has already been awarded")
        amount = self.total
        winner.win(amount)
        self.total = 0
        self.awarded = True
        return amount

    def __str__(self) -> str:
        return f"Pot({self.total})"
