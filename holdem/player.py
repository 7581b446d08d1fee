"""Player state for a single game."""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from holdem.cards import Card

logger = logging.getLogger(__name__)

HOLE_CARDS = 2


@dataclass
class Player:
    """A player seated at the table."""

    name: str
    balance: int
    hand: list[Card] = field(default_factory=list)
    bet: int = 0  # Amount bet in the current betting round

    def __post_init__(self) -> None:
        if self.balance < 0:
            raise ValueError(f"{self.name} cannot start with a negative balance: {self.balance}")

    def receive_cards(self, cards: Sequence[Card]) -> None:
        """Take the hole cards for this game."""
        if len(cards) != HOLE_CARDS:
            raise ValueError(f"Expected {HOLE_CARDS} hole cards, got {len(cards)}")
        self.hand = list(cards)

    def place_bet(self, amount: int) -> int:
        """Place a bet for this round. Returns the amount actually placed.

        A bet larger than the balance is refused and nothing is placed.
        """
        if amount < 0:
            raise ValueError(f"Bet amount must be non-negative, got {amount}")
        if amount > self.balance:
            logger.warning("%s does not have enough funds to bet %d", self.name, amount)
            return 0
        self.bet = amount
        self.balance -= amount
        logger.info("%s places a bet of %d", self.name, amount)
        return amount

    def reset_hand(self) -> None:
        """Clear cards and bet between games."""
        self.hand = []
        self.bet = 0

    def reset_bet(self) -> None:
        """Reset player state for a new betting round."""
        self.bet = 0

    def win(self, amount: int) -> None:
        """Receive winnings."""
        self.balance += amount

    def __str__(self) -> str:
        cards_str = ""
        if self.hand:
            cards_str = " [" + " ".join(str(c) for c in self.hand) + "]"
        return f"{self.name}: {self.balance} chips{cards_str}"
