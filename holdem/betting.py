"""Bet sizing policies and the betting round between card reveals."""

import logging
from abc import ABC, abstractmethod
from random import Random
from typing import Sequence

from holdem.player import Player
from holdem.pot import Pot

logger = logging.getLogger(__name__)


class BetSizer(ABC):
    """Decides how much a player puts in during a betting round."""

    @abstractmethod
    def size(self, player: Player, rng: Random) -> int:
        """Return the bet for this player.

        Args:
            player: Player about to bet. Read-only for the sizer.
            rng: Random source owned by the game.

        Returns:
            Non-negative bet amount.
        """
        ...

    def __str__(self) -> str:
        return self.__class__.__name__


class RandomBetSizer(BetSizer):
    """Bet a random amount below a fraction of the current balance."""

    def __init__(self, fraction: float = 0.5) -> None:
        if not 0.0 <= fraction <= 1.0:
            raise ValueError(f"Bet fraction must be between 0 and 1, got {fraction}")
        self.fraction = fraction

    def size(self, player: Player, rng: Random) -> int:
        return int(rng.random() * player.balance * self.fraction)


class FixedBetSizer(BetSizer):
    """Always bet the same amount."""

    def __init__(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Bet amount must be non-negative, got {amount}")
        self.amount = amount

    def size(self, player: Player, rng: Random) -> int:
        return self.amount


class NoBetSizer(BetSizer):
    """Never bet; the hand plays out with an empty pot."""

    def size(self, player: Player, rng: Random) -> int:
        return 0


def run_betting_round(
    players: Sequence[Player],
    pot: Pot,
    sizer: BetSizer,
    rng: Random,
) -> int:
    """Collect one bet from each player in seat order.

    Returns:
        Chips moved into the pot this round.
    """
    collected = 0
    for player in players:
        player.reset_bet()
        placed = player.place_bet(sizer.size(player, rng))
        pot.add(placed)
        collected += placed
    logger.info("Total Pot: %d", pot.total)
    return collected
