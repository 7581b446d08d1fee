"""Hand classification for Texas Hold'em.

The evaluator works on the whole card set it is given. Seven cards (two hole
cards plus the board) are classified together rather than by searching for the
best five-card subset, and hands of the same category are never separated by
kickers.
"""

from collections import Counter
from enum import IntEnum
from typing import Sequence

from holdem.cards import Card, Rank

MIN_HAND_SIZE = 5


class HandCategory(IntEnum):
    """Poker hand categories from lowest to highest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    def __str__(self) -> str:
        names = {
            0: "High Card",
            1: "One Pair",
            2: "Two Pair",
            3: "Three of a Kind",
            4: "Straight",
            5: "Flush",
            6: "Full House",
            7: "Four of a Kind",
            8: "Straight Flush",
            9: "Royal Flush",
        }
        return names[self.value]

    @classmethod
    def from_label(cls, label: str) -> "HandCategory":
        """Look up a category by its display label, e.g. 'Full House'."""
        for category in cls:
            if str(category).lower() == label.strip().lower():
                return category
        raise ValueError(f"Unknown hand category: {label!r}")


class HandEvaluator:
    """Classify a set of cards into a HandCategory."""

    @staticmethod
    def evaluate_hand(cards: Sequence[Card]) -> HandCategory:
        """Evaluate 5 or more cards as a single hand."""
        if len(cards) < MIN_HAND_SIZE:
            raise ValueError(f"Need at least {MIN_HAND_SIZE} cards, got {len(cards)}")

        rank_counts = HandEvaluator._rank_counts(cards)
        is_flush = HandEvaluator._is_flush(cards)
        is_straight = HandEvaluator._is_straight(cards)
        ranks = {c.rank for c in cards}

        if is_straight and is_flush and Rank.ACE in ranks and Rank.KING in ranks:
            return HandCategory.ROYAL_FLUSH
        if is_straight and is_flush:
            return HandCategory.STRAIGHT_FLUSH
        if rank_counts[0] == 4:
            return HandCategory.FOUR_OF_A_KIND
        if rank_counts[0] == 3 and rank_counts[1] == 2:
            return HandCategory.FULL_HOUSE
        if is_flush:
            return HandCategory.FLUSH
        if is_straight:
            return HandCategory.STRAIGHT
        if rank_counts[0] == 3:
            return HandCategory.THREE_OF_A_KIND
        if rank_counts[0] == 2 and rank_counts[1] == 2:
            return HandCategory.TWO_PAIR
        if rank_counts[0] == 2:
            return HandCategory.ONE_PAIR
        return HandCategory.HIGH_CARD

    @staticmethod
    def _rank_counts(cards: Sequence[Card]) -> list[int]:
        """Rank multiplicities, highest first (full house -> [3, 2])."""
        return sorted(Counter(c.rank for c in cards).values(), reverse=True)

    @staticmethod
    def _is_flush(cards: Sequence[Card]) -> bool:
        return len({c.suit for c in cards}) == 1

    @staticmethod
    def _is_straight(cards: Sequence[Card]) -> bool:
        """Exactly five distinct values forming one run.

        Ace only ever counts as 14, so A-2-3-4-5 is not a straight.
        """
        values = sorted({c.value for c in cards})
        return len(values) == 5 and values[-1] - values[0] == 4


def evaluate_hand(cards: Sequence[Card]) -> HandCategory:
    """Module-level shortcut for HandEvaluator.evaluate_hand."""
    return HandEvaluator.evaluate_hand(cards)
