"""Card, Deck, Suit, and Rank definitions for Hold'em."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from random import Random
from typing import Iterator

from holdem.errors import InsufficientCardsError, InvalidRankError, InvalidSuitError

DECK_SIZE = 52


class Suit(Enum):
    """Card suits, in deck creation order."""

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"

    def __str__(self) -> str:
        symbols = {"Hearts": "♥", "Diamonds": "♦", "Clubs": "♣", "Spades": "♠"}
        return symbols[self.value]

    @classmethod
    def parse(cls, value: "Suit | str") -> "Suit":
        """Accept a Suit, its name ("Hearts") or its letter ("h")."""
        if isinstance(value, Suit):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for suit in cls:
                if text in (suit.value.lower(), suit.value[0].lower()):
                    return suit
        raise InvalidSuitError(f"Invalid suit: {value!r}")


class Rank(IntEnum):
    """Card ranks (2-14, where 14 is Ace)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    @classmethod
    def parse(cls, value: "Rank | int | str") -> "Rank":
        """Accept a Rank, its value (2-14) or a label ("10", "T", "J", ...)."""
        if isinstance(value, Rank):
            return value
        if isinstance(value, bool):
            raise InvalidRankError(f"Invalid rank: {value!r}")
        if isinstance(value, int):
            if 2 <= value <= 14:
                return cls(value)
            raise InvalidRankError(f"Invalid rank: {value!r}")
        if isinstance(value, str):
            label = value.strip().upper()
            faces = {"T": 10, "J": 11, "Q": 12, "K": 13, "A": 14}
            if label in faces:
                return cls(faces[label])
            if label.isdigit() and 2 <= int(label) <= 10:
                return cls(int(label))
        raise InvalidRankError(f"Invalid rank: {value!r}")


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        object.__setattr__(self, "suit", Suit.parse(self.suit))
        object.__setattr__(self, "rank", Rank.parse(self.rank))

    @property
    def value(self) -> int:
        """Numeric rank used for comparisons (J=11, Q=12, K=13, A=14)."""
        return int(self.rank)

    @property
    def label(self) -> str:
        return f"{self.rank} of {self.suit.value}"

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Kh', '2c', 'Td' or '10d'."""
        s = s.strip()
        if len(s) not in (2, 3):
            raise ValueError(f"Invalid card string: {s}")
        return cls(suit=Suit.parse(s[-1]), rank=Rank.parse(s[:-1]))


class Deck:
    """A standard 52-card deck dealt from the top."""

    def __init__(self, rng: Random | None = None, seed: int | None = None) -> None:
        self._rng = rng if rng is not None else Random(seed)
        self._cards: list[Card] = []
        self._dealt = 0
        self.create()

    def create(self) -> None:
        """Reset deck to the full 52 cards, suit-major and rank-minor."""
        self._cards = [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]
        self._dealt = 0

    def shuffle(self) -> None:
        """Fisher-Yates shuffle of the remaining cards, in place."""
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            cards[i], cards[j] = cards[j], cards[i]

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the deck."""
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        if n > len(self._cards):
            raise InsufficientCardsError(requested=n, remaining=len(self._cards))
        dealt = self._cards[:n]
        self._cards = self._cards[n:]
        self._dealt += n
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card."""
        return self.deal(1)[0]

    def remaining(self) -> int:
        """Number of cards remaining in deck."""
        return len(self._cards)

    @property
    def dealt_count(self) -> int:
        """Cards handed out since the last create()."""
        return self._dealt

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards
