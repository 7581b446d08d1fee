"""Exceptions raised by the Hold'em engine."""


class PokerError(Exception):
    """Base class for all engine errors."""


class InsufficientCardsError(PokerError):
    """The deck holds fewer cards than a deal asked for."""

    def __init__(self, requested: int, remaining: int) -> None:
        self.requested = requested
        self.remaining = remaining
        super().__init__(f"Cannot deal {requested} cards, only {remaining} remaining")


class InvalidRankError(PokerError, ValueError):
    """A card was built from an unknown rank."""


class InvalidSuitError(PokerError, ValueError):
    """A card was built from an unknown suit."""


class GameStateError(PokerError):
    """A round transition was requested out of order."""
