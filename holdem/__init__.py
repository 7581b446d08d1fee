"""Core engine for a single hand of Texas Hold'em."""

from holdem.cards import Card, Deck, Rank, Suit
from holdem.errors import (
    GameStateError,
    InsufficientCardsError,
    InvalidRankError,
    InvalidSuitError,
    PokerError,
)
from holdem.game import GameState, HandResult, TexasHoldemGame, resolve_showdown, start_game
from holdem.hand_evaluator import HandCategory, HandEvaluator, evaluate_hand
from holdem.player import Player
from holdem.pot import Pot

__all__ = [
    "Card",
    "Deck",
    "GameState",
    "GameStateError",
    "HandCategory",
    "HandEvaluator",
    "HandResult",
    "InsufficientCardsError",
    "InvalidRankError",
    "InvalidSuitError",
    "Player",
    "PokerError",
    "Pot",
    "Rank",
    "Suit",
    "TexasHoldemGame",
    "evaluate_hand",
    "resolve_showdown",
    "start_game",
]
