"""Shared pytest fixtures for Hold'em tests."""

from random import Random

import pytest

from holdem.cards import Deck
from holdem.game import TexasHoldemGame
from holdem.player import Player


@pytest.fixture
def rng():
    """Provide a reproducible random source."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A freshly created, unshuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def players():
    """Three players with the default opening balance."""
    return [Player("Alice", 1000), Player("Bob", 1000), Player("Charlie", 1000)]


@pytest.fixture
def game(players, rng):
    """A three-player game that has not been dealt yet."""
    return TexasHoldemGame(players, rng=rng)
