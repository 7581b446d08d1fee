"""Tests for cards and dealing (holdem/cards.py)."""

from collections import Counter
from random import Random

import pytest

from holdem.cards import DECK_SIZE, Card, Deck, Rank, Suit
from holdem.errors import InsufficientCardsError, InvalidRankError, InvalidSuitError, PokerError
from tests.helpers.card_utils import OrderedRandom, RotatingRandom


class TestCard:
    """Test card construction and values."""

    @pytest.mark.parametrize(
        "rank,expected_value",
        [
            ("2", 2),
            ("9", 9),
            ("10", 10),
            ("T", 10),
            ("J", 11),
            ("Q", 12),
            ("K", 13),
            ("A", 14),
            (7, 7),
            (Rank.ACE, 14),
        ],
    )
    def test_value_derived_from_rank(self, rank, expected_value):
        """Numeric value is a pure function of rank."""
        assert Card(suit=Suit.HEARTS, rank=rank).value == expected_value

    def test_suit_does_not_change_value(self):
        values = {Card(suit=s, rank="Q").value for s in Suit}
        assert values == {12}

    def test_cards_are_immutable(self):
        card = Card(suit=Suit.SPADES, rank=Rank.ACE)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_equal_cards_hash_equal(self):
        assert Card(suit="Hearts", rank="10") == Card(suit=Suit.HEARTS, rank=Rank.TEN)
        assert len({Card(suit="h", rank="A"), Card(suit=Suit.HEARTS, rank=14)}) == 1

    @pytest.mark.parametrize("rank", ["1", "11", "B", "", 15, 0, True])
    def test_invalid_rank(self, rank):
        with pytest.raises(InvalidRankError, match="Invalid rank"):
            Card(suit=Suit.HEARTS, rank=rank)

    def test_invalid_suit(self):
        with pytest.raises(InvalidSuitError, match="Invalid suit"):
            Card(suit="Stars", rank="A")

    def test_construction_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            Card(suit="x", rank="A")
        with pytest.raises(PokerError):
            Card(suit=Suit.CLUBS, rank="Z")

    @pytest.mark.parametrize(
        "text,suit,rank",
        [
            ("As", Suit.SPADES, Rank.ACE),
            ("Kh", Suit.HEARTS, Rank.KING),
            ("Td", Suit.DIAMONDS, Rank.TEN),
            ("10c", Suit.CLUBS, Rank.TEN),
            ("2c", Suit.CLUBS, Rank.TWO),
        ],
    )
    def test_from_string(self, text, suit, rank):
        card = Card.from_string(text)
        assert card.suit == suit
        assert card.rank == rank

    def test_from_string_rejects_garbage(self):
        with pytest.raises(ValueError):
            Card.from_string("Ace of spades")

    def test_string_forms(self):
        card = Card(suit=Suit.HEARTS, rank="10")
        assert str(card) == "10♥"
        assert card.label == "10 of Hearts"


class TestDeckCreate:
    """Test deck creation."""

    def test_fresh_deck_has_52_unique_cards(self, deck):
        cards = list(deck)
        assert len(cards) == DECK_SIZE
        assert len(set(cards)) == DECK_SIZE

    def test_every_suit_rank_pair_present_once(self, deck):
        pairs = Counter((c.suit, c.rank) for c in deck)
        assert len(pairs) == 52
        assert set(pairs.values()) == {1}

    def test_creation_order_is_suit_major(self, deck):
        cards = list(deck)
        assert cards[0] == Card(suit=Suit.HEARTS, rank=Rank.TWO)
        assert cards[12] == Card(suit=Suit.HEARTS, rank=Rank.ACE)
        assert cards[13] == Card(suit=Suit.DIAMONDS, rank=Rank.TWO)
        assert cards[-1] == Card(suit=Suit.SPADES, rank=Rank.ACE)

    def test_create_replaces_prior_state(self, deck):
        deck.shuffle()
        deck.deal(10)
        deck.create()
        assert len(deck) == DECK_SIZE
        assert deck.dealt_count == 0
        assert list(deck) == list(Deck(seed=0))


class TestDeckShuffle:
    """Test deck shuffling."""

    def test_shuffle_preserves_cards(self, deck):
        before = Counter(deck)
        deck.shuffle()
        assert Counter(deck) == before
        assert len(deck) == DECK_SIZE

    def test_same_seed_same_order(self):
        deck1 = Deck(seed=42)
        deck2 = Deck(seed=42)
        deck1.shuffle()
        deck2.shuffle()
        assert list(deck1) == list(deck2)

    def test_different_seeds_different_order(self):
        deck1 = Deck(seed=1)
        deck2 = Deck(seed=2)
        deck1.shuffle()
        deck2.shuffle()
        # Extremely unlikely to be equal with different seeds
        assert list(deck1) != list(deck2)

    def test_shuffle_uses_injected_random(self):
        deck1 = Deck(rng=Random(7))
        deck2 = Deck(rng=Random(7))
        deck1.shuffle()
        deck2.shuffle()
        assert list(deck1) == list(deck2)

    def test_swap_with_self_keeps_order(self):
        deck = Deck(rng=OrderedRandom())
        before = list(deck)
        deck.shuffle()
        assert list(deck) == before

    def test_swap_with_top_rotates_deck(self):
        """Swapping each index i with 0, from the end down, rotates by one."""
        deck = Deck(rng=RotatingRandom())
        before = list(deck)
        deck.shuffle()
        assert list(deck) == before[1:] + before[:1]

    def test_shuffle_after_deal_only_touches_remaining(self, deck):
        dealt = deck.deal(5)
        deck.shuffle()
        assert len(deck) == 47
        assert not any(c in deck for c in dealt)


class TestDeckDeal:
    """Test dealing without replacement."""

    def test_deal_takes_from_top(self, deck):
        top = list(deck)[:3]
        assert deck.deal(3) == top

    def test_deal_shrinks_deck(self, deck):
        deck.deal(7)
        assert len(deck) == 45
        assert deck.remaining() == 45
        assert deck.dealt_count == 7

    def test_sequential_deals_never_repeat(self, deck):
        deck.shuffle()
        seen = []
        for n in (2, 2, 2, 3, 1, 1, 10, 31):
            seen.extend(deck.deal(n))
            assert len(deck) + deck.dealt_count == DECK_SIZE
        assert len(seen) == DECK_SIZE
        assert len(set(seen)) == DECK_SIZE
        assert len(deck) == 0

    def test_deal_zero(self, deck):
        assert deck.deal(0) == []
        assert len(deck) == DECK_SIZE

    def test_deal_one(self, deck):
        card = deck.deal_one()
        assert isinstance(card, Card)
        assert card not in deck

    def test_deal_too_many_raises(self, deck):
        deck.deal(50)
        with pytest.raises(InsufficientCardsError) as exc_info:
            deck.deal(3)
        assert exc_info.value.requested == 3
        assert exc_info.value.remaining == 2

    def test_failed_deal_leaves_deck_untouched(self, deck):
        deck.deal(50)
        remaining = list(deck)
        with pytest.raises(InsufficientCardsError):
            deck.deal(3)
        assert list(deck) == remaining
        assert deck.dealt_count == 50

    def test_deal_from_empty_deck(self, deck):
        deck.deal(52)
        with pytest.raises(InsufficientCardsError):
            deck.deal_one()

    def test_negative_deal_rejected(self, deck):
        with pytest.raises(ValueError):
            deck.deal(-1)
