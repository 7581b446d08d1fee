"""Texas Hold'em game orchestration."""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import TYPE_CHECKING, Callable, Sequence

from holdem.betting import BetSizer, NoBetSizer, RandomBetSizer, run_betting_round
from holdem.cards import DECK_SIZE, Card, Deck
from holdem.errors import GameStateError, InsufficientCardsError, PokerError
from holdem.hand_evaluator import HandCategory, HandEvaluator
from holdem.player import HOLE_CARDS, Player
from holdem.pot import Pot

if TYPE_CHECKING:
    from config.settings import GameConfig

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
FLOP_CARDS = 3
BOARD_CARDS = 5


class GameState(Enum):
    """Where the hand is in its single pass from deal to payout."""

    CREATED = auto()
    DEALT = auto()
    FLOP = auto()
    TURN = auto()
    RIVER = auto()
    SHOWDOWN = auto()
    COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.title()


@dataclass
class HandResult:
    """Result of a completed hand."""

    winner: Player
    category: HandCategory
    pot: int  # Amount paid to the winner
    hands: dict[str, HandCategory] = field(default_factory=dict)  # Player name -> category
    community_cards: list[Card] = field(default_factory=list)


def max_players() -> int:
    """Largest table the deck can serve: two hole cards each plus the board."""
    return (DECK_SIZE - BOARD_CARDS) // HOLE_CARDS


def resolve_showdown(
    players: Sequence[Player],
    community_cards: Sequence[Card],
) -> tuple[Player, HandCategory, dict[str, HandCategory]]:
    """Pick the winner by hand category.

    Players are scanned in seat order and only a strictly better category
    replaces the current leader, so the earliest seat keeps a tied pot.
    """
    if not players:
        raise ValueError("Showdown needs at least one player")

    hands: dict[str, HandCategory] = {}
    for player in players:
        hands[player.name] = HandEvaluator.evaluate_hand([*player.hand, *community_cards])
        logger.info("%s has a %s", player.name, hands[player.name])

    winner = players[0]
    best = hands[winner.name]
    for player in players[1:]:
        if hands[player.name] > best:
            winner, best = player, hands[player.name]

    return winner, best, hands


class TexasHoldemGame:
    """Orchestrate a single hand of Texas Hold'em.

    Transitions must be called in order: deal, flop, turn, river, showdown.
    Betting rounds may run between them and never block a transition.
    """

    def __init__(
        self,
        players: list[Player],
        deck: Deck | None = None,
        rng: Random | None = None,
        seed: int | None = None,
    ) -> None:
        if len(players) < MIN_PLAYERS:
            raise ValueError(f"Need at least {MIN_PLAYERS} players")
        if len(players) > max_players():
            raise ValueError(f"Maximum {max_players()} players")
        names = [p.name for p in players]
        if len(set(names)) != len(names):
            raise ValueError(f"Player names must be unique: {names}")

        self.players = players
        self.rng = rng if rng is not None else Random(seed)
        self.deck = deck if deck is not None else Deck(rng=self.rng)
        self.pot = Pot()
        self.community_cards: list[Card] = []
        self.state = GameState.CREATED
        self.betting_rounds = 0
        self.result: HandResult | None = None

    def _require(self, *states: GameState) -> None:
        if self.state not in states:
            expected = ", ".join(str(s) for s in states)
            raise GameStateError(f"Cannot do that in state {self.state} (expected {expected})")

    def _deal_board(self, n: int) -> list[Card]:
        cards = self.deck.deal(n)
        logger.debug("Dealt %d board cards, %d left in deck", n, len(self.deck))
        return cards

    def deal(self) -> None:
        """Shuffle and deal 2 hole cards to each player in seat order."""
        self._require(GameState.CREATED)
        needed = HOLE_CARDS * len(self.players)
        if needed > len(self.deck):
            raise InsufficientCardsError(requested=needed, remaining=len(self.deck))

        self.deck.shuffle()
        for player in self.players:
            player.receive_cards(self.deck.deal(HOLE_CARDS))
            logger.info(
                "%s has been dealt: %s", player.name, ", ".join(c.label for c in player.hand)
            )
        self.state = GameState.DEALT

    def flop(self) -> list[Card]:
        """Deal the flop (3 community cards)."""
        self._require(GameState.DEALT)
        self.community_cards = self._deal_board(FLOP_CARDS)
        self.state = GameState.FLOP
        logger.info("The Flop: %s", self._board_text())
        return list(self.community_cards)

    def turn(self) -> list[Card]:
        """Deal the turn (1 community card)."""
        self._require(GameState.FLOP)
        self.community_cards.extend(self._deal_board(1))
        self.state = GameState.TURN
        logger.info("The Turn: %s", self._board_text())
        return list(self.community_cards)

    def river(self) -> list[Card]:
        """Deal the river (1 community card)."""
        self._require(GameState.TURN)
        self.community_cards.extend(self._deal_board(1))
        self.state = GameState.RIVER
        logger.info("The River: %s", self._board_text())
        return list(self.community_cards)

    def showdown(self) -> HandResult:
        """Evaluate every hand and pay the whole pot to the winner."""
        self._require(GameState.RIVER)
        self.state = GameState.SHOWDOWN
        winner, category, hands = resolve_showdown(self.players, self.community_cards)

        paid = self.pot.award(winner)
        self.state = GameState.COMPLETE
        logger.info("%s wins the pot of %d with a %s!", winner.name, paid, category)
        logger.info("%s's new balance: %d", winner.name, winner.balance)

        self.result = HandResult(
            winner=winner,
            category=category,
            pot=paid,
            hands=hands,
            community_cards=list(self.community_cards),
        )
        return self.result

    def betting_round(self, sizer: BetSizer) -> int:
        """Run one betting round. Returns chips added to the pot."""
        self._require(GameState.DEALT, GameState.FLOP, GameState.TURN, GameState.RIVER)
        self.betting_rounds += 1
        logger.info("Round %d - Betting starts!", self.betting_rounds)
        return run_betting_round(self.players, self.pot, sizer, self.rng)

    def play(
        self,
        sizer: BetSizer | None = None,
        on_street: Callable[["TexasHoldemGame"], None] | None = None,
    ) -> HandResult:
        """Play a complete hand.

        Args:
            sizer: Bet sizing policy. Defaults to no betting.
            on_street: Called with the game after each betting round.

        Returns:
            HandResult with the winner and the amount paid.
        """
        sizer = sizer or NoBetSizer()
        logger.info("Starting a new Poker game...")
        try:
            self.deal()
            self.betting_round(sizer)
            if on_street:
                on_street(self)
            for reveal in (self.flop, self.turn, self.river):
                reveal()
                self.betting_round(sizer)
                if on_street:
                    on_street(self)
            return self.showdown()
        except PokerError:
            logger.error("Game aborted in state %s; pot of %d not paid", self.state, self.pot.total)
            raise

    def _board_text(self) -> str:
        return ", ".join(c.label for c in self.community_cards)


def create_players(config: "GameConfig") -> list[Player]:
    """Build fresh players from the table configuration."""
    return [Player(name=p.name, balance=p.balance) for p in config.players]


def start_game(
    config: "GameConfig",
    sizer: BetSizer | None = None,
    rng: Random | None = None,
) -> HandResult:
    """Seat the configured players and play one hand.

    Args:
        config: Player names, opening balances and bet fraction.
        sizer: Bet sizing policy. Defaults to random bets capped by
            config.bet_fraction of each balance.
        rng: Random source for shuffling and betting.
    """
    config.validate()
    game = TexasHoldemGame(create_players(config), rng=rng)
    return game.play(sizer or RandomBetSizer(config.bet_fraction))
