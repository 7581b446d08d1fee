"""Game runner for simulating many independent hands."""

import logging
from dataclasses import dataclass, field
from random import Random

from tqdm import tqdm

from config.settings import GameConfig
from holdem.betting import BetSizer, RandomBetSizer
from holdem.game import HandResult, TexasHoldemGame, create_players
from simulation.statistics import SimulationStats

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for simulation."""

    game: GameConfig = field(default_factory=GameConfig)
    num_games: int = 1000


class GameRunner:
    """Run isolated games from one table configuration.

    Each game gets fresh players, deck and pot, and its own Random seeded
    from the runner's generator, so balances never carry over.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        seed: int | None = None,
        sizer: BetSizer | None = None,
    ) -> None:
        self.config = config or SimulationConfig()
        self.config.game.validate()
        self.rng = Random(seed)
        self.sizer = sizer or RandomBetSizer(self.config.game.bet_fraction)

    def run_game(self) -> HandResult:
        """Play one hand with a fresh table."""
        game = TexasHoldemGame(
            create_players(self.config.game),
            rng=Random(self.rng.randint(0, 2**31)),
        )
        return game.play(self.sizer)

    def run(self, num_games: int | None = None, show_progress: bool = True) -> SimulationStats:
        """Run a batch of games and collect statistics.

        Args:
            num_games: Number of games to run. Defaults to the config value.
            show_progress: Show progress bar

        Returns:
            SimulationStats for the batch
        """
        num_games = self.config.num_games if num_games is None else num_games
        if num_games < 0:
            raise ValueError(f"num_games must be non-negative, got {num_games}")

        stats = SimulationStats()
        iterator = range(num_games)
        if show_progress:
            iterator = tqdm(iterator, desc="Running games", unit="games")

        for _ in iterator:
            stats.record(self.run_game())

        logger.debug("Simulated %d games, average pot %.1f", stats.games, stats.avg_pot)
        return stats
