"""Aggregate statistics over many independent games."""

from dataclasses import dataclass, field

from holdem.game import HandResult
from holdem.hand_evaluator import HandCategory


@dataclass
class SimulationStats:
    """Counts collected while running a batch of games."""

    games: int = 0
    total_pot: int = 0
    winning_categories: dict[HandCategory, int] = field(default_factory=dict)
    showdown_categories: dict[HandCategory, int] = field(default_factory=dict)
    wins_by_player: dict[str, int] = field(default_factory=dict)

    def record(self, result: HandResult) -> None:
        """Add one finished game."""
        self.games += 1
        self.total_pot += result.pot
        self.winning_categories[result.category] = self.winning_categories.get(result.category, 0) + 1
        self.wins_by_player[result.winner.name] = self.wins_by_player.get(result.winner.name, 0) + 1
        for category in result.hands.values():
            self.showdown_categories[category] = self.showdown_categories.get(category, 0) + 1

    @property
    def avg_pot(self) -> float:
        return self.total_pot / self.games if self.games > 0 else 0.0

    def category_frequencies(self, winning_only: bool = False) -> dict[HandCategory, float]:
        """Share of hands landing in each category, lowest category first."""
        counts = self.winning_categories if winning_only else self.showdown_categories
        total = sum(counts.values())
        return {
            category: counts.get(category, 0) / total if total > 0 else 0.0
            for category in HandCategory
        }

    def win_rates(self) -> dict[str, float]:
        """Fraction of games won by each player name."""
        return {
            name: wins / self.games if self.games > 0 else 0.0
            for name, wins in self.wins_by_player.items()
        }
