"""Configuration settings for the Hold'em simulator."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from holdem.cards import DECK_SIZE
from holdem.game import BOARD_CARDS
from holdem.player import HOLE_CARDS


@dataclass
class PlayerConfig:
    """A seat at the table."""

    name: str
    balance: int = 1000


def _default_players() -> list[PlayerConfig]:
    return [PlayerConfig("Alice"), PlayerConfig("Bob"), PlayerConfig("Charlie")]


@dataclass
class GameConfig:
    """Table configuration for one game."""

    players: list[PlayerConfig] = field(default_factory=_default_players)
    bet_fraction: float = 0.5  # Random bets stay below this share of the balance

    def __post_init__(self) -> None:
        # YAML gives plain mappings
        self.players = [
            p if isinstance(p, PlayerConfig) else PlayerConfig(**p) for p in self.players
        ]

    def validate(self) -> None:
        """Raise ValueError if the table cannot be dealt."""
        if len(self.players) < 2:
            raise ValueError("Need at least 2 players")
        names = [p.name for p in self.players]
        if len(set(names)) != len(names):
            raise ValueError(f"Player names must be unique: {names}")
        for p in self.players:
            if p.balance < 0:
                raise ValueError(f"{p.name} has a negative balance: {p.balance}")
        if HOLE_CARDS * len(self.players) + BOARD_CARDS > DECK_SIZE:
            raise ValueError(f"Too many players for one deck: {len(self.players)}")
        if not 0.0 <= self.bet_fraction <= 1.0:
            raise ValueError(f"bet_fraction must be between 0 and 1, got {self.bet_fraction}")


@dataclass
class SimulationSettings:
    """Batch simulation configuration."""

    num_games: int = 1000


@dataclass
class Config:
    """Complete configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    simulation: SimulationSettings = field(default_factory=SimulationSettings)
    seed: int | None = None


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping, got {type(data).__name__}")

    config = Config()

    if "game" in data:
        config.game = GameConfig(**data["game"])
    if "simulation" in data:
        config.simulation = SimulationSettings(**data["simulation"])
    if "seed" in data:
        config.seed = data["seed"]

    config.game.validate()
    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "game": {
            "players": [
                {"name": p.name, "balance": p.balance} for p in config.game.players
            ],
            "bet_fraction": config.game.bet_fraction,
        },
        "simulation": {
            "num_games": config.simulation.num_games,
        },
        "seed": config.seed,
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
