"""Texas Hold'em single-hand simulator."""

import logging
from pathlib import Path
from random import Random
from typing import Optional

import typer
from rich.console import Console

from config.settings import DEFAULT_CONFIG, Config, load_config, save_config
from holdem.betting import RandomBetSizer
from holdem.cards import Card
from holdem.errors import PokerError
from holdem.game import TexasHoldemGame, create_players
from holdem.hand_evaluator import HandEvaluator
from simulation.runner import GameRunner, SimulationConfig
from ui.display import (
    configure_logging,
    render_community_cards,
    render_game_header,
    render_hand_result,
    render_players,
    render_showdown,
    render_stats,
    render_win_rates,
)

app = typer.Typer(
    name="holdem-sim",
    help="Deal and score single hands of Texas Hold'em.",
)
console = Console()


def _load(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return Config()
    try:
        return load_config(config_path)
    except (FileNotFoundError, TypeError, ValueError) as e:
        console.print(f"[red]Invalid config: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def play(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every deal and bet"),
) -> None:
    """Play one hand and show each street."""
    configure_logging(logging.INFO if verbose else logging.WARNING, console)
    config = _load(config_path)
    seed = seed if seed is not None else config.seed

    game = TexasHoldemGame(create_players(config.game), rng=Random(seed))
    sizer = RandomBetSizer(config.game.bet_fraction)

    def show_street(game: TexasHoldemGame) -> None:
        console.print(render_game_header(game.state))
        if game.community_cards:
            console.print(render_community_cards(game.community_cards))
        console.print(render_players(game.players, game.pot.total))

    console.print("\n[bold blue]Starting a new Poker game...[/bold blue]")
    try:
        result = game.play(sizer, on_street=show_street)
    except PokerError as e:
        console.print(f"[red]Game aborted: {e}[/red]")
        raise typer.Exit(1)

    console.print(render_showdown(result, game.players))
    console.print(render_hand_result(result))


@app.command()
def simulate(
    games: Optional[int] = typer.Option(None, "--games", "-g", min=0, help="Number of games"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    progress: bool = typer.Option(True, "--progress/--no-progress", help="Show progress bar"),
) -> None:
    """Run many independent hands and tabulate hand categories."""
    configure_logging(logging.WARNING, console)
    config = _load(config_path)
    seed = seed if seed is not None else config.seed
    num_games = games if games is not None else config.simulation.num_games

    console.print(f"\n[bold blue]Simulating {num_games:,} hands[/bold blue]")
    console.print("=" * 50)
    console.print(f"Players: [cyan]{', '.join(p.name for p in config.game.players)}[/cyan]")

    runner = GameRunner(SimulationConfig(game=config.game, num_games=num_games), seed=seed)
    try:
        stats = runner.run(show_progress=progress)
    except (PokerError, ValueError) as e:
        console.print(f"[red]Simulation aborted: {e}[/red]")
        raise typer.Exit(1)

    console.print(render_stats(stats))
    console.print(render_win_rates(stats))
    console.print(f"Average pot: [yellow]{stats.avg_pot:,.1f}[/yellow]")


@app.command()
def evaluate(
    cards: list[str] = typer.Argument(..., help="Cards like As Kh 10d 2c 9s"),
) -> None:
    """Classify a set of five or more cards."""
    try:
        parsed = [Card.from_string(c) for c in cards]
        category = HandEvaluator.evaluate_hand(parsed)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(" ".join(str(c) for c in parsed))
    console.print(f"[bold green]{category}[/bold green]")


@app.command(name="init-config")
def init_config(
    path: Path = typer.Argument(Path("holdem.yaml"), help="Where to write the config"),
) -> None:
    """Write the default configuration to a YAML file."""
    save_config(DEFAULT_CONFIG, path)
    console.print(f"Config written to: [cyan]{path}[/cyan]")


if __name__ == "__main__":
    app()
