"""Display utilities for the terminal Hold'em UI."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from holdem.cards import Card, Suit
from holdem.game import GameState, HandResult
from holdem.hand_evaluator import HandCategory
from holdem.player import Player
from simulation.statistics import SimulationStats


SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}


def configure_logging(level: int = logging.WARNING, console: Console | None = None) -> None:
    """Route engine logging through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}][{card}][/{color}]"


def render_hole_cards(cards: list[Card]) -> str:
    """Render hole cards."""
    if not cards:
        return "[dim][ ? ][ ? ][/dim]"
    return " ".join(render_card(c) for c in cards)


def render_community_cards(cards: list[Card]) -> str:
    """Render community cards with placeholders for undealt cards."""
    rendered = []
    for i in range(5):
        if i < len(cards):
            rendered.append(render_card(cards[i]))
        else:
            rendered.append("[dim][ - ][/dim]")
    return " ".join(rendered)


def render_game_header(state: GameState) -> Panel:
    """Render the game round header."""
    return Panel(
        Text(str(state), justify="center", style="bold yellow"),
        border_style="blue",
    )


def render_players(players: list[Player], pot_total: int) -> Table:
    """Render pot and player balances."""
    info = Table(show_header=False, box=None, padding=(0, 1))
    info.add_column("Label", style="dim")
    info.add_column("Value", style="bold")

    info.add_row("Pot", f"[yellow]{pot_total}[/yellow] chips")
    info.add_row("", "")  # Spacer

    for player in players:
        bet = f" (bet {player.bet})" if player.bet else ""
        info.add_row(player.name, f"{player.balance} chips{bet}  {render_hole_cards(player.hand)}")

    return info


def render_showdown(result: HandResult, players: list[Player]) -> Table:
    """Render every player's category, marking the winner."""
    table = Table(title="Showdown")
    table.add_column("Player", style="bold")
    table.add_column("Hole Cards")
    table.add_column("Hand")
    table.add_column("Balance", justify="right")

    for player in players:
        is_winner = player is result.winner
        name = f"[green]{player.name}[/green]" if is_winner else player.name
        hand = str(result.hands.get(player.name, ""))
        if is_winner:
            hand = f"[bold green]{hand}[/bold green]"
        table.add_row(name, render_hole_cards(player.hand), hand, str(player.balance))

    return table


def render_hand_result(result: HandResult) -> Panel:
    """Render the winner of the hand."""
    lines = [
        f"[bold green]{result.winner.name} wins the pot of {result.pot} "
        f"with a {result.category}![/bold green]",
        f"New balance: [bold]{result.winner.balance}[/bold]",
    ]
    return Panel("\n".join(lines), title="Hand Result", border_style="green")


def render_stats(stats: SimulationStats) -> Table:
    """Render category frequencies and win rates from a simulation."""
    table = Table(title=f"Hand categories over {stats.games:,} games")
    table.add_column("Category", style="bold")
    table.add_column("Showdown %", justify="right")
    table.add_column("Winning %", justify="right")

    all_hands = stats.category_frequencies()
    winning = stats.category_frequencies(winning_only=True)
    for category in reversed(HandCategory):
        table.add_row(
            str(category),
            f"{all_hands[category] * 100:6.2f}",
            f"{winning[category] * 100:6.2f}",
        )

    return table


def render_win_rates(stats: SimulationStats) -> Table:
    """Render how often each seat won."""
    table = Table(title="Win rates")
    table.add_column("Player", style="bold")
    table.add_column("Wins", justify="right")
    table.add_column("Win %", justify="right")

    rates = stats.win_rates()
    for name, wins in stats.wins_by_player.items():
        table.add_row(name, f"{wins:,}", f"{rates[name] * 100:.1f}")

    return table
