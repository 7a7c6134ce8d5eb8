"""Display utilities for terminal showdown output."""

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from showdown.cards import Card, Suit
from showdown.classifier import HandCategory
from showdown.evaluator import HandResult
from showdown.player import Player
from simulation.runner import ScenarioResult
from simulation.statistics import ShowdownStatistics


SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}][{card}][/{color}]"


def render_cards(cards: Sequence[Card]) -> str:
    """Render a sequence of cards."""
    return " ".join(render_card(c) for c in cards)


def render_title(title: str) -> Panel:
    """Render the scenario header."""
    return Panel(
        Text(title, justify="center", style="bold yellow"),
        border_style="blue",
    )


def render_player_view(player: Player, board: Sequence[Card]) -> str:
    """What one player sees: their own cards and the table."""
    return f"[cyan]{player}[/cyan] sees cards: {render_cards(player.hole_cards)} and table: {render_cards(board)}"


def render_results_table(
    results: dict[Player, HandResult],
    winners: Sequence[Player],
    show_scores: bool = False,
) -> Table:
    """Render each player's best five cards and category."""
    table = Table(title="Best Hands")
    table.add_column("Player", style="cyan")
    table.add_column("Hole Cards", style="white")
    table.add_column("Best Combo", style="white")
    table.add_column("Hand", style="green")
    if show_scores:
        table.add_column("Score", style="dim", justify="right")

    for player, result in results.items():
        name = f"[bold green]{player}[/bold green]" if player in winners else str(player)
        row = [
            name,
            render_cards(player.hole_cards),
            render_cards(result.cards),
            str(result.category),
        ]
        if show_scores:
            row.append(f"{result.score:,}")
        table.add_row(*row)

    return table


def render_winners(outcome: ScenarioResult) -> Panel:
    """Announce the winner(s)."""
    names = ", ".join(str(w) for w in outcome.winners)
    verb = "split the pot" if outcome.is_tie else "wins"
    lines = [
        f"[bold green]{names} {verb} with {outcome.winning_category}[/bold green]",
        render_cards(outcome.winning_hand.cards),
    ]
    return Panel("\n".join(lines), title="Showdown", border_style="green")


def print_scenario(
    console: Console,
    outcome: ScenarioResult,
    show_player_views: bool = True,
    show_scores: bool = False,
) -> None:
    """Print a full scenario: views, best hands, winners."""
    console.print(render_title(outcome.scenario.title))
    if show_player_views:
        for player in outcome.players:
            console.print(render_player_view(player, outcome.scenario.board))
    console.print(render_results_table(outcome.results, outcome.winners, show_scores=show_scores))
    console.print(render_winners(outcome))


def render_statistics(stats: ShowdownStatistics) -> tuple[Table, Table]:
    """Render category frequencies and per-seat results of a batch run."""
    categories = Table(title=f"Hand Categories ({stats.deals:,} deals)")
    categories.add_column("Hand", style="cyan")
    categories.add_column("Winning", style="green", justify="right")
    categories.add_column("Win %", style="green", justify="right")
    categories.add_column("All Hands %", style="white", justify="right")

    winning = stats.category_frequencies(winning_only=True)
    overall = stats.category_frequencies(winning_only=False)
    for category in reversed(HandCategory):
        categories.add_row(
            str(category),
            str(int(stats.winning_categories[category])),
            f"{winning[category]:.2%}",
            f"{overall[category]:.2%}",
        )

    seats = Table(title="Results by Seat")
    seats.add_column("Seat", style="cyan")
    seats.add_column("Wins", style="green", justify="right")
    seats.add_column("Ties", style="yellow", justify="right")
    seats.add_column("Win Rate", style="green", justify="right")

    for seat in range(1, stats.num_players + 1):
        seats.add_row(
            f"Player {seat}",
            str(int(stats.seat_wins[seat - 1])),
            str(int(stats.seat_ties[seat - 1])),
            f"{stats.win_rate(seat):.1%}",
        )

    return categories, seats


def print_divider(console: Console, char: str = "─", width: int = 50) -> None:
    """Print a horizontal divider."""
    console.print(f"[dim]{char * width}[/dim]")
