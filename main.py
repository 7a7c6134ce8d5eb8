"""Texas Hold'em showdown evaluator."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from config.settings import (
    DEFAULT_CONFIG,
    Config,
    SimulationConfig,
    load_config,
    save_config,
)
from showdown.errors import ShowdownError
from simulation.runner import ShowdownRunner
from simulation.scenarios import PRESET_SCENARIOS, Scenario
from ui.display import print_divider, print_scenario, render_statistics
from utils.logger import setup_logging

app = typer.Typer(
    name="showdown",
    help="Texas Hold'em showdown evaluation: best hands and winners.",
)
console = Console()
logger = logging.getLogger(__name__)


def _config(ctx: typer.Context) -> Config:
    return ctx.obj if isinstance(ctx.obj, Config) else DEFAULT_CONFIG


@app.callback()
def configure(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Load configuration and set up logging."""
    config = Config()
    if config_path is not None:
        try:
            config = load_config(config_path)
        except (FileNotFoundError, TypeError, ValueError) as exc:
            console.print(f"[red]Could not load config: {exc}[/red]")
            raise typer.Exit(1)

    setup_logging("DEBUG" if verbose else config.logging.level, console=console)
    if config_path is not None:
        logger.debug("Loaded configuration from %s", config_path)
    ctx.obj = config


@app.command()
def scenarios(
    ctx: typer.Context,
    scores: bool = typer.Option(False, "--scores", help="Show numeric hand scores"),
) -> None:
    """Run the built-in showdown scenarios."""
    config = _config(ctx)
    runner = ShowdownRunner(config.evaluation)

    for scenario in PRESET_SCENARIOS:
        outcome = runner.run_scenario(scenario)
        print_scenario(
            console,
            outcome,
            show_player_views=config.display.show_player_views,
            show_scores=scores or config.display.show_scores,
        )
        print_divider(console)


@app.command()
def evaluate(
    ctx: typer.Context,
    board: str = typer.Option(..., "--board", "-b", help="Five shared cards, e.g. 'Qh Jh Th 5h 2c'"),
    hands: List[str] = typer.Option(..., "--hand", "-p", help="Two hole cards per player, repeat per player"),
    scores: bool = typer.Option(False, "--scores", help="Show numeric hand scores"),
) -> None:
    """Evaluate a showdown given as card strings."""
    config = _config(ctx)
    runner = ShowdownRunner(config.evaluation)

    try:
        scenario = Scenario.from_strings("Showdown", hands=hands, board=board)
        outcome = runner.run_scenario(scenario)
    except ShowdownError as exc:
        console.print(f"[red]Invalid input: {exc}[/red]")
        raise typer.Exit(1)

    print_scenario(
        console,
        outcome,
        show_player_views=config.display.show_player_views,
        show_scores=scores or config.display.show_scores,
    )


@app.command()
def deal(
    ctx: typer.Context,
    players: Optional[int] = typer.Option(None, "--players", "-n", help="Number of players (2-10)"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    scores: bool = typer.Option(False, "--scores", help="Show numeric hand scores"),
) -> None:
    """Deal one random showdown and evaluate it."""
    config = _config(ctx)
    sim = _simulation_config(config, players=players, seed=seed)

    runner = ShowdownRunner(config.evaluation, seed=sim.seed)
    outcome = runner.run_random(sim.num_players)
    print_scenario(
        console,
        outcome,
        show_player_views=config.display.show_player_views,
        show_scores=scores or config.display.show_scores,
    )


@app.command()
def simulate(
    ctx: typer.Context,
    deals: Optional[int] = typer.Option(None, "--deals", "-d", help="Number of random deals"),
    players: Optional[int] = typer.Option(None, "--players", "-n", help="Number of players (2-10)"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    progress: bool = typer.Option(True, "--progress/--no-progress", help="Show progress bar"),
) -> None:
    """Deal many random showdowns and report hand and seat statistics."""
    config = _config(ctx)
    sim = _simulation_config(config, players=players, seed=seed, deals=deals)

    console.print("\n[bold blue]Showdown Simulation[/bold blue]")
    console.print("=" * 50)
    console.print(f"Dealing {sim.num_deals:,} hands to {sim.num_players} players...")

    runner = ShowdownRunner(config.evaluation, seed=sim.seed)
    stats = runner.run_many(sim.num_deals, sim.num_players, show_progress=progress)

    categories, seats = render_statistics(stats)
    console.print(categories)
    console.print(seats)
    console.print(f"\nSplit pots: [yellow]{stats.ties:,}[/yellow] ({stats.tie_rate:.2%})")


@app.command(name="init-config")
def init_config(
    path: Path = typer.Argument(Path("showdown.yaml"), help="Where to write the configuration"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration as YAML."""
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists. Use --force to overwrite.[/yellow]")
        raise typer.Exit(1)

    save_config(Config(), path)
    console.print(f"[green]Configuration written to {path}[/green]")


@app.command()
def info(ctx: typer.Context) -> None:
    """Show the active configuration."""
    config = _config(ctx)

    table = Table(title="Configuration")
    table.add_column("Category", style="cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")

    table.add_row("Evaluation", "Max workers", str(config.evaluation.max_workers))
    table.add_row("Simulation", "Players", str(config.simulation.num_players))
    table.add_row("Simulation", "Deals", str(config.simulation.num_deals))
    table.add_row("Simulation", "Seed", str(config.simulation.seed))
    table.add_row("Display", "Show scores", str(config.display.show_scores))
    table.add_row("Display", "Player views", str(config.display.show_player_views))
    table.add_row("Logging", "Level", config.logging.level)

    console.print(table)


def _simulation_config(
    config: Config,
    players: int | None = None,
    seed: int | None = None,
    deals: int | None = None,
) -> SimulationConfig:
    """Command line overrides on top of the configured simulation settings."""
    base = config.simulation
    try:
        return SimulationConfig(
            num_players=players if players is not None else base.num_players,
            num_deals=deals if deals is not None else base.num_deals,
            seed=seed if seed is not None else base.seed,
        )
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
