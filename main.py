"""Five-card draw poker in the terminal."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from agents.base import BaseAgent, SeatRouter
from agents.human_agent import HumanAgent
from agents.random_agent import CallStationAgent, HandStrengthAgent, RandomAgent
from config.settings import DEFAULT_CONFIG, Config, check_deck_supply, load_config, save_config
from poker.cards import Card
from poker.errors import DeckExhausted
from poker.game import RoundResult
from poker.hand_evaluator import HandEvaluator, hand_name
from simulation.runner import GameRunner
from ui.display import (
    print_divider,
    render_counts,
    render_hand,
    render_round_result,
    render_standings,
)

app = typer.Typer(
    name="five-card-draw",
    help="Five-card draw poker: play in the terminal or simulate bot games.",
)
console = Console()

BOT_TYPES = {
    "shark": HandStrengthAgent,
    "random": RandomAgent,
    "station": CallStationAgent,
}


@app.callback()
def setup(
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="Logging level (DEBUG, INFO, WARNING)"),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _load(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return Config()
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError, TypeError) as exc:
        console.print(f"[red]Invalid config: {exc}[/red]")
        raise typer.Exit(1)


def _make_bot(kind: str, name: str, seed: int | None) -> BaseAgent:
    if kind == "random":
        return RandomAgent(name=name, seed=seed)
    return BOT_TYPES[kind](name=name)


@app.command()
def play(
    names: Optional[list[str]] = typer.Option(None, "--name", "-n", help="Human player name (repeatable)"),
    bots: int = typer.Option(0, "--bots", "-b", help="Number of bot opponents"),
    bot_type: str = typer.Option("shark", "--bot-type", help="Bot style: shark, random, station"),
    chips: Optional[int] = typer.Option(None, "--chips", "-c", help="Starting chips"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
) -> None:
    """Play five-card draw at the terminal."""
    config = _load(config_path)
    if chips is not None:
        config.game.starting_chips = chips
    if seed is not None:
        config.game.seed = seed
    if bot_type not in BOT_TYPES:
        console.print(f"[red]Unknown bot type: {bot_type}[/red]")
        raise typer.Exit(1)
    try:
        config.validate()
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print("\n[bold blue]Welcome to Five Card Draw Poker![/bold blue]")
    console.print("=" * 50)

    if not names:
        count = typer.prompt("Enter number of players", type=int)
        names = [typer.prompt(f"Enter name for player {i + 1}") for i in range(count)]

    bot_names = [f"Bot {i + 1}" for i in range(bots)]
    runner = GameRunner(config.game)
    try:
        check_deck_supply(len(names), bots)
        players = runner.create_players(list(names) + bot_names)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    seats: dict[str, BaseAgent] = {name: HumanAgent(name=name, console=console) for name in names}
    for i, name in enumerate(bot_names):
        seats[name] = _make_bot(bot_type, name, None if config.game.seed is None else config.game.seed + i)
    everyone = list(players)
    router = SeatRouter(seats)

    def after_round(result: RoundResult) -> bool:
        console.print()
        console.print(render_round_result(result))
        return typer.confirm("\nPlay another round?", default=True)

    console.print(f"Starting chips: {config.game.starting_chips} | Players: {', '.join(seats)}")
    console.print("[dim]Type 'q' at any prompt to quit.[/dim]")

    game_interrupted = False
    try:
        result = runner.run_game(players, router, router, should_continue=after_round)
    except KeyboardInterrupt:
        game_interrupted = True
        result = None
    except DeckExhausted as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    if game_interrupted:
        console.print("\n[yellow]Game interrupted.[/yellow]")
    elif result is not None and result.rounds and len(players) < 2:
        # The last round's result was not shown by after_round.
        console.print(render_round_result(result.rounds[-1]))

    console.print()
    print_divider(console, "=")
    console.print("[bold]Game over! Final results:[/bold]")
    console.print(render_standings(everyone, config.game.starting_chips, title="Final Results"))
    if result is not None and result.winner is not None:
        console.print(f"\n[bold green]Winner: {result.winner}[/bold green]")


@app.command()
def simulate(
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    num_players: int = typer.Option(4, "--players", "-p", help="Players per table"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    max_rounds: Optional[int] = typer.Option(None, "--max-rounds", help="Round limit per game"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
    progress: bool = typer.Option(True, "--progress/--no-progress", help="Show progress bar"),
) -> None:
    """Simulate bot-only games and report statistics."""
    config = _load(config_path)
    config.simulation.num_games = games
    config.simulation.num_players = num_players
    if max_rounds is not None:
        config.simulation.max_rounds_per_game = max_rounds
    try:
        config.validate()
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print("\n[bold blue]Simulation[/bold blue]")
    console.print("=" * 50)

    kinds = list(BOT_TYPES)
    agents = [
        _make_bot(kinds[i % len(kinds)], f"{kinds[i % len(kinds)].title()}_{i + 1}", None if seed is None else seed + i)
        for i in range(num_players)
    ]
    runner = GameRunner(config.game, seed=seed)
    batch = runner.run_batch(agents, config.simulation, show_progress=progress)

    console.print(render_counts("Games Won", "Player", batch.games_won))
    console.print(render_counts("Winning Hands", "Hand", batch.winning_hands))
    console.print(f"Average rounds per game: {batch.avg_rounds_per_game:.1f}")
    if batch.unfinished:
        console.print(f"[yellow]{batch.unfinished} game(s) hit the round limit[/yellow]")


@app.command()
def evaluate(
    cards: list[str] = typer.Argument(..., help="Five cards, e.g. Ah Kh Qh Jh 10h"),
) -> None:
    """Show the category of a five-card hand."""
    try:
        hand = [Card.from_string(label) for label in cards]
        rank = HandEvaluator.evaluate(hand)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print(f"{render_hand(hand)}  [bold]{hand_name(rank)}[/bold] ({int(rank)})")


@app.command()
def info(
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
) -> None:
    """Show the effective configuration."""
    config = _load(config_path)

    table = Table(title="Configuration")
    table.add_column("Category", style="cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")

    table.add_row("Game", "Starting chips", str(config.game.starting_chips))
    table.add_row("Game", "Players", f"{config.game.min_players}-{config.game.max_players}")
    table.add_row("Game", "Compare kickers", str(config.game.compare_kickers))
    table.add_row("Game", "Keep high bet", str(config.game.keep_high_bet))
    table.add_row("Game", "Seed", str(config.game.seed))
    table.add_row("Simulation", "Games", str(config.simulation.num_games))
    table.add_row("Simulation", "Players", str(config.simulation.num_players))
    table.add_row("Simulation", "Max rounds", str(config.simulation.max_rounds_per_game))

    console.print(table)


@app.command(name="init-config")
def init_config(
    path: Path = typer.Argument(Path("five_card_draw.yaml"), help="Where to write the config"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration to a YAML file."""
    if path.exists() and not force:
        console.print(f"[red]{path} already exists (use --force to overwrite)[/red]")
        raise typer.Exit(1)
    save_config(DEFAULT_CONFIG, path)
    console.print(f"[green]Wrote {path}[/green]")


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
