"""Display utilities for terminal five-card draw."""

from typing import Iterable, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from poker.cards import Card, Suit
from poker.game import RoundResult
from poker.player import Player


SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}][{card.short}][/{color}]"


def render_hand(cards: Sequence[Card]) -> str:
    """Render a hand on one line."""
    if not cards:
        return "[dim](no cards)[/dim]"
    return " ".join(render_card(card) for card in cards)


def render_numbered_hand(player: Player) -> Table:
    """Render a hand with the 1-based slot numbers used for replacement."""
    table = Table(title=f"{player.name}'s hand", show_header=False, box=None, padding=(0, 1))
    table.add_column("Slot", style="cyan", justify="right")
    table.add_column("Card")
    for i, card in enumerate(player.hand, start=1):
        table.add_row(f"{i}:", f"{render_card(card)} {card}")
    return table


def render_betting_info(player: Player, table_high_bet: int) -> Table:
    """Render chips and bets for the player about to act."""
    info = Table(show_header=False, box=None, padding=(0, 1))
    info.add_column("Label", style="dim")
    info.add_column("Value", style="bold")

    info.add_row("Chips", f"[yellow]{player.chips}[/yellow]")
    info.add_row("Current bet", str(table_high_bet))
    info.add_row("Your bet", str(player.current_bet))
    owed = max(0, table_high_bet - player.current_bet)
    if owed > 0:
        info.add_row("To call", f"[cyan]{owed}[/cyan]")
    return info


def render_round_result(result: RoundResult) -> Panel:
    """Render the showdown and payout of a round."""
    showdown = result.showdown
    lines = []

    if showdown.forfeited:
        lines.append("[bold yellow]All players folded! No winner this round.[/bold yellow]")
    elif showdown.by_default:
        winner = showdown.winners[0]
        lines.append(f"[bold green]{winner.name} wins the pot of {showdown.pot} chips by default![/bold green]")
    else:
        lines.append("[bold]Showdown results:[/bold]")
        for player, name in showdown.hand_names.items():
            marker = " [yellow]★[/yellow]" if player in showdown.winners else ""
            lines.append(f"  {player.name}: {name}{marker}")
        lines.append("")
        if len(showdown.winners) == 1:
            lines.append(f"[bold green]{showdown.winners[0].name} wins the pot of {showdown.pot} chips![/bold green]")
        else:
            lines.append(f"[bold green]Split pot! Winners each get {showdown.amount_each} chips[/bold green]")
            if showdown.dropped:
                lines.append(f"[dim]{showdown.dropped} chip(s) left over and removed from play[/dim]")

    for player in result.eliminated:
        lines.append(f"[red]{player.name} is out of chips![/red]")

    return Panel("\n".join(lines), title=f"Round {result.round_number}", border_style="green")


def render_standings(players: Iterable[Player], starting_chips: int, title: str = "Standings") -> Table:
    """Render chip counts with the change since the start."""
    table = Table(title=title)
    table.add_column("Player", style="cyan")
    table.add_column("Chips", style="white")
    table.add_column("Change", style="green")

    for player in sorted(players, key=lambda p: p.chips, reverse=True):
        delta = player.chips - starting_chips
        delta_str = f"+{delta}" if delta > 0 else str(delta)
        delta_style = "green" if delta > 0 else "red" if delta < 0 else "white"
        table.add_row(player.name, str(player.chips), f"[{delta_style}]{delta_str}[/{delta_style}]")
    return table


def render_counts(title: str, label: str, counts: dict[str, int]) -> Table:
    """Render a name -> count table with percentages."""
    table = Table(title=title)
    table.add_column(label, style="cyan")
    table.add_column("Count", style="white", justify="right")
    table.add_column("Share", style="green", justify="right")

    total = sum(counts.values())
    for name, count in sorted(counts.items(), key=lambda item: item[1], reverse=True):
        share = count / total if total else 0.0
        table.add_row(name, str(count), f"{share:.1%}")
    return table


def print_divider(console: Console, char: str = "─", width: int = 50) -> None:
    """Print a horizontal divider."""
    console.print(f"[dim]{char * width}[/dim]")
