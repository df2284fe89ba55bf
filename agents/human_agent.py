"""Human player agent for interactive terminal poker."""

from rich.console import Console

from agents.base import BaseAgent
from poker.errors import BettingError
from poker.player import Player, PlayerAction
from ui.display import print_divider, render_betting_info, render_numbered_hand

QUIT_WORDS = ("q", "quit", "exit")
FOLD_WORDS = ("f", "fold")


def parse_action(raw: str) -> PlayerAction:
    """Parse bet input: 'f' folds, -1 calls, 0 checks, N bets N."""
    text = raw.strip().lower()
    if text in FOLD_WORDS:
        return PlayerAction.fold()
    return PlayerAction.from_code(int(text))


def parse_indices(raw: str) -> set[int]:
    """Parse space separated slot numbers. '0' or blank keeps all cards."""
    text = raw.replace(",", " ").strip()
    if not text or text == "0":
        return set()
    return {int(token) for token in text.split()}


class HumanAgent(BaseAgent):
    """Agent that prompts a human player for decisions via terminal."""

    def __init__(
        self,
        name: str = "You",
        console: Console | None = None,
    ) -> None:
        super().__init__(name)
        self.console = console or Console()

    def show_state(self, player: Player, table_high_bet: int) -> None:
        """Render the player's hand and the betting situation."""
        self.console.print()
        print_divider(self.console)
        self.console.print(render_numbered_hand(player))
        self.console.print(f"[bold]{player.name}[/bold], you have {player.chips} chips")
        self.console.print(render_betting_info(player, table_high_bet))

    def next_action(self, player: Player, table_high_bet: int) -> PlayerAction:
        """Prompt for a bet until the input parses."""
        while True:
            raw = self._ask("Enter bet (0 to check, -1 to call, f to fold): ")
            try:
                return parse_action(raw)
            except ValueError:
                self.console.print("[red]Please enter a number, or 'f' to fold.[/red]")

    def reject(self, player: Player, error: BettingError) -> None:
        self.console.print(f"[red]{error}[/red]")

    def next_indices(self, player: Player) -> set[int]:
        """Prompt for the slots to replace until the input parses."""
        self.console.print()
        self.console.print(render_numbered_hand(player))
        while True:
            raw = self._ask(f"{player.name}, enter card numbers to replace (space separated, 0 to keep all): ")
            try:
                return parse_indices(raw)
            except ValueError:
                self.console.print("[red]Please enter card numbers like '1 3 5'.[/red]")

    def _ask(self, prompt: str) -> str:
        try:
            raw = self.console.input(f"[bold]{prompt}[/bold]")
        except EOFError:
            # Handle Ctrl+D
            self.console.print("\n[yellow]Exiting...[/yellow]")
            raise KeyboardInterrupt
        if raw.strip().lower() in QUIT_WORDS:
            self.console.print("[yellow]Exiting...[/yellow]")
            raise KeyboardInterrupt
        return raw
