"""Action and discard sources that drive players through a round."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from poker.player import Player, PlayerAction

if TYPE_CHECKING:
    from poker.errors import BettingError
    from poker.game import ShowdownResult


class ActionSource(ABC):
    """Supplies betting decisions to the round controller."""

    @abstractmethod
    def next_action(self, player: Player, table_high_bet: int) -> PlayerAction:
        """Decide what the player does facing the table's high bet.

        Args:
            player: The player to act. Read-only from the source's side.
            table_high_bet: Highest total bet any player has put in this round.

        Returns:
            PlayerAction to take.
        """
        ...

    def show_state(self, player: Player, table_high_bet: int) -> None:
        """Called before next_action so interactive sources can render state."""

    def reject(self, player: Player, error: "BettingError") -> None:
        """Called when the previous action was refused. The player acts again."""

    def notify_showdown(self, result: "ShowdownResult") -> None:
        """Called once the pot has been awarded."""


class IndexSource(ABC):
    """Supplies the hand slots a player wants replaced."""

    @abstractmethod
    def next_indices(self, player: Player) -> set[int]:
        """Return 1-based hand slots to replace. Empty or {0} keeps all."""
        ...


class BaseAgent(ActionSource, IndexSource):
    """Abstract base class for all five-card draw agents."""

    def __init__(self, name: str = "Agent") -> None:
        self.name = name
        self.rounds_played = 0
        self.rounds_won = 0
        self.total_winnings = 0

    def notify_round_result(self, chip_delta: int, won: bool) -> None:
        """Called after a round completes.

        Args:
            chip_delta: Net change in chips from this round.
            won: Whether this agent took a share of the pot.
        """
        self.rounds_played += 1
        self.total_winnings += chip_delta
        if won:
            self.rounds_won += 1

    def reset_stats(self) -> None:
        """Reset statistics."""
        self.rounds_played = 0
        self.rounds_won = 0
        self.total_winnings = 0

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"


class SeatRouter(ActionSource, IndexSource):
    """Dispatch each request to the agent seated for that player."""

    def __init__(self, seats: dict[str, BaseAgent]) -> None:
        self.seats = dict(seats)

    def agent_for(self, player: Player) -> BaseAgent:
        try:
            return self.seats[player.name]
        except KeyError:
            raise KeyError(f"No agent seated for player {player.name!r}") from None

    def next_action(self, player: Player, table_high_bet: int) -> PlayerAction:
        return self.agent_for(player).next_action(player, table_high_bet)

    def show_state(self, player: Player, table_high_bet: int) -> None:
        self.agent_for(player).show_state(player, table_high_bet)

    def reject(self, player: Player, error: "BettingError") -> None:
        self.agent_for(player).reject(player, error)

    def notify_showdown(self, result: "ShowdownResult") -> None:
        # Several seats may share one agent (e.g. hot-seat humans).
        seen: set[int] = set()
        for agent in self.seats.values():
            if id(agent) not in seen:
                seen.add(id(agent))
                agent.notify_showdown(result)

    def next_indices(self, player: Player) -> set[int]:
        return self.agent_for(player).next_indices(player)
