"""Betting round logic for five-card draw."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from poker.errors import BettingError, InsufficientChips, InvalidCheck
from poker.player import ActionType, Player, PlayerAction

if TYPE_CHECKING:
    from agents.base import ActionSource

logger = logging.getLogger(__name__)


class TurnCursor:
    """Position in the fixed seating order.

    ``advance`` moves to the next seat (wrapping); ``repeat_current`` keeps
    the same seat so a rejected player acts again.
    """

    def __init__(self, num_seats: int, start: int = 0) -> None:
        if num_seats <= 0:
            raise ValueError("Cursor needs at least one seat")
        self.num_seats = num_seats
        self.index = start % num_seats
        self.retries = 0

    def advance(self) -> int:
        self.index = (self.index + 1) % self.num_seats
        return self.index

    def repeat_current(self) -> int:
        self.retries += 1
        return self.index


@dataclass
class BettingRound:
    """Manage a single betting pass over the players."""

    players: list[Player]
    high_bet: int = 0
    total: int = 0  # Chips moved during this pass
    keep_high_bet: bool = False  # Never let a short bet lower the high bet
    _acted: set[int] = field(default_factory=set)  # Seats settled since the last raise

    def __post_init__(self) -> None:
        contesting = self.contesting()
        if contesting:
            self.high_bet = max(self.high_bet, max(p.current_bet for p in contesting))

    def contesting(self) -> list[Player]:
        """Players who have not folded."""
        return [p for p in self.players if not p.folded]

    def owed(self, player: Player) -> int:
        """Chips needed to match the high bet."""
        return max(0, self.high_bet - player.current_bet)

    def needs_to_act(self, seat: int) -> bool:
        player = self.players[seat]
        if not player.is_active:
            return False
        return seat not in self._acted or player.current_bet < self.high_bet

    def is_complete(self) -> bool:
        """Check if the betting pass is over."""
        if len(self.contesting()) <= 1:
            return True
        active = [i for i, p in enumerate(self.players) if p.is_active]
        if len(active) == 1 and self.owed(self.players[active[0]]) == 0:
            # Everyone else is all-in or folded; nobody left to bet against.
            return True
        return not any(self.needs_to_act(i) for i in active)

    def apply_action(self, seat: int, action: PlayerAction) -> int:
        """Apply an action and return the chips it moved.

        Raises InsufficientChips or InvalidCheck without changing any state.
        """
        player = self.players[seat]
        moved = 0

        if action.action_type == ActionType.FOLD:
            player.fold()

        elif action.action_type == ActionType.CHECK or (
            action.action_type == ActionType.CALL and self.owed(player) == 0
        ):
            if self.owed(player) > 0:
                raise InvalidCheck(player, self.owed(player))

        elif action.action_type == ActionType.CALL:
            moved = self._put_in(player, self.owed(player))

        elif action.action_type == ActionType.BET:
            previous_high = self.high_bet
            moved = self._put_in(player, action.amount)
            if self.keep_high_bet:
                self.high_bet = max(self.high_bet, player.current_bet)
            else:
                # The bettor sets the table bet, even below what was owed.
                self.high_bet = player.current_bet
            if self.high_bet > previous_high:
                # A raise reopens action for everyone else.
                self._acted.clear()

        else:
            raise ValueError(f"Unsupported action {action.action_type}")

        self._acted.add(seat)
        return moved

    def _put_in(self, player: Player, amount: int) -> int:
        if not player.has_enough_chips(amount):
            raise InsufficientChips(player, amount)
        player.bet(amount)
        self.total += amount
        return amount

    def run(self, action_source: "ActionSource") -> int:
        """Drive players until the pass completes. Returns chips moved."""
        if not self.players:
            return 0
        cursor = TurnCursor(len(self.players))

        while not self.is_complete():
            seat = cursor.index
            if not self.needs_to_act(seat):
                cursor.advance()
                continue

            player = self.players[seat]
            action_source.show_state(player, self.high_bet)
            action = action_source.next_action(player, self.high_bet)
            try:
                self.apply_action(seat, action)
            except BettingError as exc:
                logger.info("Rejected %s from %s: %s", action, player.name, exc)
                action_source.reject(player, exc)
                cursor.repeat_current()
                continue

            logger.debug(
                "%s: %s (bet %d, high %d, chips %d)",
                player.name, action, player.current_bet, self.high_bet, player.chips,
            )
            cursor.advance()

        return self.total
