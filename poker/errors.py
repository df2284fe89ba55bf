"""Exceptions raised by the five-card draw engine."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from poker.player import Player


class PokerError(Exception):
    """Base class for all engine errors."""


class DeckExhausted(PokerError, RuntimeError):
    """Raised when a card is drawn from an empty deck.

    This is a caller bug, not something a player can recover from.
    """

    def __init__(self) -> None:
        super().__init__("Cannot draw from an empty deck")


class MalformedHand(PokerError, ValueError):
    """Raised when a hand is not exactly five distinct cards."""


class BettingError(PokerError):
    """A rejected betting action. The same player must act again."""

    def __init__(self, player: "Player", message: str) -> None:
        super().__init__(message)
        self.player = player


class InsufficientChips(BettingError):
    """Player tried to put in more chips than they have."""

    def __init__(self, player: "Player", amount: int) -> None:
        super().__init__(player, f"Not enough chips! {player.name} has {player.chips}, needs {amount}")
        self.amount = amount


class InvalidCheck(BettingError):
    """Player tried to check while owing chips to the pot."""

    def __init__(self, player: "Player", owed: int) -> None:
        super().__init__(player, f"You must at least call the current bet ({owed} more) to stay in the round")
        self.owed = owed
