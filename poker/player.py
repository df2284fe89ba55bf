"""Player state and actions for five-card draw."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable

from poker.cards import Card, Deck
from poker.hand_evaluator import HAND_SIZE, HandEvaluator, HandRank

CALL_CODE = -1
CHECK_CODE = 0


class ActionType(Enum):
    """Types of actions a player can take."""

    CALL = auto()
    CHECK = auto()
    BET = auto()
    FOLD = auto()

    def __str__(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class PlayerAction:
    """An action requested by a player."""

    action_type: ActionType
    amount: int = 0  # Chips to add (BET only)

    @classmethod
    def call(cls) -> "PlayerAction":
        return cls(ActionType.CALL)

    @classmethod
    def check(cls) -> "PlayerAction":
        return cls(ActionType.CHECK)

    @classmethod
    def bet(cls, amount: int) -> "PlayerAction":
        if amount <= 0:
            raise ValueError(f"Bet must be positive, got {amount}")
        return cls(ActionType.BET, amount)

    @classmethod
    def fold(cls) -> "PlayerAction":
        return cls(ActionType.FOLD)

    @classmethod
    def from_code(cls, code: int) -> "PlayerAction":
        """Decode the numeric protocol: -1 calls, 0 checks, N > 0 bets N."""
        if code == CALL_CODE:
            return cls.call()
        if code == CHECK_CODE:
            return cls.check()
        if code > 0:
            return cls.bet(code)
        raise ValueError(f"Invalid action code: {code}")

    def __str__(self) -> str:
        if self.action_type == ActionType.BET:
            return f"{self.action_type} ({self.amount})"
        return str(self.action_type)


@dataclass(eq=False)
class Player:
    """A player at the table.

    Players compare and hash by identity so they can key result mappings.
    """

    name: str
    chips: int
    hand: list[Card] = field(default_factory=list)
    folded: bool = False
    current_bet: int = 0  # Chips put in during the current round

    def draw_hand(self, deck: Deck) -> None:
        """Discard the current hand and draw five fresh cards."""
        self.hand.clear()
        for _ in range(HAND_SIZE):
            self.hand.append(deck.draw())

    def replace_cards(self, indices: Iterable[int], deck: Deck) -> list[int]:
        """Replace hand slots (1-based) with new cards from the deck.

        Out-of-range indices are ignored. Returns the slots actually replaced.
        """
        replaced = []
        for index in sorted(set(indices)):
            if 0 < index <= len(self.hand):
                self.hand[index - 1] = deck.draw()
                replaced.append(index)
        return replaced

    def has_enough_chips(self, amount: int) -> bool:
        return self.chips >= amount

    def bet(self, amount: int) -> None:
        """Move chips into the pot. Callers check has_enough_chips first."""
        self.chips -= amount
        self.current_bet += amount

    def fold(self) -> None:
        self.folded = True

    def win(self, amount: int) -> None:
        """Receive winnings."""
        self.chips += amount

    def reset_for_new_round(self) -> None:
        """Reset per-round state. Chips carry over."""
        self.folded = False
        self.current_bet = 0
        self.hand.clear()

    def hand_strength(self) -> HandRank:
        return HandEvaluator.evaluate(self.hand)

    @property
    def is_active(self) -> bool:
        """Still contesting and able to put in chips."""
        return not self.folded and self.chips > 0

    def __str__(self) -> str:
        status = " (folded)" if self.folded else ""
        return f"{self.name}: {self.chips} chips{status}"
