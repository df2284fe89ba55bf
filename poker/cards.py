"""Card, Deck, Suit, and Rank definitions for five-card draw."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from random import Random
from typing import Iterator

from poker.errors import DeckExhausted


class Suit(Enum):
    """Card suits."""

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"

    @property
    def symbol(self) -> str:
        return {"Hearts": "♥", "Diamonds": "♦", "Clubs": "♣", "Spades": "♠"}[self.value]

    def __str__(self) -> str:
        return self.value


class Rank(IntEnum):
    """Card ranks (2-14, where 14 is Ace). Ace is always high."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "Jack", 12: "Queen", 13: "King", 14: "Ace"}[self.value]

    @property
    def short(self) -> str:
        if self.value < 10:
            return str(self.value)
        return {10: "10", 11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    def __str__(self) -> str:
        return self.label


_RANK_CHARS = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "T": Rank.TEN,
    "10": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

_SUIT_CHARS = {
    "h": Suit.HEARTS,
    "d": Suit.DIAMONDS,
    "c": Suit.CLUBS,
    "s": Suit.SPADES,
    "♥": Suit.HEARTS,
    "♦": Suit.DIAMONDS,
    "♣": Suit.CLUBS,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card."""

    suit: Suit
    rank: Rank

    @property
    def value(self) -> int:
        """Rank order, 2 through 14."""
        return int(self.rank)

    @property
    def short(self) -> str:
        return f"{self.rank.short}{self.suit.symbol}"

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Kh', '10c', 'Td' or 'Q♠'."""
        s = s.strip()
        if len(s) not in (2, 3):
            raise ValueError(f"Invalid card string: {s}")
        rank_part = s[:-1].upper()
        suit_part = s[-1].lower()
        if rank_part not in _RANK_CHARS:
            raise ValueError(f"Invalid rank: {rank_part}")
        if suit_part not in _SUIT_CHARS:
            raise ValueError(f"Invalid suit: {suit_part}")
        return cls(suit=_SUIT_CHARS[suit_part], rank=_RANK_CHARS[rank_part])


def full_deck() -> list[Card]:
    """All 52 cards in a fixed order (by rank, then suit)."""
    return [Card(suit=suit, rank=rank) for rank in Rank for suit in Suit]


class Deck:
    """A standard 52-card deck, shuffled on construction.

    Cards are drawn from the end of the sequence. A new deck is built for
    every round; discards are never returned to it.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = Random(seed)
        self._cards: list[Card] = full_deck()
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise DeckExhausted()
        return self._cards.pop()

    def remaining(self) -> int:
        """Number of cards remaining in deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
