"""Hand evaluation for five-card draw poker."""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from poker.cards import Card
from poker.errors import MalformedHand

HAND_SIZE = 5
ROYAL_VALUE_SUM = 60  # 10 + J + Q + K + A


class HandRank(IntEnum):
    """Poker hand categories from lowest to highest."""

    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    def __str__(self) -> str:
        return HAND_NAMES[self.value]


HAND_NAMES: dict[int, str] = {
    10: "Royal Flush",
    9: "Straight Flush",
    8: "Four of a Kind",
    7: "Full House",
    6: "Flush",
    5: "Straight",
    4: "Three of a Kind",
    3: "Two Pair",
    2: "Pair",
    1: "High Card",
}


def hand_name(strength: int) -> str:
    """Display name for a hand category. Unknown values read as High Card."""
    return HAND_NAMES.get(strength, HAND_NAMES[1])


def rank_counts(hand: Sequence[Card]) -> dict[int, int]:
    """Group cards by value: value -> number of cards with that value."""
    return dict(Counter(card.value for card in hand))


def is_flush(hand: Sequence[Card]) -> bool:
    return len({card.suit for card in hand}) == 1


def is_straight(hand: Sequence[Card]) -> bool:
    values = sorted(card.value for card in hand)
    return all(b - a == 1 for a, b in zip(values, values[1:]))


def is_straight_flush(hand: Sequence[Card]) -> bool:
    return is_flush(hand) and is_straight(hand)


def is_royal_flush(hand: Sequence[Card]) -> bool:
    # Only 10-J-Q-K-A sums to 60 among runs of five.
    return is_straight_flush(hand) and sum(card.value for card in hand) == ROYAL_VALUE_SUM


def is_four_of_a_kind(hand: Sequence[Card]) -> bool:
    return 4 in rank_counts(hand).values()


def is_full_house(hand: Sequence[Card]) -> bool:
    counts = rank_counts(hand).values()
    return 3 in counts and 2 in counts


def is_three_of_a_kind(hand: Sequence[Card]) -> bool:
    return 3 in rank_counts(hand).values()


def is_two_pair(hand: Sequence[Card]) -> bool:
    return list(rank_counts(hand).values()).count(2) == 2


def is_pair(hand: Sequence[Card]) -> bool:
    return 2 in rank_counts(hand).values()


# Checked top-down; the first match wins because the predicates overlap
# (a straight flush is also a flush and a straight).
_PRECEDENCE = (
    (HandRank.ROYAL_FLUSH, is_royal_flush),
    (HandRank.STRAIGHT_FLUSH, is_straight_flush),
    (HandRank.FOUR_OF_A_KIND, is_four_of_a_kind),
    (HandRank.FULL_HOUSE, is_full_house),
    (HandRank.FLUSH, is_flush),
    (HandRank.STRAIGHT, is_straight),
    (HandRank.THREE_OF_A_KIND, is_three_of_a_kind),
    (HandRank.TWO_PAIR, is_two_pair),
    (HandRank.PAIR, is_pair),
)


@dataclass(frozen=True, slots=True)
class EvaluatedHand:
    """Result of evaluating a poker hand with its tie-break key."""

    rank: HandRank
    values: tuple[int, ...]  # Card values ordered by (count desc, value desc)

    def __lt__(self, other: "EvaluatedHand") -> bool:
        if self.rank != other.rank:
            return self.rank < other.rank
        return self.values < other.values

    def __le__(self, other: "EvaluatedHand") -> bool:
        return self == other or self < other

    def __gt__(self, other: "EvaluatedHand") -> bool:
        return other < self

    def __ge__(self, other: "EvaluatedHand") -> bool:
        return self == other or self > other

    def __str__(self) -> str:
        return str(self.rank)


class HandEvaluator:
    """Classify five-card hands."""

    @staticmethod
    def validate(hand: Sequence[Card]) -> None:
        """Raise MalformedHand unless hand is exactly five distinct cards."""
        if len(hand) != HAND_SIZE:
            raise MalformedHand(f"Expected {HAND_SIZE} cards, got {len(hand)}")
        if len(set(hand)) != HAND_SIZE:
            raise MalformedHand("Hand contains duplicate cards")

    @staticmethod
    def evaluate(hand: Sequence[Card]) -> HandRank:
        """Evaluate exactly 5 cards into a hand category (1-10)."""
        HandEvaluator.validate(hand)
        for rank, matches in _PRECEDENCE:
            if matches(hand):
                return rank
        return HandRank.HIGH_CARD

    @staticmethod
    def tiebreak_key(hand: Sequence[Card]) -> tuple[int, ...]:
        """Card values ordered for comparing hands of the same category.

        Pairs and trips come before kickers, e.g. K-K-9-9-4 -> (13, 9, 4).
        """
        counts = rank_counts(hand)
        ordered = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
        return tuple(value for value, _ in ordered)

    @staticmethod
    def evaluate_full(hand: Sequence[Card]) -> EvaluatedHand:
        """Evaluate category plus tie-break key for strict comparisons."""
        rank = HandEvaluator.evaluate(hand)
        return EvaluatedHand(rank=rank, values=HandEvaluator.tiebreak_key(hand))
