"""Pot accounting for a single round."""

from dataclasses import dataclass


@dataclass
class PotSplit:
    """How a pot divides among winners."""

    amount_each: int
    dropped: int  # Remainder nobody receives


def split_pot(amount: int, num_winners: int) -> PotSplit:
    """Integer split. The remainder is dropped, not awarded."""
    if num_winners <= 0:
        return PotSplit(amount_each=0, dropped=amount)
    share, remainder = divmod(amount, num_winners)
    return PotSplit(amount_each=share, dropped=remainder)


class Pot:
    """Single chip accumulator for one round.

    There are no side pots: partial all-ins still contest the whole pot.
    """

    def __init__(self) -> None:
        self.amount = 0

    def add(self, chips: int) -> None:
        if chips < 0:
            raise ValueError(f"Cannot add negative chips to pot: {chips}")
        self.amount += chips

    def split(self, num_winners: int) -> PotSplit:
        return split_pot(self.amount, num_winners)

    def reset(self) -> None:
        """Reset for a new round."""
        self.amount = 0

    def __int__(self) -> int:
        return self.amount

    def __str__(self) -> str:
        return f"Pot({self.amount})"
