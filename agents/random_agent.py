"""Bot agents for simulations and filling empty seats."""

from random import Random

from agents.base import BaseAgent
from poker.hand_evaluator import HandEvaluator, HandRank, rank_counts
from poker.player import Player, PlayerAction


def _owed(player: Player, table_high_bet: int) -> int:
    return max(0, table_high_bet - player.current_bet)


class CallStationAgent(BaseAgent):
    """Agent that always calls (or checks if possible) and never draws."""

    def __init__(self, name: str = "CallStation") -> None:
        super().__init__(name)

    def next_action(self, player: Player, table_high_bet: int) -> PlayerAction:
        owed = _owed(player, table_high_bet)
        if owed == 0:
            return PlayerAction.check()
        if player.has_enough_chips(owed):
            return PlayerAction.call()
        # Can't cover the call: shove what's left.
        return PlayerAction.bet(player.chips)

    def next_indices(self, player: Player) -> set[int]:
        return set()


class RandomAgent(BaseAgent):
    """Agent that takes random legal actions."""

    def __init__(
        self,
        name: str = "Random",
        seed: int | None = None,
        max_bet: int = 20,
        fold_prob: float = 0.1,
    ) -> None:
        super().__init__(name)
        self._rng = Random(seed)
        self.max_bet = max_bet
        self.fold_prob = fold_prob

    def next_action(self, player: Player, table_high_bet: int) -> PlayerAction:
        owed = _owed(player, table_high_bet)
        roll = self._rng.random()

        if owed > 0 and roll < self.fold_prob:
            return PlayerAction.fold()
        if not player.has_enough_chips(owed + 1):
            # Only enough to call or shove.
            return PlayerAction.call() if player.has_enough_chips(owed) else PlayerAction.bet(player.chips)
        if roll < 0.3:
            extra = self._rng.randint(1, max(1, min(self.max_bet, player.chips - owed)))
            return PlayerAction.bet(owed + extra)
        return PlayerAction.call() if owed > 0 else PlayerAction.check()

    def next_indices(self, player: Player) -> set[int]:
        count = self._rng.randint(0, 3)
        return set(self._rng.sample(range(1, len(player.hand) + 1), count))


class HandStrengthAgent(BaseAgent):
    """Simple heuristic agent: draws to made hands and bets by hand category."""

    def __init__(self, name: str = "Shark", bet_unit: int = 5) -> None:
        super().__init__(name)
        self.bet_unit = bet_unit

    def next_action(self, player: Player, table_high_bet: int) -> PlayerAction:
        rank = player.hand_strength()
        owed = _owed(player, table_high_bet)
        raise_cap = self.bet_unit * 2 * int(rank)

        if owed == 0:
            if rank >= HandRank.TWO_PAIR and table_high_bet < raise_cap:
                return PlayerAction.bet(min(player.chips, self.bet_unit * int(rank)))
            return PlayerAction.check()

        if rank == HandRank.HIGH_CARD and owed > self.bet_unit * 2:
            return PlayerAction.fold()
        if not player.has_enough_chips(owed):
            if rank >= HandRank.PAIR:
                return PlayerAction.bet(player.chips)
            return PlayerAction.fold()

        extra = self.bet_unit * int(rank)
        if rank >= HandRank.THREE_OF_A_KIND and table_high_bet < raise_cap and player.has_enough_chips(owed + extra):
            return PlayerAction.bet(owed + extra)
        return PlayerAction.call()

    def next_indices(self, player: Player) -> set[int]:
        """Keep cards that make the hand, discard the rest."""
        rank = HandEvaluator.evaluate(player.hand)
        if rank >= HandRank.STRAIGHT and rank != HandRank.FOUR_OF_A_KIND:
            return set()

        counts = rank_counts(player.hand)
        discards = {i for i, card in enumerate(player.hand, start=1) if counts[card.value] == 1}
        if rank == HandRank.HIGH_CARD:
            # Keep the two highest cards.
            by_value = sorted(range(1, len(player.hand) + 1), key=lambda i: player.hand[i - 1].value)
            discards = set(by_value[:3])
        return discards
