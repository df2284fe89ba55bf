"""Five-card draw round orchestration."""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import TYPE_CHECKING

from poker.betting import BettingRound
from poker.cards import Deck
from poker.hand_evaluator import EvaluatedHand, HandEvaluator, HandRank, hand_name
from poker.player import Player
from poker.pot import Pot, split_pot

if TYPE_CHECKING:
    from agents.base import ActionSource, IndexSource

logger = logging.getLogger(__name__)


class RoundPhase(Enum):
    """Phases of a single round, in order."""

    DEALING = auto()
    BETTING_1 = auto()
    REPLACEMENT = auto()
    BETTING_2 = auto()
    SHOWDOWN = auto()
    ROUND_END = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass
class ShowdownResult:
    """Outcome of a showdown."""

    winners: list[Player]
    amount_each: int
    hand_names: dict[Player, str] = field(default_factory=dict)
    hand_ranks: dict[Player, HandRank] = field(default_factory=dict)
    pot: int = 0
    dropped: int = 0  # Split remainder nobody receives
    by_default: bool = False  # Won because everyone else folded

    @property
    def forfeited(self) -> bool:
        """True when nobody was left to claim the pot."""
        return not self.winners and self.pot > 0

    @property
    def paid_out(self) -> int:
        return self.amount_each * len(self.winners)


@dataclass
class RoundResult:
    """Result of a completed round."""

    round_number: int
    pot: int
    showdown: ShowdownResult
    eliminated: list[Player] = field(default_factory=list)
    chip_changes: dict[str, int] = field(default_factory=dict)  # Player name -> net change

    @property
    def forfeited(self) -> int:
        return self.pot if self.showdown.forfeited else 0


class RoundController:
    """Run rounds of five-card draw over a list of players.

    Each round is dealt from a fresh deck whose seed is drawn from the
    controller's own RNG, so a fixed controller seed replays a whole game.
    """

    def __init__(
        self,
        seed: int | None = None,
        compare_kickers: bool = False,
        keep_high_bet: bool = False,
    ) -> None:
        self._rng = Random(seed)
        self.compare_kickers = compare_kickers
        self.keep_high_bet = keep_high_bet
        self.phase = RoundPhase.ROUND_END
        self.pot = Pot()
        self.deck: Deck | None = None
        self.round_number = 0

    # Phases ----------------------------------------------------------

    def deal(self, players: list[Player]) -> Deck:
        """Shuffle a new deck and deal five cards to each player."""
        self.phase = RoundPhase.DEALING
        self.deck = Deck(self._rng.getrandbits(32))
        for player in players:
            player.draw_hand(self.deck)
        logger.debug("Dealt %d hands, %d cards left", len(players), len(self.deck))
        return self.deck

    def run_betting_round(self, players: list[Player], action_source: "ActionSource") -> int:
        """Run one betting pass. Returns the chips it added to the pot."""
        betting = BettingRound(players=players, keep_high_bet=self.keep_high_bet)
        contribution = betting.run(action_source)
        self.pot.add(contribution)
        logger.debug("Betting pass moved %d chips (pot %d)", contribution, self.pot.amount)
        return contribution

    def run_replacement_round(
        self,
        players: list[Player],
        deck: Deck,
        index_source: "IndexSource",
    ) -> None:
        """Let every non-folded player swap cards once."""
        for player in players:
            if player.folded:
                continue
            indices = index_source.next_indices(player)
            replaced = player.replace_cards(indices, deck)
            logger.debug("%s replaced slots %s", player.name, replaced)

    def showdown(self, players: list[Player], pot: int) -> ShowdownResult:
        """Award the pot to the best non-folded hand(s)."""
        contenders = [p for p in players if not p.folded]

        if not contenders:
            logger.info("All players folded! Pot of %d forfeited", pot)
            return ShowdownResult(winners=[], amount_each=0, pot=pot)

        if len(contenders) == 1:
            winner = contenders[0]
            winner.win(pot)
            logger.info("%s wins the pot of %d chips by default", winner.name, pot)
            return ShowdownResult(winners=[winner], amount_each=pot, pot=pot, by_default=True)

        ranks = {p: p.hand_strength() for p in contenders}
        if self.compare_kickers:
            scores: dict[Player, HandRank | EvaluatedHand] = {
                p: HandEvaluator.evaluate_full(p.hand) for p in contenders
            }
        else:
            scores = dict(ranks)

        best = max(scores.values())
        winners = [p for p in contenders if scores[p] == best]

        split = split_pot(pot, len(winners))
        for winner in winners:
            winner.win(split.amount_each)

        result = ShowdownResult(
            winners=winners,
            amount_each=split.amount_each,
            hand_names={p: hand_name(rank) for p, rank in ranks.items()},
            hand_ranks=ranks,
            pot=pot,
            dropped=split.dropped,
        )
        logger.info(
            "Showdown: %s win %d each with %s (dropped %d)",
            ", ".join(p.name for p in winners), split.amount_each, hand_name(ranks[winners[0]]), split.dropped,
        )
        return result

    def end_round(self, players: list[Player]) -> list[Player]:
        """Reset players and remove anyone out of chips. Returns the eliminated."""
        self.phase = RoundPhase.ROUND_END
        self.pot.reset()
        eliminated = []
        for player in players:
            player.reset_for_new_round()
            if player.chips <= 0:
                logger.info("%s is out of chips!", player.name)
                eliminated.append(player)
        players[:] = [p for p in players if p.chips > 0]
        return eliminated

    # Full round ------------------------------------------------------

    def play_round(
        self,
        players: list[Player],
        action_source: "ActionSource",
        index_source: "IndexSource",
    ) -> RoundResult:
        """Play a complete round. Eliminated players are removed from ``players``."""
        if len(players) < 2:
            raise ValueError("Need at least 2 players")

        self.round_number += 1
        self.pot.reset()
        initial_chips = {p.name: p.chips for p in players}
        logger.debug("Round %d with %s", self.round_number, ", ".join(p.name for p in players))

        deck = self.deal(players)

        self.phase = RoundPhase.BETTING_1
        self.run_betting_round(players, action_source)

        self.phase = RoundPhase.REPLACEMENT
        self.run_replacement_round(players, deck, index_source)

        self.phase = RoundPhase.BETTING_2
        self.run_betting_round(players, action_source)

        self.phase = RoundPhase.SHOWDOWN
        pot = self.pot.amount
        showdown = self.showdown(players, pot)
        action_source.notify_showdown(showdown)

        chip_changes = {p.name: p.chips - initial_chips[p.name] for p in players}
        eliminated = self.end_round(players)

        return RoundResult(
            round_number=self.round_number,
            pot=pot,
            showdown=showdown,
            eliminated=eliminated,
            chip_changes=chip_changes,
        )
