"""Tests for round orchestration (poker/game.py)."""

import pytest

from poker.errors import DeckExhausted
from poker.game import RoundController, RoundPhase
from poker.hand_evaluator import HandRank
from poker.player import PlayerAction
from tests.helpers.card_utils import ScriptedAgent, make_player, seat


class TestShowdown:
    """Test awarding the pot."""

    def test_single_contender_wins_without_evaluation(self, controller):
        """The last player standing wins even with an unevaluable hand."""
        alice = make_player("Alice", chips=90)
        bob = make_player("Bob", chips=90)
        bob.fold()

        result = controller.showdown([alice, bob], 20)

        assert result.winners == [alice]
        assert result.by_default
        assert result.hand_names == {}
        assert alice.chips == 110

    def test_best_category_wins(self, controller):
        alice = make_player("Alice", chips=0, hand="Kh Kd Kc 4s 4h")
        bob = make_player("Bob", chips=0, hand="2d 7d 9d Jd Ad")

        result = controller.showdown([alice, bob], 40)

        assert result.winners == [alice]
        assert alice.chips == 40
        assert bob.chips == 0
        assert result.hand_names[alice] == "Full House"
        assert result.hand_ranks[bob] == HandRank.FLUSH

    def test_tie_splits_and_drops_remainder(self, controller):
        """Equal categories split the pot; the odd chip is dropped."""
        alice = make_player("Alice", chips=0, hand="Ah Ad 4c 8s 9h")
        bob = make_player("Bob", chips=0, hand="2h 2d 5c 7s Jh")

        result = controller.showdown([alice, bob], 15)

        assert set(result.winners) == {alice, bob}
        assert result.amount_each == 7
        assert result.dropped == 1
        assert alice.chips == 7
        assert bob.chips == 7

    def test_compare_kickers_breaks_tie(self):
        controller = RoundController(seed=1, compare_kickers=True)
        alice = make_player("Alice", chips=0, hand="Ah Ad 4c 8s 9h")
        bob = make_player("Bob", chips=0, hand="2h 2d 5c 7s Jh")

        result = controller.showdown([alice, bob], 15)

        assert result.winners == [alice]
        assert alice.chips == 15
        assert result.dropped == 0

    def test_folded_players_excluded(self, controller):
        alice = make_player("Alice", chips=0, hand="2h 5d 9c Js Kh")
        bob = make_player("Bob", chips=0, hand="Th Jh Qh Kh Ah")
        carol = make_player("Carol", chips=0, hand="3h 3d 5c 7s 8h")
        bob.fold()

        result = controller.showdown([alice, bob, carol], 30)

        assert result.winners == [carol]
        assert bob not in result.hand_names

    def test_everyone_folded_forfeits(self, controller):
        alice = make_player("Alice", chips=0)
        bob = make_player("Bob", chips=0)
        alice.fold()
        bob.fold()

        result = controller.showdown([alice, bob], 10)

        assert result.winners == []
        assert result.forfeited
        assert alice.chips == 0 and bob.chips == 0


class TestEndRound:
    """Test resets and elimination."""

    def test_broke_player_eliminated(self, controller):
        alice = make_player("Alice", chips=0, hand="2h 5d 9c Js Kh")
        bob = make_player("Bob", chips=50)
        players = [alice, bob]

        eliminated = controller.end_round(players)

        assert eliminated == [alice]
        assert players == [bob]
        assert bob.hand == []
        assert controller.phase == RoundPhase.ROUND_END

    def test_keeps_seating_order(self, controller, three_players):
        three_players[1].chips = 0
        controller.end_round(three_players)
        assert [p.name for p in three_players] == ["Alice", "Carol"]


class TestPlayRound:
    """Test complete rounds."""

    def test_needs_two_players(self, controller):
        with pytest.raises(ValueError):
            controller.play_round([make_player("Alice")], seat(), seat())

    def test_deal_gives_five_cards_each(self, controller, three_players):
        deck = controller.deal(three_players)
        assert all(len(p.hand) == 5 for p in three_players)
        assert deck.remaining() == 52 - 15
        assert controller.phase == RoundPhase.DEALING

    def test_round_conserves_chips(self, controller, three_players):
        agents = [
            ScriptedAgent("Alice", actions=[10, 5]),
            ScriptedAgent("Bob"),
            ScriptedAgent("Carol", actions=[PlayerAction.fold()]),
        ]
        router = seat(*agents)

        result = controller.play_round(three_players, router, router)

        assert result.pot == 30
        paid = result.showdown.paid_out + result.showdown.dropped
        assert paid == 30
        assert sum(p.chips for p in three_players) == 300
        assert sum(result.chip_changes.values()) == 0
        assert controller.phase == RoundPhase.ROUND_END

    def test_short_bet_sets_table_bet(self, controller, three_players):
        agents = [
            ScriptedAgent("Alice", actions=[10]),
            ScriptedAgent("Bob", actions=[3]),
            ScriptedAgent("Carol", actions=[-1]),
        ]
        controller.deal(three_players)

        assert controller.run_betting_round(three_players, seat(*agents)) == 16
        assert controller.pot.amount == 16

    def test_keep_high_bet_option(self, three_players):
        controller = RoundController(seed=42, keep_high_bet=True)
        agents = [
            ScriptedAgent("Alice", actions=[10]),
            ScriptedAgent("Bob", actions=[3]),
            ScriptedAgent("Carol", actions=[-1]),
        ]
        controller.deal(three_players)

        # Carol calls 10, then Bob still owes 7 and calls it.
        assert controller.run_betting_round(three_players, seat(*agents)) == 30

    def test_fold_to_bet_wins_by_default(self, controller, two_players):
        alice = ScriptedAgent("Alice", actions=[10])
        bob = ScriptedAgent("Bob", actions=[PlayerAction.fold()])
        router = seat(alice, bob)

        result = controller.play_round(two_players, router, router)

        assert result.showdown.by_default
        assert result.showdown.winners[0].name == "Alice"
        assert result.chip_changes == {"Alice": 0, "Bob": 0}
        assert len(alice.showdowns) == 1

    def test_replacement_draws_requested_cards(self, controller, two_players):
        alice = ScriptedAgent("Alice", indices=[{1, 2, 3}])
        bob = ScriptedAgent("Bob", indices=[set()])
        router = seat(alice, bob)

        controller.play_round(two_players, router, router)

        assert controller.deck.remaining() == 52 - 10 - 3

    def test_all_in_loser_is_eliminated(self):
        controller = RoundController(seed=3)
        players = [make_player("Alice", chips=10), make_player("Bob", chips=10)]
        alice = ScriptedAgent("Alice", actions=[10])
        bob = ScriptedAgent("Bob", actions=[-1])
        router = seat(alice, bob)

        result = controller.play_round(players, router, router)

        if len(result.showdown.winners) == 1:
            assert len(players) == 1
            assert result.eliminated[0].chips == 0
            assert players[0].chips == 20
        else:
            assert [p.chips for p in players] == [10, 10]

    def test_seeded_rounds_reproduce(self, seed):
        hands = []
        for _ in range(2):
            controller = RoundController(seed=seed)
            players = [make_player("Alice"), make_player("Bob")]
            controller.deal(players)
            hands.append([list(p.hand) for p in players])
        assert hands[0] == hands[1]

    def test_rounds_use_fresh_decks(self, controller, two_players):
        router = seat(ScriptedAgent("Alice"), ScriptedAgent("Bob"))
        controller.play_round(two_players, router, router)
        first = controller.deck
        controller.play_round(two_players, router, router)
        assert controller.deck is not first
        assert controller.round_number == 2

    def test_deck_exhaustion_propagates(self, controller):
        players = [make_player(f"P{i}") for i in range(10)]
        agents = [ScriptedAgent(p.name, indices=[{1, 2, 3}]) for p in players]
        router = seat(*agents)

        with pytest.raises(DeckExhausted):
            controller.play_round(players, router, router)
