"""Tests for hand evaluation (poker/hand_evaluator.py)."""

import itertools

import pytest

from poker.errors import MalformedHand
from poker.hand_evaluator import (
    HAND_NAMES,
    EvaluatedHand,
    HandEvaluator,
    HandRank,
    hand_name,
    is_flush,
    is_straight,
)
from tests.helpers.card_utils import make_cards


class TestHandCategories:
    """Test classification of each category."""

    @pytest.mark.parametrize(
        "hand,expected",
        [
            ("Th Jh Qh Kh Ah", HandRank.ROYAL_FLUSH),
            ("2s 3s 4s 5s 6s", HandRank.STRAIGHT_FLUSH),
            ("9c Tc Jc Qc Kc", HandRank.STRAIGHT_FLUSH),
            ("7h 7d 7c 7s 2h", HandRank.FOUR_OF_A_KIND),
            ("Kh Kd Kc 4s 4h", HandRank.FULL_HOUSE),
            ("2d 7d 9d Jd Ad", HandRank.FLUSH),
            ("5h 6d 7c 8s 9h", HandRank.STRAIGHT),
            ("Th Jd Qc Ks Ah", HandRank.STRAIGHT),
            ("Qh Qd Qc 3s 9h", HandRank.THREE_OF_A_KIND),
            ("Jh Jd 4c 4s 9h", HandRank.TWO_PAIR),
            ("Ah Ad 4c 8s 9h", HandRank.PAIR),
            ("2h 5d 9c Js Kh", HandRank.HIGH_CARD),
        ],
    )
    def test_category(self, hand, expected):
        assert HandEvaluator.evaluate(make_cards(hand)) == expected

    def test_royal_flush_is_ten(self):
        """10-J-Q-K-A of one suit scores 10."""
        assert int(HandEvaluator.evaluate(make_cards("Th Jh Qh Kh Ah"))) == 10

    def test_low_straight_flush_is_nine(self):
        assert int(HandEvaluator.evaluate(make_cards("2s 3s 4s 5s 6s"))) == 9

    def test_full_house_is_seven(self):
        assert int(HandEvaluator.evaluate(make_cards("Kh Kd Kc 4s 4h"))) == 7

    def test_ace_is_never_low(self):
        """A-2-3-4-5 is not a straight."""
        hand = make_cards("Ah 2d 3c 4s 5h")
        assert not is_straight(hand)
        assert HandEvaluator.evaluate(hand) == HandRank.HIGH_CARD

    def test_wheel_flush_is_only_a_flush(self):
        assert HandEvaluator.evaluate(make_cards("As 2s 3s 4s 5s")) == HandRank.FLUSH

    def test_flush_predicate(self):
        assert is_flush(make_cards("2d 7d 9d Jd Ad"))
        assert not is_flush(make_cards("2d 7d 9d Jd Ah"))


class TestEvaluationProperties:
    """Test properties that hold for any hand."""

    @pytest.mark.parametrize(
        "hand",
        ["Th Jh Qh Kh Ah", "Kh Kd Kc 4s 4h", "Jh Jd 4c 4s 9h", "2h 5d 9c Js Kh"],
    )
    def test_permutation_invariant(self, hand):
        """Card order never changes the category."""
        cards = make_cards(hand)
        expected = HandEvaluator.evaluate(cards)
        for perm in itertools.permutations(cards):
            assert HandEvaluator.evaluate(list(perm)) == expected

    def test_result_in_range(self, deck):
        for _ in range(10):
            hand = [deck.draw() for _ in range(5)]
            assert 1 <= HandEvaluator.evaluate(hand) <= 10


class TestValidation:
    """Test malformed input."""

    @pytest.mark.parametrize("hand", ["Ah Kh Qh Jh", "Ah Kh Qh Jh Th 9h"])
    def test_wrong_size(self, hand):
        with pytest.raises(MalformedHand):
            HandEvaluator.evaluate(make_cards(hand))

    def test_duplicate_cards(self):
        with pytest.raises(MalformedHand, match="duplicate"):
            HandEvaluator.evaluate(make_cards("Ah Ah Qh Jh Th"))

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            HandEvaluator.evaluate([])


class TestHandNames:
    """Test display names."""

    @pytest.mark.parametrize(
        "strength,name",
        [(10, "Royal Flush"), (7, "Full House"), (3, "Two Pair"), (1, "High Card")],
    )
    def test_hand_name(self, strength, name):
        assert hand_name(strength) == name

    def test_unknown_strength_is_high_card(self):
        assert hand_name(0) == "High Card"
        assert hand_name(42) == "High Card"

    def test_every_rank_has_a_name(self):
        for rank in HandRank:
            assert str(rank) == HAND_NAMES[int(rank)]


class TestTiebreak:
    """Test the kicker-aware comparison key."""

    def test_key_orders_groups_before_kickers(self):
        assert HandEvaluator.tiebreak_key(make_cards("4h 9d Kc 9s Kh")) == (13, 9, 4)

    def test_higher_pair_wins(self):
        aces = HandEvaluator.evaluate_full(make_cards("Ah Ad 4c 8s 9h"))
        kings = HandEvaluator.evaluate_full(make_cards("Kh Kd Qc Js 9d"))
        assert aces > kings

    def test_category_beats_values(self):
        low_two_pair = HandEvaluator.evaluate_full(make_cards("2h 2d 3c 3s 4h"))
        high_pair = HandEvaluator.evaluate_full(make_cards("Ah Ad Kc Qs Jh"))
        assert low_two_pair > high_pair

    def test_identical_values_tie(self):
        a = HandEvaluator.evaluate_full(make_cards("2h 5d 9c Js Kh"))
        b = HandEvaluator.evaluate_full(make_cards("2c 5s 9d Jh Kd"))
        assert a == b
        assert a <= b and a >= b

    def test_evaluated_hand_str(self):
        assert str(EvaluatedHand(HandRank.PAIR, (14, 9, 8, 4))) == "Pair"
