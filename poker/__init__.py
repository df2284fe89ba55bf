"""Core game engine for five-card draw poker."""

from poker.cards import Card, Deck, Rank, Suit
from poker.errors import DeckExhausted, InsufficientChips, InvalidCheck, MalformedHand, PokerError
from poker.game import RoundController, RoundPhase, RoundResult, ShowdownResult
from poker.hand_evaluator import HandEvaluator, HandRank
from poker.player import ActionType, Player, PlayerAction

__all__ = [
    "ActionType",
    "Card",
    "Deck",
    "DeckExhausted",
    "HandEvaluator",
    "HandRank",
    "InsufficientChips",
    "InvalidCheck",
    "MalformedHand",
    "Player",
    "PlayerAction",
    "PokerError",
    "Rank",
    "RoundController",
    "RoundPhase",
    "RoundResult",
    "ShowdownResult",
    "Suit",
]
