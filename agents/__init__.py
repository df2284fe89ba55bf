"""Poker agents for decision making."""

from agents.base import ActionSource, BaseAgent, IndexSource, SeatRouter
from agents.random_agent import CallStationAgent, HandStrengthAgent, RandomAgent

__all__ = [
    "ActionSource",
    "BaseAgent",
    "CallStationAgent",
    "HandStrengthAgent",
    "IndexSource",
    "RandomAgent",
    "SeatRouter",
]
