"""Simulation engine for running five-card draw games."""

from simulation.runner import BatchResult, GameResult, GameRunner

__all__ = ["BatchResult", "GameResult", "GameRunner"]
