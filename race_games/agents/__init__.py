"""Agents that pick moves in any GameState implementation."""
from .heuristic import RandomAgent, SolvedGraphAgent

__all__ = [
    "RandomAgent",
    "SolvedGraphAgent",
]
