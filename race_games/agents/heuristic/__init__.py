"""Heuristic (non-learning) agents."""
from .random_agent import RandomAgent
from .solved_agent import SolvedGraphAgent

__all__ = [
    "RandomAgent",
    "SolvedGraphAgent",
]
