"""
Core abstractions and the analysis engine shared across all games.
"""
from .game import Code, Game, GameState, Outcome, Turn, legal_moves
from .graph import GraphStore, Node
from .explorer import Explorer
from .solver import BackwardInductionSolver, GraphSolver, decide
from .retrograde import RetrogradeSolver
from .analyzer import Analyzer
from .agent import Agent
from .persistence import ResultStore

__all__ = [
    "Code",
    "Game",
    "GameState",
    "Outcome",
    "Turn",
    "legal_moves",
    "GraphStore",
    "Node",
    "Explorer",
    "GraphSolver",
    "BackwardInductionSolver",
    "RetrogradeSolver",
    "decide",
    "Analyzer",
    "Agent",
    "ResultStore",
]
