from __future__ import annotations

import random

from ...core.agent import Agent
from ...core.analyzer import Analyzer
from ...core.game import GameState


class SolvedGraphAgent(Agent):
    """Agent that plays the best solved move from an Analyzer's graph."""

    def __init__(self, analyzer: Analyzer | None = None, rng: random.Random | None = None):
        self.analyzer = analyzer or Analyzer()
        self.rng = rng

    def act(self, state: GameState) -> int:
        """
        Pick a move keeping the best outcome for the side to move.
        Ties go to the lowest choice index unless an rng was given.
        """
        moves = self.analyzer.best_moves(state)
        if not moves:
            raise ValueError("No legal moves available")
        if self.rng is not None:
            return self.rng.choice(moves)
        return moves[0]
