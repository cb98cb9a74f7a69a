from __future__ import annotations

import random

from ...core.agent import Agent
from ...core.game import GameState, legal_moves


class RandomAgent(Agent):
    """Agent that chooses random legal moves."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def act(self, state: GameState) -> int:
        """Choose a random legal choice index."""
        moves = legal_moves(state)
        if not moves:
            raise ValueError("No legal moves available")
        return self.rng.choice(moves)
