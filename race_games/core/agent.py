from __future__ import annotations

from abc import ABC, abstractmethod

from .game import GameState


class Agent(ABC):
    """
    Base class for all agents.
    """

    @abstractmethod
    def act(self, state: GameState) -> int:
        """
        Choose a legal choice index for the side to move in ``state``.
        """
        raise NotImplementedError
