from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

Code = str  # canonical state identifier, also the graph key


class Outcome(Enum):
    """Game-theoretic value of a state."""

    UNKNOWN = "unknown"
    FIRST_PLAYER_WINS = "first_player_wins"
    SECOND_PLAYER_WINS = "second_player_wins"
    DRAWN = "drawn"
    INVALID = "invalid"

    @property
    def is_final(self) -> bool:
        return self is not Outcome.UNKNOWN

    @property
    def winner(self) -> Optional["Turn"]:
        if self is Outcome.FIRST_PLAYER_WINS:
            return Turn.FIRST
        if self is Outcome.SECOND_PLAYER_WINS:
            return Turn.SECOND
        return None


class Turn(Enum):
    FIRST = "first"
    SECOND = "second"

    @property
    def other(self) -> "Turn":
        return Turn.SECOND if self is Turn.FIRST else Turn.FIRST

    @property
    def winning_outcome(self) -> Outcome:
        return Outcome.FIRST_PLAYER_WINS if self is Turn.FIRST else Outcome.SECOND_PLAYER_WINS

    @property
    def losing_outcome(self) -> Outcome:
        return self.other.winning_outcome

    @property
    def symbol(self) -> str:
        """Single character used as the last character of every Code."""
        return self.value[0]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Turn":
        for turn in cls:
            if turn.symbol == symbol:
                return turn
        raise ValueError(f"Unknown turn symbol: {symbol!r}")


@dataclass(frozen=True)
class GameState(ABC):
    """
    Immutable game position, the only thing the analysis engine knows about.

    Sub-classes implement the five contract operations below. A move is
    identified by an integer choice index in ``range(board_size())``; moves
    that are not legal from this position return ``None`` from ``move_at``.
    """

    @abstractmethod
    def board_size(self) -> int:
        """Number of move choices to try on every turn."""
        raise NotImplementedError

    @abstractmethod
    def move_at(self, choice_index: int) -> Optional["GameState"]:
        """Return the state after the given move, or None if it is illegal."""
        raise NotImplementedError

    @abstractmethod
    def encode(self) -> Code:
        """Return the canonical Code of this state."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def turn_of(cls, code: Code) -> Turn:
        """Return the side to move for any Code produced by ``encode``."""
        raise NotImplementedError

    @abstractmethod
    def terminal_outcome(self) -> Outcome:
        """UNKNOWN for a non-terminal state, else the decided outcome."""
        raise NotImplementedError

    @property
    def variant(self) -> Any:
        """
        Rules the Codes of this state are relative to. States of different
        variants may share Codes, so they must not share a GraphStore. None
        for a game with a single rule set.
        """
        return None

    @property
    def is_terminal(self) -> bool:
        return self.terminal_outcome().is_final

    @property
    def turn(self) -> Turn:
        return self.turn_of(self.encode())


def legal_moves(state: GameState) -> List[int]:
    """Choice indices for which ``state.move_at`` yields a successor."""
    return [i for i in range(state.board_size()) if state.move_at(i) is not None]


class Game(ABC):
    """
    Episodic play interface on top of a GameState implementation.

    The analysis engine does not need it; agents and scripts use it to play
    games out move by move.
    """

    @abstractmethod
    def reset(self, first: Turn | None = None) -> GameState:
        """
        Start a new game and return the initial state.
        """
        raise NotImplementedError

    @abstractmethod
    def step(self, action: int) -> Tuple[GameState, float, bool, Dict[str, Any]]:
        """
        Apply a choice index and return (next_state, reward, done, info).

        The reward is from the point of view of the side that moved.
        """
        raise NotImplementedError

    def legal_actions(self, state: GameState) -> List[int]:
        return legal_moves(state)

    @abstractmethod
    def render(self, state: GameState | None = None, mode: str = "human") -> Any:
        """
        Render the current or provided state.

        mode:
            'array' → np.ndarray
            'ansi'  → str
            'human' → print
        """
        raise NotImplementedError
