from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

from ...core.game import Code, Game, GameState, Outcome, Turn
from .board import FINISHED, START, Position, RaceRules, position_code
from .rendering import render_array, render_text

DEFAULT_RULES = RaceRules()


@dataclass(frozen=True)
class RaceState(GameState):
    """Immutable race position: every piece of both sides plus the side to move."""

    first_pieces: Tuple[Position, ...]
    second_pieces: Tuple[Position, ...]
    to_move: Turn
    # Rules excluded from equality/hash and from the Code; see ``variant``
    rules: RaceRules = field(default=DEFAULT_RULES, compare=False, repr=False)

    @classmethod
    def initial(cls, rules: RaceRules | None = None, first: Turn = Turn.FIRST) -> "RaceState":
        rules = rules or DEFAULT_RULES
        pieces = (START,) * rules.pieces
        return cls(first_pieces=pieces, second_pieces=pieces, to_move=first, rules=rules)

    def pieces_of(self, turn: Turn) -> Tuple[Position, ...]:
        return self.first_pieces if turn is Turn.FIRST else self.second_pieces

    def finished_count(self, turn: Turn) -> int:
        return sum(1 for phase, _ in self.pieces_of(turn) if phase == FINISHED)

    # ------------------------------------------------------------------
    # State contract
    # ------------------------------------------------------------------
    def board_size(self) -> int:
        return self.rules.pieces

    def move_at(self, choice_index: int) -> Optional["RaceState"]:
        if not 0 <= choice_index < self.rules.pieces:
            return None
        pieces = list(self.pieces_of(self.to_move))
        moved = self.rules.advance(self.to_move, choice_index, pieces[choice_index])
        if moved is None:
            return None
        pieces[choice_index] = moved
        if self.to_move is Turn.FIRST:
            return replace(self, first_pieces=tuple(pieces), to_move=Turn.SECOND)
        return replace(self, second_pieces=tuple(pieces), to_move=Turn.FIRST)

    def encode(self) -> Code:
        first = "".join(position_code(p) for p in self.first_pieces)
        second = "".join(position_code(p) for p in self.second_pieces)
        return f"{first}/{second}:{self.to_move.symbol}"

    @classmethod
    def turn_of(cls, code: Code) -> Turn:
        return Turn.from_symbol(code[-1])

    @property
    def variant(self) -> RaceRules:
        return self.rules

    def terminal_outcome(self) -> Outcome:
        first_done = self.finished_count(Turn.FIRST) >= self.rules.pieces_to_win
        second_done = self.finished_count(Turn.SECOND) >= self.rules.pieces_to_win
        if first_done and second_done:
            return Outcome.INVALID
        if first_done:
            return Outcome.FIRST_PLAYER_WINS
        if second_done:
            return Outcome.SECOND_PLAYER_WINS
        return Outcome.UNKNOWN


class RaceGame(Game):
    """
    Play wrapper around RaceState.

    Reward: ``reward_win`` to the side whose move wins, ``reward_per_move``
    otherwise.
    """

    def __init__(
        self,
        rules: RaceRules | None = None,
        first: Turn = Turn.FIRST,
        reward_per_move: float = 0.0,
        reward_win: float = 1.0,
    ) -> None:
        self.rules = rules or DEFAULT_RULES
        self.first = first
        self.reward_per_move = reward_per_move
        self.reward_win = reward_win

        # internal state
        self._state: RaceState | None = None

    # ------------------------------------------------------------------
    # Game interface
    # ------------------------------------------------------------------
    def reset(self, first: Turn | None = None) -> RaceState:
        self._state = RaceState.initial(self.rules, first or self.first)
        return self._state

    def step(self, action: int) -> Tuple[RaceState, float, bool, Dict[str, Any]]:
        if self._state is None:
            raise RuntimeError("Game not reset")
        if self._state.is_terminal:
            raise RuntimeError("Game is over")
        mover = self._state.to_move
        new_state = self._state.move_at(action)
        if new_state is None:
            raise ValueError(f"illegal move {action} for {mover.value}")
        self._state = new_state
        outcome = new_state.terminal_outcome()
        done = outcome.is_final
        reward = self.reward_win if outcome.winner is mover else self.reward_per_move
        info: Dict[str, Any] = {"outcome": outcome, "mover": mover}
        return new_state, reward, done, info

    def render(self, state: RaceState | None = None, mode: str = "human") -> Any:
        st = state or self._state
        if st is None:
            raise RuntimeError("Game not reset")
        if mode == "human":
            print(render_text(st))
        elif mode == "ansi":
            return render_text(st)
        elif mode == "array":
            return render_array(st)
        else:
            raise ValueError(f"Unsupported render mode {mode}")

    @property
    def state(self) -> RaceState | None:
        return self._state
