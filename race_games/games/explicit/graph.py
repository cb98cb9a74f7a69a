from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ...core.game import Code, GameState, Outcome, Turn

TERMINAL_OUTCOMES = (Outcome.FIRST_PLAYER_WINS, Outcome.SECOND_PLAYER_WINS, Outcome.INVALID)


@dataclass(frozen=True)
class Position:
    """One declared position: who moves, where each move goes, how it ended."""

    turn: Turn
    moves: Tuple[str, ...] = ()
    outcome: Outcome = Outcome.UNKNOWN


class ExplicitGraph:
    """
    A game given as data rather than rules.

    Useful for hand-built positions, including graphs with cycles, which the
    race rules never produce. Example (YAML):

        a: {turn: first, moves: [b, won]}
        b: {turn: second, moves: [a]}
        won: {turn: second, outcome: first_player_wins}

    A position without moves and without an outcome is a dead end.
    """

    def __init__(self, positions: Dict[str, Position]):
        for label, position in positions.items():
            missing = [m for m in position.moves if m not in positions]
            if missing:
                raise ValueError(f"Position {label!r} moves to unknown positions {missing}")
            if position.outcome.is_final and position.outcome not in TERMINAL_OUTCOMES:
                raise ValueError(f"Position {label!r} has non-terminal outcome {position.outcome.value!r}")
        self.positions = dict(positions)
        self.max_moves = max((len(p.moves) for p in self.positions.values()), default=0)

    def state(self, label: str) -> "ExplicitState":
        if label not in self.positions:
            raise ValueError(f"Unknown position {label!r}")
        return ExplicitState(label=label, graph=self)

    def __len__(self) -> int:
        return len(self.positions)

    # ------------------------------------------------------------------
    # Config helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, Any]]) -> "ExplicitGraph":
        positions: Dict[str, Position] = {}
        for label, spec in data.items():
            spec = spec or {}
            try:
                turn = Turn(spec.get("turn", Turn.FIRST.value))
                outcome = Outcome(spec.get("outcome", Outcome.UNKNOWN.value))
            except ValueError as exc:
                raise ValueError(f"Position {label!r}: {exc}") from exc
            moves = tuple(str(m) for m in spec.get("moves", ()))
            positions[str(label)] = Position(turn=turn, moves=moves, outcome=outcome)
        return cls(positions)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        data: Dict[str, Dict[str, Any]] = {}
        for label, position in self.positions.items():
            entry: Dict[str, Any] = {"turn": position.turn.value, "moves": list(position.moves)}
            if position.outcome.is_final:
                entry["outcome"] = position.outcome.value
            data[label] = entry
        return data


@dataclass(frozen=True)
class ExplicitState(GameState):
    """A position of an ExplicitGraph, identified by its label."""

    label: str
    graph: ExplicitGraph = field(compare=False, repr=False)

    @property
    def position(self) -> Position:
        return self.graph.positions[self.label]

    def board_size(self) -> int:
        return self.graph.max_moves

    def move_at(self, choice_index: int) -> Optional["ExplicitState"]:
        moves = self.position.moves
        if not 0 <= choice_index < len(moves):
            return None
        return ExplicitState(label=moves[choice_index], graph=self.graph)

    def encode(self) -> Code:
        return f"{self.label}:{self.position.turn.symbol}"

    @classmethod
    def turn_of(cls, code: Code) -> Turn:
        return Turn.from_symbol(code[-1])

    @property
    def variant(self) -> ExplicitGraph:
        return self.graph

    def terminal_outcome(self) -> Outcome:
        return self.position.outcome
