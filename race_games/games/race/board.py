from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

from ...core.game import Turn

# Piece phases
OUTWARD, HOMEWARD, FINISHED = "o", "h", "f"

Position = Tuple[str, int]  # (phase, cell); cell is unused once finished
START: Position = (OUTWARD, 0)
FINISH: Position = (FINISHED, 0)


def position_code(position: Position) -> str:
    phase, cell = position
    return FINISHED if phase == FINISHED else f"{phase}{cell}"


@dataclass(frozen=True)
class RaceRules:
    """
    Movement and victory rules of a race.

    Every piece runs its own lane: out from cell 0 to the far end at its
    outward speed, then back home at its homeward speed. Reaching or passing
    ``track_length`` turns a piece around onto cell ``track_length + 1``;
    reaching cell 0 or below on the way back finishes it. A side with
    ``pieces_to_win`` finished pieces wins.
    """

    pieces: int = 3
    first_outward: Tuple[int, ...] = (2, 1, 2)
    first_homeward: Tuple[int, ...] = (1, 2, 1)
    second_outward: Tuple[int, ...] = (1, 2, 1)
    second_homeward: Tuple[int, ...] = (2, 1, 2)
    # Defaults derived from ``pieces`` when left as None
    track_length: Optional[int] = None
    pieces_to_win: Optional[int] = None

    def __post_init__(self):
        if self.pieces < 1:
            raise ValueError(f"pieces must be positive, got {self.pieces}")
        for name in ("first_outward", "first_homeward", "second_outward", "second_homeward"):
            speeds = tuple(int(s) for s in getattr(self, name))
            if len(speeds) != self.pieces:
                raise ValueError(f"{name} needs {self.pieces} speeds, got {len(speeds)}")
            if any(s < 1 for s in speeds):
                raise ValueError(f"{name} speeds must be positive, got {list(speeds)}")
            object.__setattr__(self, name, speeds)
        if self.track_length is None:
            object.__setattr__(self, "track_length", self.pieces)
        if self.track_length < 1:
            raise ValueError(f"track_length must be positive, got {self.track_length}")
        if self.pieces_to_win is None:
            object.__setattr__(self, "pieces_to_win", max(1, self.pieces - 1))
        if not 1 <= self.pieces_to_win <= self.pieces:
            raise ValueError(f"pieces_to_win must be in 1..{self.pieces}, got {self.pieces_to_win}")

    def speeds(self, turn: Turn) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        """(outward, homeward) speeds of the given side."""
        if turn is Turn.FIRST:
            return self.first_outward, self.first_homeward
        return self.second_outward, self.second_homeward

    def advance(self, turn: Turn, piece: int, position: Position) -> Optional[Position]:
        """Position of ``piece`` after one move, or None if it cannot move."""
        phase, cell = position
        outward, homeward = self.speeds(turn)
        if phase == OUTWARD:
            cell += outward[piece]
            if cell >= self.track_length:
                return (HOMEWARD, self.track_length + 1)
            return (OUTWARD, cell)
        if phase == HOMEWARD:
            cell -= homeward[piece]
            return FINISH if cell <= 0 else (HOMEWARD, cell)
        return None

    # ------------------------------------------------------------------
    # Config helpers
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "pieces": self.pieces,
            "first_outward": list(self.first_outward),
            "first_homeward": list(self.first_homeward),
            "second_outward": list(self.second_outward),
            "second_homeward": list(self.second_homeward),
            "track_length": self.track_length,
            "pieces_to_win": self.pieces_to_win,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "RaceRules":
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown race rule fields: {unknown}")
        for name in ("first_outward", "first_homeward", "second_outward", "second_homeward"):
            if name in data:
                data[name] = tuple(data[name])
        return cls(**data)
