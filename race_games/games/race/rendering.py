from __future__ import annotations

from typing import TYPE_CHECKING, List

import numpy as np

from ...core.game import Turn
from .board import FINISHED, HOMEWARD, OUTWARD

if TYPE_CHECKING:
    from .game import RaceState

# Cell values in the array rendering, multiplied by +1 (first) / -1 (second)
OUTWARD_MARK, HOMEWARD_MARK, FINISHED_MARK = 1, 2, 3


def render_array(state: "RaceState") -> np.ndarray:
    """
    Render a race as an int8 grid of shape (2 * pieces, track_length + 2).

    Rows are lanes, first side then second side. Columns are lane cells.
    A piece shows as +-1 outward, +-2 homeward and +-3 at cell 0 once
    finished; the sign tells the side.
    """
    rules = state.rules
    grid = np.zeros((2 * rules.pieces, rules.track_length + 2), dtype=np.int8)
    for side, (turn, sign) in enumerate(((Turn.FIRST, 1), (Turn.SECOND, -1))):
        for idx, (phase, cell) in enumerate(state.pieces_of(turn)):
            row = side * rules.pieces + idx
            if phase == OUTWARD:
                grid[row, cell] = sign * OUTWARD_MARK
            elif phase == HOMEWARD:
                grid[row, cell] = sign * HOMEWARD_MARK
            else:
                grid[row, 0] = sign * FINISHED_MARK
    return grid


def render_text(state: "RaceState") -> str:
    """ASCII lanes: '>' heading out, '<' heading home, '*' finished."""
    glyphs = {OUTWARD_MARK: ">", HOMEWARD_MARK: "<", FINISHED_MARK: "*"}
    grid = render_array(state)
    lines: List[str] = []
    for row in range(grid.shape[0]):
        turn = Turn.FIRST if row < state.rules.pieces else Turn.SECOND
        piece = row % state.rules.pieces
        cells = " ".join(glyphs.get(abs(int(v)), ".") for v in grid[row])
        suffix = " done" if state.pieces_of(turn)[piece][0] == FINISHED else ""
        lines.append(f"{turn.value:<6} {piece} | {cells} |{suffix}")
    lines.append(f"to move: {state.to_move.value}")
    return "\n".join(lines)
