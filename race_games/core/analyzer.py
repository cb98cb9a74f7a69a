from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Type

from .explorer import Explorer
from .game import Code, GameState, Outcome, legal_moves
from .graph import GraphStore, Triple
from .retrograde import RetrogradeSolver
from .solver import BackwardInductionSolver, GraphSolver

logger = logging.getLogger(__name__)

SOLVERS: Dict[str, Type[GraphSolver]] = {
    "induction": BackwardInductionSolver,
    "retrograde": RetrogradeSolver,
}


class Analyzer:
    """
    Explore then solve a root state.

    The GraphStore outlives a single ``analyze`` call, so analysing several
    roots of the same game on one Analyzer reuses everything already solved.
    The first root binds the Analyzer to its variant; roots of any other
    variant are rejected, since their Codes could collide with stored ones.
    """

    def __init__(self, graph: GraphStore | None = None, solver: str = "induction"):
        if solver not in SOLVERS:
            raise ValueError(f"Unknown solver: {solver}")
        self.graph = graph if graph is not None else GraphStore()
        self.solver = solver
        self.explorer = Explorer(self.graph)
        self.variant: Any = None
        self._bound = False

    def analyze(self, root: GameState) -> Outcome:
        self._bind(root)
        code = root.encode()
        cached = self.graph.outcome_of(code)
        if cached.is_final:
            logger.info("Cached outcome for %s: %s", code, cached.value)
            return cached

        logger.info("Start exploring from %s.", code)
        self.explorer.explore(root)
        logger.info("Finish exploring: %d states in graph.", len(self.graph))

        logger.info("Start solving with %s solver.", self.solver)
        result = SOLVERS[self.solver](self.graph, type(root).turn_of).solve(code)
        logger.info("Finish solving: %s is %s.", code, result.value)
        return result

    def _bind(self, root: GameState) -> None:
        variant = root.variant
        if not self._bound:
            self.variant = variant
            self._bound = True
        elif variant != self.variant:
            raise ValueError(f"{root.encode()} belongs to another game variant than this Analyzer's graph")

    # ------------------------------------------------------------------
    # Read access for reporting and play
    # ------------------------------------------------------------------
    def outcome_of(self, code: Code) -> Outcome:
        return self.graph.outcome_of(code)

    def results(self) -> Iterator[Triple]:
        return self.graph.triples()

    def best_moves(self, state: GameState) -> List[int]:
        """
        Choice indices leading to the best solved outcome for the side to move.

        Winning moves if there are any, else drawing moves, else every legal
        move. The state is analysed first if it has not been solved yet.
        """
        self.analyze(state)
        moves = legal_moves(state)
        children = {i: self.outcome_of(state.move_at(i).encode()) for i in moves}
        win = state.turn.winning_outcome
        for wanted in (win, Outcome.DRAWN):
            best = [i for i in moves if children[i] is wanted]
            if best:
                return best
        return moves
