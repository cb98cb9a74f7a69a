from __future__ import annotations

import logging
from collections import Counter, deque
from typing import Deque, Dict

from .game import Code, Outcome
from .graph import GraphStore
from .solver import GraphSolver, TurnOf

logger = logging.getLogger(__name__)


class RetrogradeSolver(GraphSolver):
    """
    Fixpoint retrograde analysis over the whole store.

    Values flow backwards from every Node that already has a final outcome
    (terminal states, or Nodes solved by an earlier run of this solver).
    A predecessor is won as soon as one successor is a win for its mover,
    and lost once every successor is neither a win for its mover nor a draw.
    Nodes never resolved this way sit on cycles or lean on a drawn line and
    become DRAWN, matching ``decide`` on every resolved Node.

    Final values already in the store are trusted as seeds, so do not mix
    this solver with a store solved by ``BackwardInductionSolver``.
    """

    def __init__(self, graph: GraphStore, turn_of: TurnOf):
        super().__init__(graph, turn_of)
        self._solved = False

    def solve(self, code: Code) -> Outcome:
        if code not in self.graph:
            return Outcome.UNKNOWN
        if not self._solved:
            self.solve_all()
        return self.graph[code].outcome

    def solve_all(self) -> Counter:
        """Resolve every UNKNOWN Node in the store and return outcome counts."""
        pending: Dict[Code, int] = {}
        queue: Deque[Code] = deque()
        for code, node in self.graph.items():
            if node.outcome.is_final:
                queue.append(code)
            else:
                pending[code] = len(node.successors)

        rounds = 0
        while queue:
            code = queue.popleft()
            value = self.graph[code].outcome
            rounds += 1
            for parent in self.graph[code].predecessors:
                if parent not in pending:
                    continue
                turn = self.turn_of(parent)
                if value is turn.winning_outcome:
                    resolved = value
                elif value is Outcome.DRAWN:
                    continue
                else:
                    pending[parent] -= 1
                    if pending[parent] > 0:
                        continue
                    resolved = turn.losing_outcome
                self.graph[parent].outcome = resolved
                del pending[parent]
                queue.append(parent)

        for code in pending:
            self.graph[code].outcome = Outcome.DRAWN

        logger.debug("Retrograde pass: %d propagated, %d left drawn", rounds, len(pending))
        self._solved = True
        return self.graph.counts()
