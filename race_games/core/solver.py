from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator, List, Optional, Set, Tuple

from .game import Code, Outcome, Turn
from .graph import GraphStore

TurnOf = Callable[[Code], Turn]
# (code being resolved, its remaining successors, their outcomes so far)
Frame = Tuple[Code, Iterator[Code], List[Outcome]]


def decide(turn: Turn, outcomes: Iterable[Outcome]) -> Outcome:
    """
    Value of a position for the side to move, given its successors' values.

    A winning successor wins; otherwise a drawn successor draws; otherwise
    every continuation favours the opponent. No successors at all is a dead
    end and counts as a draw.
    """
    outcomes = list(outcomes)
    if not outcomes:
        return Outcome.DRAWN
    win = turn.winning_outcome
    if any(outcome is win for outcome in outcomes):
        return win
    if any(outcome is Outcome.DRAWN for outcome in outcomes):
        return Outcome.DRAWN
    return turn.losing_outcome


class GraphSolver(ABC):
    """
    Assigns outcomes to the Nodes of an explored GraphStore.
    """

    def __init__(self, graph: GraphStore, turn_of: TurnOf):
        self.graph = graph
        self.turn_of = turn_of

    @abstractmethod
    def solve(self, code: Code) -> Outcome:
        """
        Return the outcome of ``code``, writing solved values into the store.
        Codes missing from the store yield UNKNOWN.
        """
        raise NotImplementedError


class BackwardInductionSolver(GraphSolver):
    """
    Memoized depth-first backward induction with cycle detection.

    A Code met again while it is still being resolved is provisionally
    DRAWN; the frame resolving it overwrites that value when it finishes.
    This is a single pass: Nodes that read the provisional value keep it,
    even where a global fixpoint (see ``RetrogradeSolver``) would prove a
    forced result through a longer path.

    Successors are resolved in order on an explicit stack of frames, so
    deep games do not hit the interpreter's recursion limit.
    """

    def __init__(self, graph: GraphStore, turn_of: TurnOf):
        super().__init__(graph, turn_of)
        self._in_progress: Set[Code] = set()

    def solve(self, code: Code) -> Outcome:
        self._in_progress = set()
        result = self._enter(code)
        if result is not None:
            return result

        stack: List[Frame] = [self._frame(code)]
        while stack:
            current, successors, results = stack[-1]
            for successor in successors:
                outcome = self._enter(successor)
                if outcome is None:
                    stack.append(self._frame(successor))
                    break
                results.append(outcome)
            else:
                stack.pop()
                result = decide(self.turn_of(current), results)
                self.graph[current].outcome = result
                if stack:
                    stack[-1][2].append(result)
        return result

    def _enter(self, code: Code) -> Optional[Outcome]:
        """
        Outcome of ``code`` if it needs no descent, else None after marking
        it in progress.
        """
        node = self.graph.get(code)
        if node is None:
            return Outcome.UNKNOWN

        if node.outcome.is_final:
            return node.outcome

        if code in self._in_progress:
            # cycle
            node.outcome = Outcome.DRAWN
            return Outcome.DRAWN

        # Codes are never removed: a resolved Node returns above first.
        self._in_progress.add(code)
        return None

    def _frame(self, code: Code) -> Frame:
        return code, iter(list(self.graph[code].successors)), []
