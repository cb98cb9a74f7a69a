from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from .game import Code, GameState
from .graph import GraphStore

logger = logging.getLogger(__name__)

# (state, its code, remaining choice indices, successor codes found so far)
Frame = Tuple[GameState, Code, Iterator[int], List[Code]]


class Explorer:
    """
    Depth-first enumeration of every state reachable from a root.

    A Node is inserted the moment its Code is first seen, before its moves
    are expanded, so transpositions and move sequences that loop back both
    end at the "already stored" check instead of descending again.

    The descent keeps its own stack of frames, so the depth of a game is not
    limited by the interpreter's recursion limit. A Node's successors are
    linked once all of its moves have been tried.
    """

    def __init__(self, graph: GraphStore):
        self.graph = graph

    def explore(self, root: GameState) -> None:
        code = root.encode()
        if code in self.graph:
            logger.debug("Root %s already explored", code)
            return
        before = len(self.graph)
        node = self.graph.add(code, root.terminal_outcome())
        if not node.outcome.is_final:
            self._expand(root, code)
        logger.debug("Explored %d new states from %s", len(self.graph) - before, code)

    def _expand(self, root: GameState, root_code: Code) -> None:
        stack: List[Frame] = [self._frame(root, root_code)]
        while stack:
            state, code, choices, successors = stack[-1]
            for choice_index in choices:
                child = state.move_at(choice_index)
                if child is None:
                    continue
                child_code = child.encode()
                successors.append(child_code)
                if child_code in self.graph:
                    continue
                node = self.graph.add(child_code, child.terminal_outcome())
                if not node.outcome.is_final:
                    stack.append(self._frame(child, child_code))
                    break
            else:
                stack.pop()
                self.graph.link(code, successors)

    @staticmethod
    def _frame(state: GameState, code: Code) -> Frame:
        return state, code, iter(range(state.board_size())), []
