from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .game import Code, Outcome

Triple = Tuple[Code, Outcome, Tuple[Code, ...]]


@dataclass
class Node:
    """Analysis record for one Code."""

    outcome: Outcome = Outcome.UNKNOWN
    # one entry per legal move, in move order
    successors: List[Code] = field(default_factory=list)
    predecessors: List[Code] = field(default_factory=list)


class GraphStore:
    """
    Mapping Code -> Node shared by the explorer and the solvers.

    Successor lists hold Codes, never Node references. Iteration follows
    discovery order, so reports are deterministic for a fixed game.
    """

    def __init__(self) -> None:
        self._nodes: Dict[Code, Node] = {}

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------
    def __contains__(self, code: object) -> bool:
        return code in self._nodes

    def __getitem__(self, code: Code) -> Node:
        return self._nodes[code]

    def __iter__(self) -> Iterator[Code]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def get(self, code: Code) -> Optional[Node]:
        return self._nodes.get(code)

    def items(self) -> Iterable[Tuple[Code, Node]]:
        return self._nodes.items()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add(self, code: Code, outcome: Outcome = Outcome.UNKNOWN) -> Node:
        """Insert a fresh Node, or return the existing one untouched."""
        node = self._nodes.get(code)
        if node is None:
            node = Node(outcome=outcome)
            self._nodes[code] = node
        return node

    def link(self, code: Code, successors: Sequence[Code]) -> None:
        """Append successors to ``code`` and record the reverse edges."""
        self._nodes[code].successors.extend(successors)
        for successor in successors:
            self._nodes[successor].predecessors.append(code)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    def outcome_of(self, code: Code) -> Outcome:
        node = self._nodes.get(code)
        return node.outcome if node is not None else Outcome.UNKNOWN

    def triples(self) -> Iterator[Triple]:
        for code, node in self._nodes.items():
            yield code, node.outcome, tuple(node.successors)

    def edges(self) -> Iterator[Tuple[Code, Code]]:
        for code, node in self._nodes.items():
            for successor in node.successors:
                yield code, successor

    def counts(self) -> Counter:
        return Counter(node.outcome for node in self._nodes.values())

    @classmethod
    def from_triples(cls, triples: Iterable[Triple]) -> "GraphStore":
        """Rebuild a store, predecessors included, from exported triples."""
        graph = cls()
        rows = list(triples)
        for code, outcome, _ in rows:
            graph.add(code, outcome)
        for code, _, successors in rows:
            graph.link(code, successors)
        return graph
