"""
Saving and loading analysed game graphs.
"""
from __future__ import annotations

import csv
import json
import pickle
from pathlib import Path
from typing import Any, Dict

from .game import Outcome
from .graph import GraphStore


class ResultStore:
    """
    Thin wrapper around JSON / CSV / Pickle for finished analyses.
    """

    def __init__(self, root_dir: str | Path):
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

    # ---------------- Documents ---------------- #

    def save_json(self, graph: GraphStore, name: str, root: str | None = None) -> Path:
        data: Dict[str, Any] = {
            "root": root,
            "summary": {outcome.value: count for outcome, count in graph.counts().items()},
            "nodes": [
                {"code": code, "outcome": outcome.value, "successors": list(successors)}
                for code, outcome, successors in graph.triples()
            ],
        }
        path = self.root_dir / f"{name}.json"
        with path.open("w") as fh:
            json.dump(data, fh, indent=2)
        return path

    def load_json(self, name: str) -> GraphStore:
        path = self.root_dir / f"{name}.json"
        with path.open() as fh:
            data = json.load(fh)
        return GraphStore.from_triples(
            (node["code"], Outcome(node["outcome"]), tuple(node["successors"]))
            for node in data["nodes"]
        )

    # ---------------- Tables ---------------- #

    def save_tables(self, graph: GraphStore, name: str) -> Dict[str, Path]:
        nodes_path = self.root_dir / f"{name}_nodes.csv"
        edges_path = self.root_dir / f"{name}_edges.csv"
        with nodes_path.open("w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(["code", "outcome", "successor_count"])
            for code, outcome, successors in graph.triples():
                writer.writerow([code, outcome.value, len(successors)])
        with edges_path.open("w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(["source", "target"])
            writer.writerows(graph.edges())
        return {"nodes": nodes_path, "edges": edges_path}

    # ---------------- Whole graph ---------------- #

    def save_graph(self, graph: GraphStore, name: str) -> Path:
        path = self.root_dir / f"{name}.pkl"
        with path.open("wb") as fh:
            pickle.dump(graph, fh)
        return path

    def load_graph(self, name: str) -> GraphStore:
        path = self.root_dir / f"{name}.pkl"
        with path.open("rb") as fh:
            return pickle.load(fh)
