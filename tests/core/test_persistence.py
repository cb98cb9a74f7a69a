import csv
import json
import tempfile
from pathlib import Path
from unittest.mock import patch

from race_games.core.analyzer import Analyzer
from race_games.core.persistence import ResultStore
from race_games.games.explicit import ExplicitGraph

CYCLE = ExplicitGraph.from_dict(
    {
        "a": {"turn": "first", "moves": ["b"]},
        "b": {"turn": "second", "moves": ["c"]},
        "c": {"turn": "first", "moves": ["a", "won"]},
        "won": {"turn": "second", "outcome": "first_player_wins"},
    }
)


def solved_analyzer():
    analyzer = Analyzer()
    analyzer.analyze(CYCLE.state("a"))
    return analyzer


def test_json_document_round_trip():
    analyzer = solved_analyzer()
    with tempfile.TemporaryDirectory() as tmp_dir:
        store = ResultStore(tmp_dir)
        path = store.save_json(analyzer.graph, "cycle", root="a:f")

        with path.open() as fh:
            data = json.load(fh)
        assert data["root"] == "a:f"
        assert data["summary"] == {"first_player_wins": 4}
        assert data["nodes"][0] == {"code": "a:f", "outcome": "first_player_wins", "successors": ["b:s"]}

        loaded = store.load_json("cycle")
        assert list(loaded.triples()) == list(analyzer.graph.triples())
        assert loaded["a:f"].predecessors == ["c:f"]


def test_tables_have_one_row_per_node_and_edge():
    analyzer = solved_analyzer()
    with tempfile.TemporaryDirectory() as tmp_dir:
        paths = ResultStore(Path(tmp_dir) / "nested").save_tables(analyzer.graph, "cycle")

        with paths["nodes"].open() as fh:
            nodes = list(csv.DictReader(fh))
        with paths["edges"].open() as fh:
            edges = list(csv.DictReader(fh))

    assert [row["code"] for row in nodes] == ["a:f", "b:s", "c:f", "won:s"]
    assert nodes[2] == {"code": "c:f", "outcome": "first_player_wins", "successor_count": "2"}
    assert [(row["source"], row["target"]) for row in edges] == list(analyzer.graph.edges())
    assert len(edges) == 4


def test_pickled_graph_serves_as_cache():
    analyzer = solved_analyzer()
    with tempfile.TemporaryDirectory() as tmp_dir:
        store = ResultStore(tmp_dir)
        store.save_graph(analyzer.graph, "cycle")
        reloaded = Analyzer(graph=store.load_graph("cycle"))

    with patch.object(reloaded.explorer, "explore") as explore:
        assert reloaded.analyze(CYCLE.state("b")) is analyzer.outcome_of("b:s")
        explore.assert_not_called()
