import pytest

from race_games.core.explorer import Explorer
from race_games.core.game import Outcome
from race_games.core.graph import GraphStore
from race_games.games.explicit import ExplicitGraph


def explore(positions, root):
    graph = GraphStore()
    game = ExplicitGraph.from_dict(positions)
    Explorer(graph).explore(game.state(root))
    return graph


def test_transposition_creates_one_node():
    graph = explore(
        {
            "r": {"turn": "first", "moves": ["a", "b"]},
            "a": {"turn": "second", "moves": ["c"]},
            "b": {"turn": "second", "moves": ["c"]},
            "c": {"turn": "first", "outcome": "first_player_wins"},
        },
        "r",
    )
    assert len(graph) == 4
    assert graph["r:f"].successors == ["a:s", "b:s"]
    assert graph["a:s"].successors == ["c:f"]
    assert graph["b:s"].successors == ["c:f"]
    assert graph["c:f"].predecessors == ["a:s", "b:s"]


def test_cycle_terminates_and_links_back():
    graph = explore(
        {
            "a": {"turn": "first", "moves": ["b"]},
            "b": {"turn": "second", "moves": ["c"]},
            "c": {"turn": "first", "moves": ["a"]},
        },
        "a",
    )
    assert list(graph) == ["a:f", "b:s", "c:f"]
    assert graph["c:f"].successors == ["a:f"]
    assert graph["a:f"].predecessors == ["c:f"]
    assert all(node.outcome is Outcome.UNKNOWN for _, node in graph.items())


def test_terminal_state_is_a_leaf():
    graph = explore(
        {
            "r": {"turn": "first", "moves": ["t"]},
            "t": {"turn": "second", "moves": ["x"], "outcome": "second_player_wins"},
            "x": {"turn": "first"},
        },
        "r",
    )
    assert "x:f" not in graph
    assert graph["t:s"].outcome is Outcome.SECOND_PLAYER_WINS
    assert graph["t:s"].successors == []


def test_illegal_moves_are_skipped():
    # board_size is 3 here, but "a" only has one move
    graph = explore(
        {
            "r": {"turn": "first", "moves": ["a", "b", "c"]},
            "a": {"turn": "second", "moves": ["b"]},
            "b": {"turn": "first", "outcome": "first_player_wins"},
            "c": {"turn": "second", "outcome": "invalid"},
        },
        "r",
    )
    assert graph["a:s"].successors == ["b:f"]
    assert graph["r:f"].successors == ["a:s", "b:f", "c:s"]
    assert graph["c:s"].outcome is Outcome.INVALID


def test_dead_end_has_no_successors():
    graph = explore({"r": {"turn": "first", "moves": ["d"]}, "d": {"turn": "second"}}, "r")
    assert graph["d:s"].successors == []
    assert graph["d:s"].outcome is Outcome.UNKNOWN


def test_repeated_move_targets_are_kept():
    graph = explore(
        {
            "r": {"turn": "first", "moves": ["w", "w"]},
            "w": {"turn": "second", "outcome": "first_player_wins"},
        },
        "r",
    )
    assert graph["r:f"].successors == ["w:s", "w:s"]
    assert graph["w:s"].predecessors == ["r:f", "r:f"]


def test_terminal_root_keeps_its_outcome():
    graph = explore({"t": {"turn": "first", "moves": ["t"], "outcome": "first_player_wins"}}, "t")
    assert len(graph) == 1
    assert graph["t:f"].outcome is Outcome.FIRST_PLAYER_WINS
    assert graph["t:f"].successors == []


def test_explored_root_is_not_expanded_twice():
    game = ExplicitGraph.from_dict(
        {
            "r": {"turn": "first", "moves": ["w"]},
            "w": {"turn": "second", "outcome": "first_player_wins"},
        }
    )
    graph = GraphStore()
    explorer = Explorer(graph)
    explorer.explore(game.state("r"))
    explorer.explore(game.state("r"))
    explorer.explore(game.state("w"))
    assert len(graph) == 2
    assert graph["r:f"].successors == ["w:s"]
    assert graph["w:s"].predecessors == ["r:f"]


def test_no_dangling_successors_after_exploration():
    graph = explore(
        {
            "a": {"turn": "first", "moves": ["b", "c"]},
            "b": {"turn": "second", "moves": ["a", "c"]},
            "c": {"turn": "first", "moves": ["b", "d"]},
            "d": {"turn": "second", "outcome": "second_player_wins"},
        },
        "a",
    )
    for source, target in graph.edges():
        assert source in graph
        assert target in graph


def chain(length):
    """p0 -> p1 -> ... -> p<length-1> -> won, alternating sides."""
    positions = {
        f"p{i}": {"turn": "first" if i % 2 == 0 else "second", "moves": [f"p{i + 1}"]}
        for i in range(length)
    }
    positions[f"p{length - 1}"]["moves"] = ["won"]
    positions["won"] = {"turn": "second", "outcome": "first_player_wins"}
    return positions


def test_long_chain_is_explored_past_the_recursion_limit():
    graph = explore(chain(5000), "p0")
    assert len(graph) == 5001
    assert graph["p0:f"].successors == ["p1:s"]
    assert graph["p4999:s"].successors == ["won:s"]
    assert graph["won:s"].predecessors == ["p4999:s"]
    assert all(len(graph[code].successors) == 1 for code in graph if code != "won:s")
