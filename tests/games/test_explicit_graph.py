import pytest

from race_games.core.game import Outcome, Turn
from race_games.games.explicit import ExplicitGraph

POSITIONS = {
    "a": {"turn": "first", "moves": ["b", "won"]},
    "b": {"turn": "second", "moves": ["a"]},
    "won": {"turn": "second", "outcome": "first_player_wins"},
}


def test_state_contract():
    graph = ExplicitGraph.from_dict(POSITIONS)
    a = graph.state("a")
    assert len(graph) == 3
    assert a.board_size() == 2
    assert a.encode() == "a:f"
    assert ExplicitGraph.from_dict(POSITIONS).state("a") == a
    assert a.move_at(0).encode() == "b:s"
    assert a.move_at(2) is None
    assert graph.state("b").move_at(1) is None
    assert a.turn is Turn.FIRST
    assert graph.state("won").terminal_outcome() is Outcome.FIRST_PLAYER_WINS
    assert graph.state("won").is_terminal


def test_dict_round_trip():
    graph = ExplicitGraph.from_dict(POSITIONS)
    assert ExplicitGraph.from_dict(graph.to_dict()).to_dict() == graph.to_dict()
    assert graph.to_dict()["won"] == {"turn": "second", "moves": [], "outcome": "first_player_wins"}


@pytest.mark.parametrize(
    "positions",
    [
        {"a": {"moves": ["missing"]}},
        {"a": {"turn": "third"}},
        {"a": {"outcome": "lost"}},
        {"a": {"outcome": "drawn"}},
    ],
)
def test_invalid_definitions(positions):
    with pytest.raises(ValueError):
        ExplicitGraph.from_dict(positions)


def test_unknown_label():
    with pytest.raises(ValueError):
        ExplicitGraph.from_dict(POSITIONS).state("z")


def test_empty_graph_has_no_moves():
    graph = ExplicitGraph.from_dict({"only": None})
    state = graph.state("only")
    assert state.board_size() == 0
    assert state.encode() == "only:f"
