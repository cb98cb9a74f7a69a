#!/usr/bin/env python3
"""
Analyse every reachable position of a game and report the root outcome.

Usage:
    python scripts/analyze.py configs/race3.yaml
    python scripts/analyze.py configs/cycle_escape.yaml --solver retrograde --output-dir results
"""

import argparse
import logging
import sys
import time
from pathlib import Path

import yaml

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from race_games.core.analyzer import SOLVERS, Analyzer
from race_games.core.game import GameState, Turn
from race_games.core.persistence import ResultStore
from race_games.games.explicit import ExplicitGraph
from race_games.games.race import RaceRules, RaceState


def create_root_state(config: dict) -> GameState:
    """Create the root state from config."""
    game_config = config["game"]

    if game_config["type"] == "race":
        rules = RaceRules.from_dict(game_config.get("rules"))
        first = Turn(game_config.get("first", "first"))
        return RaceState.initial(rules, first)
    elif game_config["type"] == "explicit":
        graph = ExplicitGraph.from_dict(game_config["positions"])
        return graph.state(str(game_config["root"]))
    else:
        raise ValueError(f"Unknown game type: {game_config['type']}")


def save_outputs(analyzer: Analyzer, root: GameState, config: dict, output_dir: str | None) -> None:
    output_config = config.get("output", {})
    store = ResultStore(output_dir or output_config.get("dir", "results"))
    name = output_config.get("name", "analysis")

    if output_config.get("json", True):
        print(f"Wrote {store.save_json(analyzer.graph, name, root=root.encode())}")
    if output_config.get("tables", False):
        for path in store.save_tables(analyzer.graph, name).values():
            print(f"Wrote {path}")
    if output_config.get("pickle", False):
        print(f"Wrote {store.save_graph(analyzer.graph, name)}")


def main():
    parser = argparse.ArgumentParser(description="Solve every reachable position of a two-player race game")
    parser.add_argument("config", type=str, help="Path to YAML configuration file")
    parser.add_argument("--solver", choices=sorted(SOLVERS), help="Override analysis.solver from the config")
    parser.add_argument("--output-dir", type=str, help="Override output.dir from the config")
    parser.add_argument("--no-output", action="store_true", help="Only print the summary")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        format="%(asctime)s %(levelname)-8s %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Load configuration
    config_path = Path(args.config)
    if not config_path.exists():
        print(f"Configuration file not found: {config_path}")
        sys.exit(1)

    with config_path.open() as f:
        config = yaml.safe_load(f)

    print(f"Loaded configuration from {config_path}")

    root = create_root_state(config)
    solver = args.solver or config.get("analysis", {}).get("solver", "induction")
    analyzer = Analyzer(solver=solver)

    start = time.perf_counter()
    outcome = analyzer.analyze(root)
    elapsed = time.perf_counter() - start

    print("--------------------------------------")
    print(f"{root.encode()} is {outcome.value}:")
    print()
    print(f"\tStates:     {len(analyzer.graph):-10}")
    print(f"\tEdges:      {sum(1 for _ in analyzer.graph.edges()):-10}")
    for result, count in sorted(analyzer.graph.counts().items(), key=lambda kv: kv[0].value):
        print(f"\t{result.value + ':':<20}{count:-10}")
    print(f"\tTime:       {elapsed:-10.2f} s")
    print("--------------------------------------")

    if not args.no_output:
        save_outputs(analyzer, root, config, args.output_dir)


if __name__ == "__main__":
    main()
