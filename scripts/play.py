#!/usr/bin/env python3
"""
Play one race between two agents and print every position.

Usage:
    python scripts/play.py configs/race3.yaml --first solved --second random --seed 7
"""

import argparse
import random
import sys
from pathlib import Path

import yaml

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from race_games.agents import RandomAgent, SolvedGraphAgent
from race_games.core.analyzer import Analyzer
from race_games.core.game import Turn
from race_games.games.race import RaceGame, RaceRules


def create_agent(kind: str, analyzer: Analyzer, rng: random.Random):
    """Create agent instance by name."""
    if kind == "random":
        return RandomAgent(rng=rng)
    elif kind == "solved":
        return SolvedGraphAgent(analyzer, rng=rng)
    else:
        raise ValueError(f"Unknown agent type: {kind}")


def main():
    parser = argparse.ArgumentParser(description="Play a race game between two agents")
    parser.add_argument("config", type=str, help="Path to YAML configuration file (game.type must be race)")
    parser.add_argument("--first", choices=["random", "solved"], default="solved", help="Agent for the first side")
    parser.add_argument("--second", choices=["random", "solved"], default="random", help="Agent for the second side")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()

    config_path = Path(args.config)
    if not config_path.exists():
        print(f"Configuration file not found: {config_path}")
        sys.exit(1)

    with config_path.open() as f:
        config = yaml.safe_load(f)

    game_config = config["game"]
    if game_config["type"] != "race":
        print(f"Only race games can be played, got {game_config['type']}")
        sys.exit(1)

    game = RaceGame(RaceRules.from_dict(game_config.get("rules")), first=Turn(game_config.get("first", "first")))
    rng = random.Random(args.seed)
    analyzer = Analyzer()
    agents = {
        Turn.FIRST: create_agent(args.first, analyzer, rng),
        Turn.SECOND: create_agent(args.second, analyzer, rng),
    }

    state = game.reset()
    print(f"Root outcome: {analyzer.analyze(state).value}")
    game.render()
    done = False
    info = {}
    while not done:
        mover = state.to_move
        action = agents[mover].act(state)
        state, _, done, info = game.step(action)
        print(f"\n{mover.value} moves piece {action}")
        game.render()

    print(f"\nResult: {info['outcome'].value}")


if __name__ == "__main__":
    main()
