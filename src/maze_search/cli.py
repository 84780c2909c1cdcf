"""
Command-line interface for running maze strategies.
"""

import argparse
import logging

import numpy as np

from maze_search.simulation import average_score, run_game
from maze_search.utils.config import Config
from maze_search.utils.factory import STRATEGIES, create_agent


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play the point-collecting maze with a search strategy"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=list(STRATEGIES.keys()),
        default="greedy",
        help="Strategy to run (default: greedy)",
    )
    parser.add_argument(
        "--games", "-n",
        type=int,
        default=1,
        help="Number of games; more than one prints only the average (default: 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Board seed for one game, or seed for drawing boards (default: random)",
    )
    parser.add_argument("--height", type=int, default=3, help="Board rows (default: 3)")
    parser.add_argument("--width", type=int, default=4, help="Board columns (default: 4)")
    parser.add_argument(
        "--end-turn", "-t",
        type=int,
        default=4,
        help="Turns per game (default: 4)",
    )
    parser.add_argument(
        "--characters",
        type=int,
        default=3,
        help="Characters in the auto-move maze (default: 3)",
    )
    parser.add_argument("--beam-width", type=int, default=2, help="Beam width (default: 2)")
    parser.add_argument(
        "--beam-depth",
        type=int,
        default=None,
        help="Lookahead depth (default: end turn)",
    )
    parser.add_argument(
        "--beam-number",
        type=int,
        default=2,
        help="Chokudai rounds (default: 2)",
    )
    parser.add_argument(
        "--chokudai-width",
        type=int,
        default=1,
        help="Chokudai width per round (default: 1)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=10_000,
        help="Hill climbing iterations (default: 10000)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log per-game results",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = Config(
        height=args.height,
        width=args.width,
        end_turn=args.end_turn,
        character_n=args.characters,
        beam_width=args.beam_width,
        beam_depth=args.beam_depth,
        beam_number=args.beam_number,
        chokudai_width=args.chokudai_width,
        hill_climb_iterations=args.iterations,
    )
    agent = create_agent(args.strategy, config, np.random.default_rng(args.seed))

    if args.games == 1:
        score = run_game(agent, args.seed, config, verbose=True)
        print(f"Score of {agent}: {score}")
    else:
        average = average_score(agent, args.games, config, seed=args.seed)
        print(f"Average score of {agent} over {args.games} games: {average:.2f}")


if __name__ == "__main__":
    main()
