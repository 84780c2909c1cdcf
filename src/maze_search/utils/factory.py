"""
Factory functions for creating states and strategy agents.
"""

from functools import partial
from typing import Callable, Dict, Optional, Union

import numpy as np

from maze_search.agent.agent import Agent, Kind
from maze_search.games import AutoMoveMazeState, MazeState
from maze_search.search import (
    beam_search_action,
    chokudai_search_action,
    greedy_action,
    hill_climb,
    random_action,
    random_placement,
)
from maze_search.utils.config import DEFAULT_CONFIG, GAMES, Config


def _random(config: Config, rng: np.random.Generator) -> Agent:
    return Agent("random", partial(random_action, rng=rng))


def _greedy(config: Config, rng: np.random.Generator) -> Agent:
    return Agent("greedy", greedy_action)


def _beam(config: Config, rng: np.random.Generator) -> Agent:
    return Agent(
        "beam",
        partial(beam_search_action, beam_width=config.beam_width, beam_depth=config.beam_depth),
        Kind.ACTION,
        {"width": config.beam_width, "depth": config.beam_depth},
    )


def _chokudai(config: Config, rng: np.random.Generator) -> Agent:
    return Agent(
        "chokudai",
        partial(
            chokudai_search_action,
            beam_width=config.chokudai_width,
            beam_depth=config.beam_depth,
            beam_number=config.beam_number,
        ),
        Kind.ACTION,
        {"width": config.chokudai_width, "depth": config.beam_depth, "rounds": config.beam_number},
    )


def _random_placement(config: Config, rng: np.random.Generator) -> Agent:
    return Agent("random_placement", partial(random_placement, rng=rng), Kind.PLACEMENT)


def _hill_climb(config: Config, rng: np.random.Generator) -> Agent:
    return Agent(
        "hill_climb",
        partial(hill_climb, number=config.hill_climb_iterations, rng=rng),
        Kind.PLACEMENT,
        {"iterations": config.hill_climb_iterations},
    )


STRATEGIES: Dict[str, Callable[[Config, np.random.Generator], Agent]] = {
    "random": _random,
    "greedy": _greedy,
    "beam": _beam,
    "chokudai": _chokudai,
    "random_placement": _random_placement,
    "hill_climb": _hill_climb,
}


def create_agent(
    name: str,
    config: Config = DEFAULT_CONFIG,
    rng: Optional[np.random.Generator] = None,
) -> Agent:
    """
    Create a strategy agent with its parameters bound from `config`.

    Args:
        name: Key from STRATEGIES registry (e.g., "beam")
        config: Source of width / depth / round / iteration settings
        rng: Randomness for stochastic strategies (fresh if omitted)

    Returns:
        Configured agent
    """
    if name not in STRATEGIES:
        available = ", ".join(STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")

    rng = rng if rng is not None else np.random.default_rng()
    return STRATEGIES[name](config, rng)


def create_state(
    game_name: str,
    seed: Optional[int],
    config: Config = DEFAULT_CONFIG,
) -> Union[MazeState, AutoMoveMazeState]:
    """
    Create a seeded initial state.

    Args:
        game_name: Key from GAMES registry (e.g., "maze")
        seed: Board seed; equal seeds give equal boards
        config: Board size and horizon

    Returns:
        Fresh initial state
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    if game_name == "auto_move_maze":
        return AutoMoveMazeState.from_seed(
            seed, config.height, config.width, config.end_turn, config.character_n
        )
    return GAMES[game_name].from_seed(seed, config.height, config.width, config.end_turn)


def game_for(agent: Agent) -> str:
    """Game an agent plays: placement agents need the auto-move maze."""
    return "auto_move_maze" if agent.kind is Kind.PLACEMENT else "maze"
