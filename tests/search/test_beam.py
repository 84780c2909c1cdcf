"""
Tests for maze_search.search.beam

Tests beam search against greedy, brute force and hand-built boards.
"""

import pytest

from maze_search.core.types import NO_ACTION
from maze_search.games.maze import MazeState
from maze_search.search.beam import beam_search_action
from maze_search.search.greedy import greedy_action

SEEDS = range(20)


class TestAgainstGreedy:
    """Width 1, depth 1 is exactly greedy."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_same_action_every_turn(self, seed: int):
        state = MazeState.from_seed(seed, 5, 5, 8)
        while not state.is_done():
            expected = greedy_action(state)
            assert beam_search_action(state, 1, 1) == expected
            state.advance(expected)

    def test_same_on_ties(self):
        """Tie-break agrees with greedy on an all-empty board."""
        state = MazeState.from_seed(0, 3, 3, 3)
        state.points[:] = 0
        assert beam_search_action(state, 1, 1) == greedy_action(state)


class TestAgainstBruteForce:
    """Unbounded width over the full horizon is optimal."""

    @pytest.mark.parametrize("seed", range(8))
    def test_reaches_optimum(self, seed: int, brute_force, play):
        state = MazeState.from_seed(seed, 3, 3, 4)
        optimum = brute_force(state)
        play(state, lambda s: beam_search_action(s, 10_000, s.end_turn))
        assert state.game_score == optimum


class TestLookahead:
    """Hand-built boards where depth matters."""

    def test_avoids_lure(self, lure_state: MazeState):
        """Two-level beam takes 1 now to reach 9 next."""
        assert beam_search_action(lure_state, 2, 2) == 0

    def test_width_one_is_myopic(self, lure_state: MazeState):
        """Width 1 only follows the greedy branch."""
        assert beam_search_action(lure_state, 1, 2) == 1

    def test_scenario(self, scenario_state: MazeState):
        assert beam_search_action(scenario_state, 2, 2) == 0

    def test_stops_at_horizon(self, scenario_state: MazeState):
        """Depth beyond the horizon stops early with the same answer."""
        assert beam_search_action(scenario_state, 2, 50) == beam_search_action(scenario_state, 2, 2)


class TestContract:
    """Engine contract tests."""

    def test_idempotent_on_equal_states(self):
        """Structurally equal states give identical answers."""
        for seed in SEEDS:
            a = MazeState.from_seed(seed, 4, 4, 6)
            b = MazeState.from_seed(seed, 4, 4, 6)
            assert beam_search_action(a, 3, 4) == beam_search_action(b, 3, 4)

    def test_does_not_mutate(self, seeded_state: MazeState):
        before = seeded_state.points.copy()
        beam_search_action(seeded_state, 3, 4)
        assert (seeded_state.points == before).all()
        assert seeded_state.turn == 0

    def test_returns_legal_action(self, seeded_state: MazeState):
        assert beam_search_action(seeded_state, 2, 4) in seeded_state.legal_actions()

    def test_no_legal_action(self, single_cell_state: MazeState):
        assert beam_search_action(single_cell_state, 2, 3) == NO_ACTION

    @pytest.mark.parametrize("width,depth", [(0, 1), (1, 0), (-1, 3)])
    def test_invalid_budget(self, seeded_state: MazeState, width: int, depth: int):
        with pytest.raises(ValueError):
            beam_search_action(seeded_state, width, depth)
