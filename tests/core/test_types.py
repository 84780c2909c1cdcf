"""
Tests for maze_search.core.types, scoring and errors
"""

import pytest

from maze_search.core.errors import DegenerateBoardError, InvalidActionError, MazeSearchError
from maze_search.core.scoring import accumulated_score, evaluate
from maze_search.core.types import ACTION_NAMES, DX, DY, NO_ACTION, NUM_ACTIONS, ScoredState


class TestActionEncoding:
    """Action constant tests."""

    def test_four_cardinal_moves(self):
        assert NUM_ACTIONS == 4
        assert len(DY) == len(ACTION_NAMES) == NUM_ACTIONS

    def test_unit_steps(self):
        """Every action moves exactly one cell orthogonally."""
        for dx, dy in zip(DX, DY):
            assert abs(dx) + abs(dy) == 1

    def test_no_action_outside_range(self):
        assert NO_ACTION not in range(NUM_ACTIONS)


class TestScoredState:
    """ScoredState tests."""

    def test_root_has_no_first_action(self, seeded_state):
        root = evaluate(seeded_state)
        assert root.first_action == NO_ACTION
        assert root.evaluated_score == seeded_state.game_score

    def test_child_at_depth_zero_is_tagged(self, seeded_state):
        """Children of the root record the action that produced them."""
        root = evaluate(seeded_state)
        child = root.child(seeded_state.clone(), 4, action=2, depth=0)
        assert child.first_action == 2

    def test_deeper_child_inherits_tag(self, seeded_state):
        """Below depth 0 the tag is copied unchanged."""
        parent = ScoredState(seeded_state, 3, 1)
        child = parent.child(seeded_state.clone(), 7, action=3, depth=2)
        assert child.first_action == 1
        assert child.evaluated_score == 7

    def test_is_done_delegates(self, scenario_state):
        entry = evaluate(scenario_state)
        assert entry.is_done is False
        scenario_state.advance(0)
        scenario_state.advance(2)
        assert entry.is_done is True


class TestScoring:
    """Scoring policy tests."""

    def test_accumulated_score_tracks_game_score(self, scenario_state):
        assert accumulated_score(scenario_state) == 0
        scenario_state.advance(0)
        assert accumulated_score(scenario_state) == 3

    def test_evaluate_uses_given_policy(self, scenario_state):
        entry = evaluate(scenario_state, lambda s: 42)
        assert entry.evaluated_score == 42


class TestErrors:
    """Error hierarchy tests."""

    def test_invalid_action_is_value_error(self):
        err = InvalidActionError(5, (0, 0))
        assert isinstance(err, ValueError)
        assert isinstance(err, MazeSearchError)
        assert err.action == 5
        assert "(0, 0)" in str(err)

    def test_degenerate_board(self):
        err = DegenerateBoardError(1, 4)
        assert isinstance(err, MazeSearchError)
        assert err.turn == 1 and err.end_turn == 4

    def test_catch_by_base(self):
        with pytest.raises(MazeSearchError):
            raise InvalidActionError(9)
