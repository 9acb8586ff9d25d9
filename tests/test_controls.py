"""Tests for raw key and swipe mapping."""

import math

import pytest

from grid_snake.controls import SwipeTracker, direction_for_key, direction_for_swipe
from grid_snake.engine import GameEngine
from grid_snake.snake import Direction


class TestKeyMapping:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("ArrowUp", Direction.UP),
            ("w", Direction.UP),
            ("W", Direction.UP),
            ("ArrowDown", Direction.DOWN),
            ("s", Direction.DOWN),
            ("ArrowLeft", Direction.LEFT),
            ("A", Direction.LEFT),
            ("ARROWRIGHT", Direction.RIGHT),
            ("d", Direction.RIGHT),
        ],
    )
    def test_bound_keys(self, key, expected):
        assert direction_for_key(key) == expected

    @pytest.mark.parametrize("key", ["q", "Enter", " ", "", "up"])
    def test_unknown_keys(self, key):
        assert direction_for_key(key) is None

    def test_unknown_key_leaves_engine_untouched(self):
        engine = GameEngine()
        before = engine.snapshot()
        direction = direction_for_key("x")
        if direction is not None:
            engine.request_direction_change(direction)
        assert engine.snapshot() == before


class TestSwipeMapping:
    def test_horizontal(self):
        assert direction_for_swipe(31, 0) == Direction.RIGHT
        assert direction_for_swipe(-31, 5) == Direction.LEFT

    def test_vertical(self):
        assert direction_for_swipe(0, 40) == Direction.DOWN
        assert direction_for_swipe(10, -40) == Direction.UP

    def test_threshold_is_strict(self):
        assert direction_for_swipe(30, 0) is None
        assert direction_for_swipe(0, -30) is None

    def test_dominant_axis_wins(self):
        # Large enough on x, but y dominates and is below threshold.
        assert direction_for_swipe(25, -29) is None

    def test_tie_goes_vertical(self):
        assert direction_for_swipe(50, 50) == Direction.DOWN

    def test_custom_threshold(self):
        assert direction_for_swipe(11, 0, threshold=10) == Direction.RIGHT
        assert direction_for_swipe(11, 0, threshold=20) is None


class TestSwipeTracker:
    def test_move_without_begin(self):
        assert SwipeTracker().move(100, 0) is None

    def test_emits_once_per_gesture(self):
        tracker = SwipeTracker()
        tracker.begin(100, 100)
        assert tracker.move(110, 100) is None
        assert tracker.active
        assert tracker.move(140, 105) == Direction.RIGHT
        assert not tracker.active
        assert tracker.move(200, 100) is None

    def test_cancel(self):
        tracker = SwipeTracker()
        tracker.begin(0, 0)
        tracker.cancel()
        assert tracker.move(0, 100) is None

    def test_invalid_threshold(self):
        with pytest.raises(ValueError, match="positive"):
            SwipeTracker(threshold=0)


class TestNonFiniteSwipes:
    @pytest.mark.parametrize(
        ("dx", "dy"),
        [
            (0.0, math.nan),
            (math.nan, 0.0),
            (math.nan, math.nan),
            (math.inf, 0.0),
            (0.0, -math.inf),
        ],
    )
    def test_non_finite_displacement_is_ignored(self, dx, dy):
        assert direction_for_swipe(dx, dy) is None

    def test_tracker_ignores_nan_move(self):
        tracker = SwipeTracker()
        tracker.begin(0, 0)
        assert tracker.move(0, math.nan) is None
        assert tracker.active


class TestSwipeTrackerWhileLocked:
    def test_locked_move_keeps_gesture(self):
        tracker = SwipeTracker()
        tracker.begin(100, 100)
        assert tracker.move(100, 160, accepting=False) is None
        assert tracker.active
        assert tracker.move(100, 170) == Direction.DOWN
        assert not tracker.active

    def test_gesture_registers_after_next_tick(self):
        engine = GameEngine()
        tracker = SwipeTracker()
        engine.request_direction_change(Direction.UP)
        tracker.begin(0, 0)
        assert tracker.move(-50, 0, accepting=engine.can_change_direction) is None
        engine.advance_tick()
        direction = tracker.move(-55, 0, accepting=engine.can_change_direction)
        assert direction == Direction.LEFT
        engine.request_direction_change(direction)
        assert engine.direction == Direction.LEFT
