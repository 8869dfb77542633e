"""
Tests for termsnake.timing - tick intervals and due checks.
"""

import pytest

from termsnake.config import Config
from termsnake.timing import TickTimer, interval_us, is_due, monotonic_us


class TestIntervals:
    """Tests for FPS to microsecond conversion."""

    @pytest.mark.parametrize("fps,expected", [(1, 1_000_000), (6, 166_666), (30, 33_333), (7, 142_857)])
    def test_integer_division(self, fps, expected):
        assert interval_us(fps) == expected

    @pytest.mark.parametrize("fps", [0, -5])
    def test_non_positive_fps_rejected(self, fps):
        with pytest.raises(ValueError):
            interval_us(fps)

    def test_one_microsecond_at_the_top_rate(self):
        assert interval_us(1_000_000) == 1

    @pytest.mark.parametrize("fps", [1_000_001, 2_000_000])
    def test_fps_past_one_per_microsecond_rejected(self, fps):
        """A zero interval would make the tick fire on every loop pass."""
        with pytest.raises(ValueError):
            interval_us(fps)

    @pytest.mark.parametrize("field", ["render_fps", "move_fps"])
    def test_config_rejects_zero_interval(self, field):
        with pytest.raises(ValueError):
            Config(**{field: 2_000_000})

    def test_config_exposes_intervals(self):
        config = Config(render_fps=30, move_fps=6)
        assert config.render_interval_us == 33_333
        assert config.move_interval_us == 166_666


class TestIsDue:
    """Tests for the pure due check."""

    def test_due_exactly_at_interval(self):
        assert is_due(1_100, 100, 1_000)

    def test_not_due_before_interval(self):
        assert not is_due(1_099, 100, 1_000)

    def test_due_after_interval(self):
        assert is_due(5_000, 100, 1_000)


class TestTickTimer:
    """Tests for TickTimer."""

    def test_first_tick_after_one_interval(self):
        timer = TickTimer(1_000)
        assert not timer.due(0)
        assert not timer.due(999)
        assert timer.due(1_000)

    def test_not_due_until_interval_after_fire(self):
        timer = TickTimer(1_000)
        timer.fire(2_500)
        for now in (2_500, 3_000, 3_499):
            assert not timer.due(now)
        assert timer.due(3_500)

    def test_due_does_not_fire(self):
        timer = TickTimer(1_000)
        assert timer.due(1_500)
        assert timer.due(1_500)
        assert timer.last_us == 0


def test_monotonic_us_never_goes_back():
    first = monotonic_us()
    second = monotonic_us()
    assert second >= first
