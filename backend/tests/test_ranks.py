"""
Tests for domain/ranks.py and domain/config.py.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.config import GameConfig
from domain.ranks import RANKS, calculate_rank


class TestCalculateRank:
    """Tests for the score -> rank mapping."""

    @pytest.mark.parametrize("score,expected", [
        (0, "Rookie Leaker"),
        (4, "Rookie Leaker"),
        (5, "Junior Analyst"),
        (9, "Junior Analyst"),
        (10, "Field Operative"),
        (19, "Field Operative"),
        (20, "Senior Investigator"),
        (29, "Senior Investigator"),
        (30, "Deep State Threat"),
        (39, "Deep State Threat"),
        (40, "Shadow Associate"),
        (1000, "Shadow Associate"),
    ])
    def test_thresholds(self, score, expected):
        assert calculate_rank(score) == expected

    def test_rank_never_goes_down_as_score_rises(self):
        order = [name for _, name in RANKS]
        indices = [order.index(calculate_rank(score)) for score in range(100)]
        assert indices == sorted(indices)

    def test_negative_score_raises(self):
        with pytest.raises(ValueError):
            calculate_rank(-1)

    def test_game_and_server_share_one_table(self):
        """The game-over screen and the leaderboard service use the same function."""
        from engine import game_loop
        from services import leaderboard_service

        assert game_loop.calculate_rank is calculate_rank
        assert leaderboard_service.calculate_rank is calculate_rank


class TestGameConfig:
    """Tests for GameConfig validation and the speed curve."""

    def test_defaults(self):
        config = GameConfig()
        assert config.grid_size == 18
        assert config.base_speed == 150
        assert config.min_speed == 50
        assert config.game_over_duration == 500

    @pytest.mark.parametrize("score,expected", [
        (0, 150),
        (4, 150),
        (5, 135),
        (10, 120),
        (34, 60),
        (35, 50),
        (60, 50),
        (500, 50),
    ])
    def test_move_interval(self, score, expected):
        assert GameConfig().move_interval(score) == expected

    def test_move_interval_formula_over_range(self):
        config = GameConfig()
        for score in range(100):
            assert config.move_interval(score) == max(50, 150 - 15 * (score // 5))

    def test_move_interval_never_increases(self):
        config = GameConfig()
        intervals = [config.move_interval(score) for score in range(100)]
        assert all(a >= b for a, b in zip(intervals, intervals[1:]))

    def test_grid_too_small_raises(self):
        with pytest.raises(ValueError):
            GameConfig(grid_size=3)

    def test_invalid_speeds_raise(self):
        with pytest.raises(ValueError):
            GameConfig(base_speed=40, min_speed=50)
        with pytest.raises(ValueError):
            GameConfig(min_speed=0)

    def test_nodes_per_speed_increase_must_be_positive(self):
        with pytest.raises(ValueError):
            GameConfig(nodes_per_speed_increase=0)

    def test_config_is_frozen(self):
        config = GameConfig()
        with pytest.raises(AttributeError):
            config.grid_size = 10
