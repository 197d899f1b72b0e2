"""
Tests for main.py - headless sessions with an autopilot player.

Everything runs on a ManualClock, so a full session takes milliseconds.
"""

import json
import pytest
import random
import sys
import os
from argparse import Namespace
from concurrent.futures import Future
from unittest.mock import MagicMock, patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main
from main import run_session, run_simulation
from domain.config import GameConfig
from domain.constants import GAME_OVER
from domain.ranks import calculate_rank
from engine import FrameScheduler, GameLoop, ManualClock
from players import GreedyPlayer, RandomPlayer


def make_params(tmp_path, **overrides):
    params = dict(
        games=2,
        grid_size=8,
        player="greedy",
        seed=3,
        max_frames=50_000,
        realtime=False,
        show_board=False,
        state_file=str(tmp_path / "state.json"),
        username=None,
        submit=False,
    )
    params.update(overrides)
    return Namespace(**params)


class TestRunSession:
    """Tests for run_session()."""

    def test_session_ends_in_collision(self):
        loop = GameLoop(
            config=GameConfig(grid_size=6),
            scheduler=FrameScheduler(ManualClock()),
            rng=random.Random(1)
        )

        result = run_session(loop, RandomPlayer(rng=random.Random(1)))

        assert loop.state == GAME_OVER
        assert result["collision"] in ("wall", "self")
        assert result["rank"] == calculate_rank(result["score"])
        assert result["steps"] >= 1
        assert result["move_interval"] == loop.config.move_interval(result["score"])

    def test_frame_budget(self):
        loop = GameLoop(
            config=GameConfig(grid_size=18),
            scheduler=FrameScheduler(ManualClock()),
            rng=random.Random(0)
        )

        result = run_session(loop, GreedyPlayer(), max_frames=5)

        assert result["frames"] == 5
        assert result["collision"] is None
        assert result["rank"] is None

    def test_player_input_goes_through_handle_input(self):
        loop = GameLoop(
            config=GameConfig(grid_size=8),
            scheduler=FrameScheduler(ManualClock()),
            rng=random.Random(2)
        )
        player = MagicMock()
        player.get_move.return_value = None

        with patch.object(loop, "handle_input", wraps=loop.handle_input) as handle_input:
            run_session(loop, player)

        player.get_move.assert_called()
        handle_input.assert_not_called()
        # Never steering, the snake runs into the right wall
        assert loop.collision_type == "wall"


class TestRunSimulation:
    """Tests for run_simulation()."""

    def test_plays_requested_games(self, tmp_path):
        result = run_simulation(make_params(tmp_path, games=3))

        assert len(result["games"]) == 3
        for game in result["games"]:
            assert game["score"] >= 0
            if game["collision"] is not None:
                assert game["rank"] == calculate_rank(game["score"])

    def test_high_score_is_persisted(self, tmp_path):
        result = run_simulation(make_params(tmp_path))

        # Only finished sessions reach the high score
        finished = [game["score"] for game in result["games"] if game["collision"]]
        best = max(finished, default=0)
        assert result["high_score"] == best

        state = json.loads((tmp_path / "state.json").read_text()) if best > 0 else {}
        assert state.get("high_score", 0) == best

    def test_same_seed_same_games(self, tmp_path):
        first = run_simulation(make_params(tmp_path / "a", player="random"))
        second = run_simulation(make_params(tmp_path / "b", player="random"))

        assert [g["score"] for g in first["games"]] == [g["score"] for g in second["games"]]
        assert [g["steps"] for g in first["games"]] == [g["steps"] for g in second["games"]]

    def test_show_board(self, tmp_path, capsys):
        result = run_simulation(make_params(tmp_path, games=1, player="random", show_board=True))
        out = capsys.readouterr().out
        assert "Game 1: score" in out
        if result["games"][0]["collision"]:
            assert "X" in out

    @patch('main.LeaderboardClient')
    def test_submit_with_username(self, mock_client_cls, tmp_path):
        client = mock_client_cls.return_value

        def submit(username, score):
            future = Future()
            future.set_result({"success": True, "position": 1, "rank": calculate_rank(score)})
            return future

        client.submit_score_async.side_effect = submit

        result = run_simulation(make_params(tmp_path, games=1, submit=True, username="agent"))

        game = result["games"][0]
        if game["score"] > 0:
            client.submit_score_async.assert_called_once_with("agent", game["score"])
            assert game["submission"] == "[ SUBMITTED - RANK #1 ]"
        client.close.assert_called_once()


class TestMain:
    def test_main_prints_summary(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", [
            "main.py", "--games", "1", "--grid-size", "6", "--seed", "4",
            "--player", "random", "--state-file", str(tmp_path / "state.json"),
        ])

        main.main()

        out = capsys.readouterr().out
        assert "Simulation Result Summary:" in out
        summary = json.loads(out.split("Simulation Result Summary:")[1])
        assert len(summary["games"]) == 1

    def test_main_rejects_zero_games(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["main.py", "--games", "0"])
        with pytest.raises(SystemExit):
            main.main()
