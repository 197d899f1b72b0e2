import argparse
import json
import random
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from domain.config import GameConfig
from domain.constants import GRID_SIZE, PLAYING
from engine import FrameScheduler, GameLoop, ManualClock, MonotonicClock
from players import PLAYERS, Player
from services.leaderboard_client import LeaderboardClient
from services.local_storage import LocalStore
from services.score_reporter import ScoreReporter

load_dotenv()

DEFAULT_MAX_FRAMES = 200_000


def run_session(loop: GameLoop, player: Player, max_frames: int = DEFAULT_MAX_FRAMES) -> Dict[str, Any]:
    """
    Play one session with an autopilot player.

    The player is consulted at the start of each frame, but only while no turn
    is waiting in the snake's queue, so it reacts to the board it will
    actually move on.

    Returns:
        A dictionary summarizing the session (score, rank, collision, frames, steps).
    """
    def autopilot():
        if loop.state != PLAYING or loop.snake.direction_queue:
            return
        move = player.get_move(loop.get_current_state())
        if move is not None:
            loop.handle_input(move)

    loop.start()
    frames = loop.scheduler.run(max_frames=max_frames, before_frame=autopilot)

    event = loop.last_event
    return {
        "score": loop.score,
        "rank": event.rank if event else None,
        "collision": loop.collision_type,
        "frames": frames,
        "steps": loop.steps,
        "move_interval": loop.move_interval,
    }


def run_simulation(game_params: argparse.Namespace) -> Dict[str, Any]:
    """
    Runs headless sessions back to back on one GameLoop.

    Args:
        game_params: An object (like argparse.Namespace) containing the settings
                     (games, grid_size, player, seed, max_frames, realtime,
                     show_board, state_file, username, submit).

    Returns:
        A dictionary with per-game results and the stored high score.
    """
    rng = random.Random(game_params.seed)
    clock = MonotonicClock() if game_params.realtime else ManualClock()
    scheduler = FrameScheduler(clock)

    store = LocalStore(game_params.state_file)
    client: Optional[LeaderboardClient] = LeaderboardClient() if game_params.submit else None
    reporter = ScoreReporter(store, client)

    loop = GameLoop(
        config=GameConfig(grid_size=game_params.grid_size),
        scheduler=scheduler,
        rng=rng
    )
    loop.add_listener(reporter)
    player = PLAYERS[game_params.player](rng=rng)

    results = []
    try:
        for game_number in range(1, game_params.games + 1):
            result = run_session(loop, player, max_frames=game_params.max_frames)

            # A stored username means the reporter already auto-submitted
            if client is not None and result["score"] > 0 and not store.get_username():
                if game_params.username:
                    reporter.submit(game_params.username, result["score"])
            reporter.wait()

            if reporter.status_message:
                result["submission"] = reporter.status_message
            if reporter.last_result and reporter.last_result["new_high_score"]:
                result["new_high_score"] = True

            print(
                f"Game {game_number}: score {result['score']} ({result['rank']}), "
                f"collision={result['collision']}, steps={result['steps']}"
            )
            if game_params.show_board:
                print("\n" + loop.get_current_state().print_board() + "\n")

            results.append(result)
    finally:
        if client is not None:
            client.close()

    return {
        "games": results,
        "high_score": store.get_high_score()
    }


def main():
    parser = argparse.ArgumentParser(
        description="Run headless CRT Snake sessions with an autopilot player."
    )
    parser.add_argument("--games", type=int, default=1,
                        help="Number of sessions to play")
    parser.add_argument("--grid-size", dest="grid_size", type=int, default=GRID_SIZE,
                        help="Width and height of the board")
    parser.add_argument("--player", choices=sorted(PLAYERS), default="greedy",
                        help="Autopilot policy")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the player")
    parser.add_argument("--max-frames", dest="max_frames", type=int, default=DEFAULT_MAX_FRAMES,
                        help="Frame budget per session")
    parser.add_argument("--realtime", action="store_true",
                        help="Play at wall-clock speed instead of fast-forwarding")
    parser.add_argument("--show-board", dest="show_board", action="store_true",
                        help="Print the final board of every session")
    parser.add_argument("--state-file", dest="state_file", default=None,
                        help="Where to keep the high score, username and settings")
    parser.add_argument("--username", default=None,
                        help="Name to submit under when none is stored yet")
    parser.add_argument("--submit", action="store_true",
                        help="Submit scores to the leaderboard API")

    args = parser.parse_args()

    if args.games < 1:
        parser.error("--games must be at least 1")

    result = run_simulation(args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
