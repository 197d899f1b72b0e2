"""
Rank labels derived from a score.

Both the game loop (game-over screen) and the leaderboard service import
calculate_rank from here, so the two sides can never disagree.
"""

from typing import List, Tuple

# (min_score, name), ascending by threshold
RANKS: List[Tuple[int, str]] = [
    (0, "Rookie Leaker"),
    (5, "Junior Analyst"),
    (10, "Field Operative"),
    (20, "Senior Investigator"),
    (30, "Deep State Threat"),
    (40, "Shadow Associate"),
]


def calculate_rank(score: int) -> str:
    """
    Return the label of the highest threshold not exceeding score.

    Raises:
        ValueError: If score is negative.
    """
    if score < 0:
        raise ValueError(f"Score must be non-negative, got {score}")

    rank = RANKS[0][1]
    for min_score, name in RANKS:
        if score >= min_score:
            rank = name
    return rank
