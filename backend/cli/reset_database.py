#!/usr/bin/env python3
"""
Reset the leaderboard to a clean state.

Deletes every leaderboard row while keeping the table and index.

Usage:
    python backend/cli/reset_database.py [--confirm]
"""

import os
import sys
import argparse

# Add parent directory to path to import backend modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dotenv import load_dotenv  # noqa: E402

from data_access.repositories import LeaderboardRepository  # noqa: E402


def reset_database(confirm: bool = False, repository: LeaderboardRepository = None) -> bool:
    """
    Delete all leaderboard entries.

    Args:
        confirm: If True, skip confirmation prompt
        repository: Repository to clear (defaults to the PostgreSQL one)

    Returns:
        True if reset was successful, False otherwise
    """
    repository = repository or LeaderboardRepository()

    if not confirm:
        print("=" * 70)
        print("LEADERBOARD RESET WARNING")
        print("=" * 70)
        print("This will DELETE ALL entries from the leaderboard table.")
        print("The schema structure will be preserved.")
        print("=" * 70)

        response = input("\nType 'RESET' to confirm: ")

        if response != 'RESET':
            print("Reset cancelled")
            return False

    print("\nResetting leaderboard...")

    try:
        deleted = repository.clear()
    except Exception as e:
        print(f"\nError resetting leaderboard: {e}")
        return False

    print(f"  Cleared leaderboard: {deleted} rows deleted")
    print("Leaderboard reset complete")
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Reset the leaderboard to a clean state"
    )
    parser.add_argument(
        '--confirm',
        action='store_true',
        help="Skip confirmation prompt"
    )

    args = parser.parse_args()

    load_dotenv()
    success = reset_database(confirm=args.confirm)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
