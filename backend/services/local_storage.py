"""
Player-side persistence: high score, last username and settings.

State lives in one JSON file. When the file cannot be read or written the
store keeps working from memory for the rest of the session.
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

STATE_FILENAME = "state.json"

HIGH_SCORE_KEY = "high_score"
USERNAME_KEY = "username"
SETTINGS_KEY = "settings"

DEFAULT_SETTINGS = {
    "sound": False,
    "crtEffects": True,
    "music": True,
}


def default_state_path() -> Path:
    """SNAKE_DATA_DIR/state.json, or ~/.crt-snake/state.json."""
    data_dir = os.getenv("SNAKE_DATA_DIR")
    if data_dir:
        return Path(data_dir).expanduser() / STATE_FILENAME
    return Path.home() / ".crt-snake" / STATE_FILENAME


class LocalStore:
    """
    JSON-file backed store with an in-memory fallback.

    Args:
        path: State file location (defaults to default_state_path())
    """

    def __init__(self, path: Optional[os.PathLike] = None):
        self.path = Path(path) if path is not None else default_state_path()
        self._memory: Dict[str, Any] = {}
        # Set after a failed write, so a stale file doesn't shadow newer values
        self._memory_only = False

    def _read(self) -> Dict[str, Any]:
        if self._memory_only:
            return dict(self._memory)
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return dict(self._memory)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {self.path}: {e}")
            return dict(self._memory)

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {self.path}: expected a JSON object")
            return dict(self._memory)

        self._memory = dict(data)
        return data

    def _write(self, data: Dict[str, Any]) -> bool:
        self._memory = dict(data)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning(f"Could not save {self.path}: {e}")
            self._memory_only = True
            return False

        self._memory_only = False
        return True

    # -------------------------------------------------------------------------
    # High score
    # -------------------------------------------------------------------------

    def get_high_score(self) -> int:
        value = self._read().get(HIGH_SCORE_KEY, 0)
        try:
            return int(value)
        except (TypeError, ValueError):
            return 0

    def save_high_score(self, score: int) -> bool:
        """
        Store score if it beats the current high score.

        Returns:
            True if this is a new high score
        """
        if score <= self.get_high_score():
            return False

        data = self._read()
        data[HIGH_SCORE_KEY] = score
        self._write(data)
        return True

    # -------------------------------------------------------------------------
    # Username
    # -------------------------------------------------------------------------

    def get_username(self) -> Optional[str]:
        value = self._read().get(USERNAME_KEY)
        return value if isinstance(value, str) and value else None

    def save_username(self, username: str) -> None:
        data = self._read()
        data[USERNAME_KEY] = username
        self._write(data)

    # -------------------------------------------------------------------------
    # Settings
    # -------------------------------------------------------------------------

    def get_settings(self) -> Dict[str, bool]:
        """Recognised settings, each falling back to its own default."""
        stored = self._read().get(SETTINGS_KEY)
        if not isinstance(stored, dict):
            stored = {}

        settings = dict(DEFAULT_SETTINGS)
        for key in DEFAULT_SETTINGS:
            if isinstance(stored.get(key), bool):
                settings[key] = stored[key]
        return settings

    def save_settings(self, settings: Dict[str, Any]) -> Dict[str, bool]:
        merged = self.get_settings()
        for key in DEFAULT_SETTINGS:
            if key in settings:
                merged[key] = bool(settings[key])

        data = self._read()
        data[SETTINGS_KEY] = merged
        self._write(data)
        return merged

    def clear_all(self) -> None:
        self._memory = {}
        self._memory_only = False
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove {self.path}: {e}")
