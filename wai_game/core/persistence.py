"""
File-backed persistence of the whole game state as one JSON document

Timestamps are written as ISO-8601 strings and rehydrated into datetime
values on load by the GameState model.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from wai_game.models import GameState


logger = logging.getLogger(__name__)


class GameStateRepository:
    """Load/save the GameState snapshot at a fixed path"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> GameState:
        """
        Load the snapshot

        - File missing: create the directory, write the default state, return it
        - File unreadable or invalid: log a warning and return the default state

        Returns:
            GameState
        """
        if not self.path.exists():
            logger.info(f"📝 No game state at {self.path}, creating a new one")
            state = GameState()
            self.save(state)
            return state

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            state = GameState.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"⚠️ Failed to load game state from {self.path}: {e}")
            logger.warning("🔄 Starting from the default state")
            return GameState()

        logger.info(
            f"✅ Loaded game state from {self.path} "
            f"({len(state.teams)} teams, {len(state.questions)} questions)"
        )
        return state

    def save(self, state: GameState) -> bool:
        """
        Overwrite the snapshot atomically (temp file + os.replace)

        Args:
            state: Aggregate to persist

        Returns:
            True on success, False if the write failed (error is logged)
        """
        data = state.model_dump(mode="json", by_alias=True)
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
            return True
        except OSError as e:
            logger.error(f"❌ Failed to save game state to {self.path}: {e}")
            return False
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
