"""
Process-wide application state

The GameStore and Settings are created once in the FastAPI lifespan
handler and handed to request handlers through the dependencies below.
"""
from typing import Optional

from wai_game.core.store import GameStore
from wai_game.models import Settings

# Single authoritative store, set at startup
STORE: Optional[GameStore] = None

# Loaded settings (defaults until startup replaces them)
SETTINGS: Settings = Settings()


def get_store() -> GameStore:
    """FastAPI dependency returning the store"""
    if STORE is None:
        raise RuntimeError("Game store is not initialized")
    return STORE


def get_settings() -> Settings:
    """FastAPI dependency returning the settings"""
    return SETTINGS
