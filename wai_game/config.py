"""
Configuration loader
"""
import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from wai_game.models import Settings


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/settings.yaml"
CONFIG_ENV_VAR = "WAI_GAME_CONFIG"


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load server settings from a YAML file

    Args:
        config_path: Path to config file (default: $WAI_GAME_CONFIG or
                     config/settings.yaml)

    Returns:
        Settings object; defaults when the file does not exist
    """
    path = Path(config_path or os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH))

    if not path.exists():
        logger.info(f"No config file at {path}, using defaults")
        return Settings()

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return Settings(**data)
