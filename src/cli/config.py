"""Configuration loading and management."""

from pathlib import Path
from typing import Optional

import yaml

from .config_models import MoodifyConfig


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "config.yaml",
        Path.home() / ".moodify" / "config.yaml",
        Path.home() / "moodify" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config_model(config_path: Optional[Path] = None) -> MoodifyConfig:
    """Load configuration as Pydantic model with validation.

    Raises:
        ValueError: If the YAML is invalid or fails validation
    """
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    try:
        return MoodifyConfig.from_dict(base_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}")


def get_paths(config: MoodifyConfig) -> dict:
    """Get expanded paths from config."""
    return {
        "data_dir": config.paths.data_dir,
        "db_file": config.paths.db_file,
        "log_file": config.paths.log_file,
    }
