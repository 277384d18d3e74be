"""
Configuration access for the Sensai web application.
"""

import os
from pathlib import Path
from functools import lru_cache

from core.config_loader import AppConfig, load_config


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads config.yaml (path overridable with SENSAI_CONFIG) and applies
    environment variable overrides. Result is cached for the process.
    """
    config_path = os.environ.get("SENSAI_CONFIG", str(get_project_root() / 'config.yaml'))
    return load_config(config_path)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent
