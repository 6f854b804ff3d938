from pathlib import Path

from fastapi import Depends

from spotify_search.core.config import Config, load_config


def get_config() -> Config:
    """FastAPI dependency for configuration."""
    return load_config()


def get_library_path(config: Config = Depends(get_config)) -> Path:
    """FastAPI dependency for the export folder to search."""
    return Path(config.library.path).expanduser()
