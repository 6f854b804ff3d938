"""
Configuration management for Spotify Search
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


LIBRARY_PATH_ENV = "SPOTIFY_SEARCH_LIBRARY_PATH"


@dataclass
class LibraryConfig:
    """Configuration for the exported library snapshot."""

    path: str = field(default_factory=lambda: str(Path.home() / "spotify-backup"))


@dataclass
class WebConfig:
    """Configuration for the HTTP front-end."""

    host: str = "127.0.0.1"
    port: int = 3030
    page_size: int = 200  # Max items returned by /api/search
    fallback_thumbnail_url: str = "/static/fallback-cover.svg"

    def validate(self) -> None:
        """Validate web configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not 0 < self.port < 65536:
            raise ValueError(f"Invalid port: {self.port}")
        if self.page_size < 1:
            raise ValueError(f"Invalid page_size: {self.page_size}")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/spotify-search/spotify-search.log)
    )
    console_output: bool = False  # Also output to stderr


@dataclass
class Config:
    """Main configuration object."""

    library: LibraryConfig = field(default_factory=LibraryConfig)
    web: WebConfig = field(default_factory=WebConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "spotify-search"
    return Path.home() / ".config" / "spotify-search"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/spotify-search (or ~/.config/spotify-search)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "spotify-search"
    return Path.home() / ".local" / "share" / "spotify-search"


def get_log_file_path(config: Config) -> Path:
    """Resolve the log file from config, defaulting to the data directory."""
    if config.logging.log_file:
        return Path(config.logging.log_file)
    return get_data_dir() / "spotify-search.log"


def _apply_env_overrides(config: Config) -> Config:
    library_path = os.environ.get(LIBRARY_PATH_ENV)
    if library_path:
        config.library.path = str(Path(library_path).expanduser())
    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Environment variables override TOML values:
    - SPOTIFY_SEARCH_LIBRARY_PATH
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Error loading configuration from {config_path}: {e}")
        print("Using default configuration.")
        return _apply_env_overrides(Config())

    config = Config()

    if "library" in toml_data:
        library_data = toml_data["library"]
        config.library = LibraryConfig(
            path=str(Path(library_data.get("path", config.library.path)).expanduser()),
        )

    if "web" in toml_data:
        web_data = toml_data["web"]
        config.web = WebConfig(
            host=web_data.get("host", config.web.host),
            port=web_data.get("port", config.web.port),
            page_size=web_data.get("page_size", config.web.page_size),
            fallback_thumbnail_url=web_data.get(
                "fallback_thumbnail_url", config.web.fallback_thumbnail_url
            ),
        )
        try:
            config.web.validate()
        except ValueError as e:
            print(f"Warning: Invalid web configuration: {e}")
            print("Using default web configuration.")
            config.web = WebConfig()

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )

    return _apply_env_overrides(config)
