"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging setup (Loguru)
- Console management (Rich)
"""

# Configuration
from .config import (
    Config,
    LibraryConfig,
    LoggingConfig,
    WebConfig,
    load_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
)

# Logging
from .output import setup_loguru

# Console
from .console import get_console, get_error_console, print_error, print_line

__all__ = [
    # Config
    "Config",
    "LibraryConfig",
    "LoggingConfig",
    "WebConfig",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    # Logging
    "setup_loguru",
    # Console
    "get_console",
    "get_error_console",
    "print_error",
    "print_line",
]
