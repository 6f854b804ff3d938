"""
Output setup using Loguru.
File logging plus optional stderr output for diagnostics.
"""

import sys
from pathlib import Path

from loguru import logger


def setup_loguru(
    log_file: Path, level: str = "INFO", console_output: bool = False
) -> None:
    """
    Configure loguru for file logging, with an optional stderr sink.

    Args:
        log_file: Path to log file
        level: Minimum level for logging (DEBUG, INFO, WARNING, ERROR)
        console_output: Also write log records to stderr
    """
    # Remove default handler
    logger.remove()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,  # Keep 5 backup files
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    if console_output:
        logger.add(sys.stderr, level=level, format="{level}: {message}")

    logger.info(f"Loguru initialized: {log_file} (level={level})")
