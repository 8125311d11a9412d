"""
Loguru-based logging for gatewatch.

Usage:
    from gatewatch.logger import logger

    logger.info("Fetching flights...")
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)

FILE_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} | "
    "{message}"
)


def setup_logger(
    log_level: str = "INFO",
    enable_stdout: bool = True,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure the logger.

    Args:
        log_level: Minimum level to emit (DEBUG, INFO, WARNING, ERROR)
        enable_stdout: Whether to log to stderr
        log_file: Optional file to log to as well; parent dirs are created
    """
    logger.remove()

    if enable_stdout:
        logger.add(
            sys.stderr,
            format=LOG_FORMAT,
            level=log_level,
            colorize=True,
        )

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            format=FILE_LOG_FORMAT,
            level=log_level,
            rotation="10 MB",
            retention="7 days",
            enqueue=True,
        )


setup_logger(log_level="WARNING")

__all__ = ["logger", "setup_logger"]
