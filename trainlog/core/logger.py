"""Logger configuration for the training log analytics.

Levels and the optional file sink come from settings (LOG_LEVEL, LOG_FILE,
LOG_ROTATION, LOG_RETENTION); explicit arguments win over them.
"""

import sys
from pathlib import Path

from loguru import logger

from trainlog.config.settings import settings

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str | None = None, log_file: str | None = None, debug: bool = False) -> str:
    """Configure loguru with a stderr sink and, when configured, a rotating file sink.

    Args:
        level: Logging level; defaults to settings.log_level
        log_file: Log file path; defaults to settings.log_file (None disables the file sink)
        debug: Force DEBUG regardless of level

    Returns:
        The effective level
    """
    effective_level = "DEBUG" if debug else (level or settings.log_level)
    file_path = log_file or settings.log_file

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=effective_level, colorize=True)

    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            format=FILE_FORMAT,
            level=effective_level,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression="zip",
        )

    logger.debug(f"Logger initialized with level={effective_level} file={file_path}")
    return effective_level
