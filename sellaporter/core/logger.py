"""Logger configuration for Sellaporter.

Phase resolution never raises on bad author input; it logs a WARNING and
falls back. Those warnings are the only trace of a misconfigured page, so
the console sink is always installed and the file sink is opt-in via
``LOG_FILE``.
"""

import sys
from pathlib import Path

from loguru import logger

from sellaporter.core.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(
    level: str | None = None,
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> Path | None:
    """Configure loguru with a console sink and an optional rotating file sink.

    Args:
        level: Logging level; defaults to ``LOG_LEVEL``
        log_file: Path to a log file; defaults to ``LOG_FILE`` (empty means console only)
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")

    Returns:
        Path of the file sink, or None when logging to the console only
    """
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file or None

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    log_path = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # diagnose dumps local variables (raw page fields included) into tracebacks
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=level == "DEBUG",
        )

    logger.info(f"Sellaporter logging at {level}" + (f", file sink {log_path}" if log_path else ""))
    return log_path
