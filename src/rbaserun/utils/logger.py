"""
Logging configuration module.

Console output for the user plus an optional debug-level log file.
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = '[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: int = logging.WARNING, log_file: str | Path | None = None) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Console logging level (logging.DEBUG, logging.INFO, etc.)
        log_file: Optional path to log file
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # stderr keeps stdout clean for --dry-run output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)  # Always debug to file
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG,  # Capture all levels, handlers filter
        handlers=handlers,
        force=True
    )

    logger = logging.getLogger(__name__)
    logger.debug("Logging initialized, console level %s", logging.getLevelName(level))
    if log_file:
        logger.debug("Log file: %s", log_file)
