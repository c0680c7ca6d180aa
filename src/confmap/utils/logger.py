import logging
import sys
from typing import Optional


def setup_logging(level: str = "INFO", log_to: Optional[str] = None,
                  log_stdout: bool = True, name: str = "confmap") -> logging.Logger:
    """
    Set up a named logger to stdout and optionally to a file.

    Args:
        level: Log level name, e.g. "DEBUG" or "INFO"
        log_to: Path to a log file. If None, no file logging is added.
        log_stdout: Whether to log to stdout.
        name: Name of the logger to configure.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    # Remove existing handlers (if any)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_stdout:
        term_handler = logging.StreamHandler(sys.stdout)
        term_handler.setFormatter(formatter)
        logger.addHandler(term_handler)

    if log_to is not None:
        file_handler = logging.FileHandler(log_to, mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
