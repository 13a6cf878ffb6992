"""Logging setup for USB Guard.

One file handler under the ``usb_guard`` logger namespace, plus a console
handler in debug mode. Modules get child loggers through get_logger().
"""

import logging
import sys
from pathlib import Path

ROOT_LOGGER = "usb_guard"


def setup_logging(log_path: Path, debug: bool = False) -> logging.Logger:
    """Configure the ``usb_guard`` logger.

    Args:
        log_path: File that receives DEBUG and above.
        debug: If True, also log to the console at DEBUG level.

    Returns:
        The application logger.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG)
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
    logger.propagate = False

    file_error = None
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        file_handler = None
        file_error = e

    if file_handler is not None:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

    if debug or file_handler is None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
        console_handler.setFormatter(logging.Formatter(
            "%(levelname)s - %(name)s - %(message)s"
        ))
        logger.addHandler(console_handler)

    if file_error is not None:
        logger.warning(f"Could not open log file {log_path}: {file_error}")

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
