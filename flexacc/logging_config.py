"""
Logging configuration for the flexacc package and its command line tool.

Library modules only create loggers via ``logging.getLogger(__name__)``;
handlers are installed by the application through ``setup_logging``.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# Log directory (overridable through the environment)
_env_log_dir = os.getenv("FLEXACC_LOG_DIR")
LOG_DIR = (
    Path(_env_log_dir).expanduser()
    if _env_log_dir
    else Path(__file__).parent.parent / "logs"
)

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = True,
):
    """
    Configure the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Log file name inside LOG_DIR (prefixed with the date)
        console: Whether to log to stderr
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        try:
            LOG_DIR.mkdir(parents=True, exist_ok=True)
            date_str = datetime.now().strftime("%Y%m%d")
            file_handler = logging.FileHandler(LOG_DIR / f"{date_str}_{log_file}", encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError:
            # Keep console logging if the log directory is not writable
            root_logger.warning("Cannot write log file in %s", LOG_DIR)

    return root_logger


def get_log_level(env_var: str, default: int = logging.INFO) -> int:
    """
    Read a log level name from the environment, falling back to ``default``.

    Args:
        env_var: Environment variable name
        default: Default log level

    Returns:
        Log level (logging.INFO etc.)
    """
    value = os.getenv(env_var, "").upper().strip()
    if not value:
        return default
    level = getattr(logging, value, default)
    return level if isinstance(level, int) else default


__all__ = [
    "setup_logging",
    "get_log_level",
    "LOG_DIR",
    "LOG_FORMAT",
]
