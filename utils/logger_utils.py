import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

# Constants
LOG_FORMAT = "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_SIZE_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 3

# Chatty transport libraries, kept at WARNING unless debugging
NOISY_LOGGERS = ("web3", "urllib3", "aiohttp", "asyncio")

FORMATTER = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def _get_console_handler() -> logging.StreamHandler:
    # stderr, so command output on stdout stays machine readable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(FORMATTER)
    return console_handler


def _get_file_handler(log_file: str) -> RotatingFileHandler:
    file_handler = RotatingFileHandler(log_file, maxBytes=MAX_LOG_SIZE_BYTES, backupCount=LOG_BACKUP_COUNT)
    file_handler.setFormatter(FORMATTER)
    return file_handler


def _resolve_level(log_level: Union[int, str]) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(filename: Optional[str] = None, log_level: Union[int, str] = logging.INFO) -> None:
    """
    Configures the root logger for the application.
    Called once from the CLI entry point.

    Args:
        filename: Optional path to a log file. If provided, file logging is enabled.
        log_level: Level as an int (logging.DEBUG) or a name ("DEBUG").
    """
    level = _resolve_level(log_level)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplicate logging
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.addHandler(_get_console_handler())

    if filename:
        try:
            root_logger.addHandler(_get_file_handler(filename))
        except OSError as e:
            sys.stderr.write(f"Warning: Could not set up file logging to '{filename}': {e}\n")

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
