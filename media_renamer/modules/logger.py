import logging
import os
from typing import Optional

from colorama import Fore, Style

from ..settings import LOGGER_NAME, LOG_FORMAT_CONSOLE, LOG_FORMAT_FILE


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def setup_logger(log_file: Optional[str] = None, verbose: bool = False) -> logging.Logger:
    """Configure logging to console and, optionally, to a file."""
    logger = get_logger()
    logger.setLevel(logging.DEBUG)

    # Each handler kind is attached once; repeated calls only adjust levels
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    if len(file_handlers) == len(logger.handlers):
        c_handler = logging.StreamHandler()
        c_handler.setFormatter(logging.Formatter(LOG_FORMAT_CONSOLE))
        logger.addHandler(c_handler)

    if log_file:
        log_path = os.path.abspath(log_file)
        if not any(h.baseFilename == log_path for h in file_handlers):
            os.makedirs(os.path.dirname(log_path), exist_ok=True)
            f_handler = logging.FileHandler(log_path, encoding="utf-8")
            f_handler.setLevel(logging.DEBUG)
            f_handler.setFormatter(logging.Formatter(LOG_FORMAT_FILE))
            logger.addHandler(f_handler)

    for handler in logger.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    return logger


def log_info(logger, message, color=Fore.WHITE):
    """Log info with color support for console."""
    logger.info(f"{color}{message}{Style.RESET_ALL}")


def log_error(logger, message):
    """Log error with red color."""
    logger.error(f"{Fore.RED}{message}{Style.RESET_ALL}")


def log_success(logger, message):
    """Log success with green color."""
    logger.info(f"{Fore.GREEN}{message}{Style.RESET_ALL}")
