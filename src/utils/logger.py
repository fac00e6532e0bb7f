import logging
import os
import sys

from logging.handlers import RotatingFileHandler
from typing import Optional

from utils.dataModels import LOG_LEVEL_ENV


class ConsoleHandler(logging.StreamHandler):
    """stderr handler; a distinct type so init_logger can find its own."""


def level_from_env(default: int = logging.WARNING) -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def init_logger(
    name: str = "",
    level: int = logging.WARNING,
    logfile: Optional[str] = None,
) -> logging.Logger:
    """
    Console on stderr, plus an optional rotating plain-text log file.
    Calling it again only adjusts levels; handlers are not duplicated.
    """
    logger = logging.getLogger(name)
    logger.setLevel(min(level, logging.DEBUG) if logfile else level)

    console = next((h for h in logger.handlers if isinstance(h, ConsoleHandler)), None)
    if console is None:
        console = ConsoleHandler(stream=sys.stderr)
        console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(console)
    console.setLevel(level)

    if logfile and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        file_handler = RotatingFileHandler(
            logfile, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger
