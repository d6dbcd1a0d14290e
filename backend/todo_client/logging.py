import logging
from typing import Optional

from .config import Settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger, once."""
    if level is None:
        level = Settings.from_env().log_level
    logger = logging.getLogger("todo_client")
    logger.setLevel(level.strip().upper())

    formatter = logging.Formatter(LOG_FORMAT)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        handler.setFormatter(formatter)

    return logger
