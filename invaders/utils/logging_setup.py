"""
Logging setup driven by LoggingConfig.
"""

import logging
from pathlib import Path
from typing import Optional

from .config_loader import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        config: Level and optional log file (defaults to INFO on stderr)

    Returns:
        The configured "invaders" logger
    """
    config = config or LoggingConfig()
    logger = logging.getLogger("invaders")
    logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
