"""
Logging Setup

Installs handlers on the ``mvccore`` logger from a ``LoggingConfig``. Library
modules only ever call ``logging.getLogger(__name__)``; applications decide
whether and where the output goes by calling ``configure_logging``.
"""

import logging
import logging.handlers
from typing import Optional

from .configuration import LoggingConfig

LIBRARY_LOGGER = "mvccore"


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the library logger.

    Args:
        config: Logging settings; defaults to ``LoggingConfig()``

    Returns:
        The configured ``mvccore`` logger
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(LIBRARY_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if config.file_path:
        file_handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(config.level)
    logger.debug(f"Logging configured at level {config.level}")
    return logger


__all__ = ["configure_logging", "LIBRARY_LOGGER"]
