"""Logging utilities for wetransferpy modules."""

import logging


ROOT_LOGGER_NAME = 'wetransferpy'


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    This ensures that loggers work with basicConfig() without needing
    explicit setup_logging() calls. The logger will:
    - Propagate to root logger (default behavior)
    - Only set a default level if root logger has no handlers

    Args:
        name: Logger name, either dotted under 'wetransferpy' or a suffix

    Returns:
        Configured logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f'{ROOT_LOGGER_NAME}.'):
        name = f'{ROOT_LOGGER_NAME}.{name}'

    logger = logging.getLogger(name)
    logger.propagate = True

    # basicConfig hasn't been called yet
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)

    return logger
