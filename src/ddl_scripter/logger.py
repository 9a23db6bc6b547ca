import logging
import sys

from ddl_scripter.config import LOG_LEVEL


def setup_logger(name: str) -> logging.Logger:
    """
    Returns the named logger with a single stdout handler.

    Args:
        name: logger name

    Returns:
        the configured logger
    """
    logger = logging.getLogger(name)

    # configured already
    if logger.handlers:
        return logger

    logger.setLevel(LOG_LEVEL)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(LOG_LEVEL)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger
