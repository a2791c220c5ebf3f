import logging
import os
import sys
from typing import Optional

LOGGER_NAME = 'qr_transfer'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger for command line use.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR. Defaults to the
            QR_TRANSFER_LOG_LEVEL env var, then INFO.

    Returns:
        The configured package logger
    """
    if log_level is None:
        log_level = os.getenv('QR_TRANSFER_LOG_LEVEL', 'INFO')

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    logger.addHandler(handler)
    logger.propagate = False

    return logger
