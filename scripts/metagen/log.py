"""
Logging setup

Diagnostics go to stderr through the 'metagen' logger so that stdout only
ever carries generated source.
"""

import logging
from typing import Optional

LOGGER_NAME = 'metagen'

# Short tags used in diagnostics
LEVEL_TAGS = {
    logging.DEBUG: 'DEBUG',
    logging.INFO: 'INFO',
    logging.WARNING: 'WARN',
    logging.ERROR: 'FATAL',
    logging.CRITICAL: 'FATAL',
}

_handler: Optional[logging.Handler] = None


class DiagnosticFormatter(logging.Formatter):
    """Formatter that tags records as [WARN], [FATAL], ..."""

    def format(self, record: logging.LogRecord) -> str:
        record.tag = LEVEL_TAGS.get(record.levelno, record.levelname)
        return super().format(record)


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the package logger"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Replace the handler from a previous call
    global _handler
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setLevel(level)
    _handler.setFormatter(DiagnosticFormatter('[%(tag)s] %(message)s'))
    logger.addHandler(_handler)
    return logger
