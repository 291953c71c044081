"""Logger setup for the absorb command.

Every module logs to ``logging.getLogger(__name__)``, so all records fall
under the ``porous_absorber`` logger. The device calculators
(``porous_absorber.devices.*``) log their intermediate impedances at
DEBUG level, one record per frequency, so ``--verbose`` is best combined
with a small ``--subdivisions`` value or a ``--log-file``.

Records go to stderr, never stdout, which keeps ``absorb ... --json``
output machine readable.
"""

import logging
import sys

LOGGER_NAME = "porous_absorber"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the package logger.

    Calling this again replaces the handlers from the previous call.

    Args:
        level: Threshold for the logger and its handlers
        log_file: Path of a log file, truncated on open

    Returns:
        The ``porous_absorber`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for old in list(logger.handlers):
        old.close()
        logger.removeHandler(old)

    logger.addHandler(_handler(logging.StreamHandler(sys.stderr), level))
    if log_file:
        logger.addHandler(
            _handler(logging.FileHandler(log_file, mode="w", encoding="utf-8"), level)
        )

    logger.info("Logging initialized.")
    return logger
