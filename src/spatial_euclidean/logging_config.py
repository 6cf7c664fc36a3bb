"""
Logging Configuration
Wires the package logger to the console for the CLI.
"""
import logging
import sys

PACKAGE_LOGGER = "spatial_euclidean"

# same prefixes as the CLI prints
LEVEL_PREFIXES = {
    logging.DEBUG: '[DEBUG]',
    logging.INFO: '[INFO ]',
    logging.WARNING: '[WARN ]',
    logging.ERROR: '[ERROR]',
    logging.CRITICAL: '[ERROR]',
}


class PrefixFormatter(logging.Formatter):
    """Render records like '[WARN ] spatial_euclidean.module: message'"""

    def format(self, record: logging.LogRecord) -> str:
        record.prefix = LEVEL_PREFIXES.get(record.levelno, f'[{record.levelname}]')
        return super().format(record)


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configures the logger for the 'spatial_euclidean' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # avoid duplicate output on repeated calls
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(PrefixFormatter('%(prefix)s %(name)s: %(message)s'))
    logger.addHandler(console_handler)
    return logger
