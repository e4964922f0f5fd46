"""Logging configuration for the shell customizations.

The host process owns the root logger, so only the 'reflection' logger
gets a handler and a level.
"""

import logging
import os

LOG_LEVEL = os.environ.get("REFLECTION_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(name)-22s %(levelname)-5s %(message)s"

_package_logger = logging.getLogger("reflection")
if not _package_logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    _package_logger.addHandler(_handler)
_package_logger.setLevel(getattr(logging, LOG_LEVEL, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the 'reflection.' namespace.

    Level controlled by REFLECTION_LOG_LEVEL env var (default WARNING).
    """
    return logging.getLogger(f"reflection.{name}")
