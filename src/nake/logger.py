"""
Logging helpers for nake

All modules obtain their logger through get_logger(__name__) so that every
record lands under the ``nake`` hierarchy and can be tuned with a single
NAKE_LOG_LEVEL setting.
"""

import logging

ROOT_LOGGER_NAME = "nake"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    """
    Attach a stream handler to the ``nake`` logger.

    Args:
        level: Level name; falls back to the active NakeConfig log level
    """
    global _configured
    from nake.core.config import get_config

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level_name = (level or get_config().log_level).upper()
    root.setLevel(level_name)
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``nake`` hierarchy."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
