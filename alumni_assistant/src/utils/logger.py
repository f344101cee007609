"""
Alumni Assistant - Logging
===========================
One stdout handler on the package logger (``alumni_assistant``); every
module logger is a child of it, so a single ``configure_logging`` call
sets verbosity for the whole service.

Level resolution (``resolve_level``):
  • ``LOG_LEVEL`` when set
  • otherwise ``ENV``: ``"dev"`` → DEBUG, ``"prod"`` → WARNING

The module-level ``settings`` only provide the level used before any
``configure_logging`` call.  ``create_app`` and ``setup_db.main`` call it
with the settings they were given.

Usage:
    from alumni_assistant.src.utils.logger import get_logger
    logger = get_logger(__name__)
    logger.info("Something happened")
"""

from __future__ import annotations

import logging
import sys

from alumni_assistant.config.settings import Settings, settings as default_settings

PACKAGE_LOGGER = "alumni_assistant"

_ENV_LEVEL_MAP = {
    "dev": logging.DEBUG,
    "prod": logging.WARNING,
}

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(settings: Settings) -> int:
    """Logging level for *settings*: ``LOG_LEVEL`` if set, else by ``ENV``."""
    if settings.LOG_LEVEL:
        return logging.getLevelName(settings.LOG_LEVEL)
    return _ENV_LEVEL_MAP.get(settings.ENV, logging.INFO)


def _package_logger() -> logging.Logger:
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
        root.addHandler(handler)
        root.setLevel(resolve_level(default_settings))
        # uvicorn installs its own handlers on the root logger.
        root.propagate = False
    return root


def configure_logging(settings: Settings) -> int:
    """Apply the level resolved from *settings* to every service logger."""
    level = resolve_level(settings)
    _package_logger().setLevel(level)
    return level


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Return a logger under the package logger.

    Args:
        name:  Typically ``__name__``.  Names outside the package (e.g.
               ``"__main__"`` when a script runs with ``-m``) are nested
               under it so they share its handler and level.
        level: Pin this one logger to an explicit level.  If *None*, it
               follows the package logger.
    """
    _package_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
