"""
Logging configuration for the service.

``setup_logging`` attaches handlers to the ``event_rsvp_api`` package
logger, so every module logger created with ``logging.getLogger(__name__)``
inside the package inherits them.  Records are tagged with the
project name from ``Settings`` to tell several deployments apart in a
shared log.  Calling it again (each ``create_app`` does) replaces the
previous handlers instead of stacking new ones.
"""

import logging
from pathlib import Path

from .config import Settings

PACKAGE_LOGGER = "event_rsvp_api"


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the package logger from ``settings`` and return it.

    ``settings.log_level`` is a level name (case insensitive; unknown
    names fall back to ``INFO``).  When ``settings.log_file`` is set,
    records are also appended to that file.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    # Records stop here; uvicorn keeps its own root configuration.
    logger.propagate = False

    project = settings.project_name.replace("%", "%%")
    formatter = logging.Formatter(
        fmt=f"%(asctime)s [%(levelname)s] {project} %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
