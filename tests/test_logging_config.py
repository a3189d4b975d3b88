"""Package logger configuration."""

import dataclasses
import logging

from event_rsvp_api.app.core.config import Settings
from event_rsvp_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging


def test_module_loggers_write_to_log_file(tmp_path) -> None:
    """Records from package modules reach the file, tagged with the project name."""
    log_file = tmp_path / "service.log"
    settings = Settings(project_name="RSVP Staging", log_level="debug", log_file=str(log_file))

    logger = setup_logging(settings)
    logging.getLogger("event_rsvp_api.app.services.event_service").debug("event e1 updated")

    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG
    line = log_file.read_text(encoding="utf-8").strip()
    assert "[DEBUG] RSVP Staging event_rsvp_api.app.services.event_service: event e1 updated" in line


def test_reconfiguring_replaces_handlers(tmp_path) -> None:
    settings = Settings(log_level="WARNING", log_file=str(tmp_path / "first.log"))
    setup_logging(settings)

    logger = setup_logging(dataclasses.replace(settings, log_file=None, log_level="bogus"))

    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0], logging.FileHandler)
    assert logger.level == logging.INFO
