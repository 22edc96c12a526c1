"""Shared test fixtures and configuration.

Keeps tests away from the real platform config and log directories.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest

from pomotodo.core.controller import RootController
from pomotodo.models.state import AppState


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from pomotodo.services.config_service import get_config_service

    get_config_service.cache_clear()
    with patch(
        "pomotodo.services.config_service.user_config_dir", return_value=str(tmp_path)
    ):
        svc = get_config_service()
        yield svc
    get_config_service.cache_clear()


def _drop_file_handlers():
    logger = logging.getLogger("pomotodo")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path):
    """Send the application log file into tmp_path for every test."""
    import pomotodo.utils.logger as logger_mod

    original = logger_mod._logger
    logger_mod._logger = None
    _drop_file_handlers()

    with patch("pomotodo.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield

    _drop_file_handlers()
    logger_mod._logger = original


@pytest.fixture()
def controller() -> RootController:
    return RootController(AppState())


@pytest.fixture()
def loaded_controller(controller):
    """Controller holding three tasks: 'alpha', 'bravo', 'charlie'."""
    for text in ("alpha", "bravo", "charlie"):
        controller.add_task(text)
    return controller
