"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from pomotodo.models.config_models import AppConfig, LoggingConfig, OutputConfig


def test_defaults():
    config = AppConfig()

    assert config.output.format == "table"
    assert config.output.color is True
    assert config.ui.theme == "dark"
    assert config.logging.level == "INFO"


def test_level_is_uppercased():
    assert LoggingConfig(level=" debug ").level == "DEBUG"


def test_unknown_level_rejected():
    with pytest.raises(ValidationError):
        LoggingConfig(level="TRACE")


def test_assignment_is_validated():
    output = OutputConfig()

    with pytest.raises(ValidationError):
        output.format = "csv"


def test_partial_json_fills_defaults():
    config = AppConfig.model_validate_json('{"output": {"format": "json"}}')

    assert config.output.format == "json"
    assert config.ui.theme == "dark"


def test_no_duration_settings():
    assert "focus" not in AppConfig.model_fields
    assert set(AppConfig.model_fields) == {"output", "ui", "logging"}
