"""Tests for ConfigService persistence and dot-key access."""

from __future__ import annotations

import json
import stat

import pytest

from pomotodo.models.config_models import AppConfig
from pomotodo.services.config_service import (
    ConfigKeyError,
    get_config_service,
    parse_value,
)


class TestParseValue:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("true", True),
            ("False", False),
            ("42", 42),
            ("-3", -3),
            ("light", "light"),
            ("-", "-"),
        ],
    )
    def test_coercion(self, raw, expected):
        assert parse_value(raw) == expected


class TestLoadSave:
    def test_first_load_writes_defaults(self, tmp_config):
        config = tmp_config.load_config()

        assert config == AppConfig()
        assert tmp_config.config_path.exists()

    def test_file_is_private(self, tmp_config):
        tmp_config.save_config()

        mode = stat.S_IMODE(tmp_config.config_path.stat().st_mode)
        assert mode == 0o600

    def test_reads_existing_file(self, tmp_config):
        tmp_config.config_path.write_text(json.dumps({"ui": {"theme": "light"}}))

        assert tmp_config.config.ui.theme == "light"
        assert tmp_config.config.output.format == "table"

    def test_corrupted_file_raises(self, tmp_config):
        tmp_config.config_path.write_text("{oops")

        with pytest.raises(RuntimeError, match="Failed to load config"):
            tmp_config.load_config()

    def test_service_is_cached(self, tmp_config):
        assert get_config_service() is tmp_config


class TestGetSet:
    def test_get_nested(self, tmp_config):
        assert tmp_config.get("output.format") == "table"

    def test_get_section(self, tmp_config):
        assert tmp_config.get("ui").theme == "dark"

    @pytest.mark.parametrize("key", ["ui.font", "clock", "ui.theme.color", ""])
    def test_get_unknown(self, tmp_config, key):
        with pytest.raises(ConfigKeyError):
            tmp_config.get(key)

    def test_set_persists(self, tmp_config):
        assert tmp_config.set("output.format", "yaml") == "yaml"

        saved = json.loads(tmp_config.config_path.read_text())
        assert saved["output"]["format"] == "yaml"

    def test_set_normalizes_level(self, tmp_config):
        assert tmp_config.set("logging.level", "warning") == "WARNING"

    def test_set_invalid_value(self, tmp_config):
        with pytest.raises(ValueError, match="output.format"):
            tmp_config.set("output.format", "xml")
        assert tmp_config.config.output.format == "table"

    @pytest.mark.parametrize("key", ["ui.font", "timer.focus", "nope"])
    def test_set_unknown_key(self, tmp_config, key):
        with pytest.raises(ConfigKeyError):
            tmp_config.set(key, "x")


class TestReset:
    def test_reset_all(self, tmp_config):
        tmp_config.set("ui.theme", "light")
        tmp_config.set("output.color", False)

        tmp_config.reset()

        assert tmp_config.config == AppConfig()
        saved = json.loads(tmp_config.config_path.read_text())
        assert saved["ui"]["theme"] == "dark"

    def test_reset_one_key(self, tmp_config):
        tmp_config.set("ui.theme", "light")
        tmp_config.set("output.color", False)

        tmp_config.reset("ui.theme")

        assert tmp_config.config.ui.theme == "dark"
        assert tmp_config.config.output.color is False

    def test_reset_unknown_key(self, tmp_config):
        with pytest.raises(ConfigKeyError):
            tmp_config.reset("ui.font")
