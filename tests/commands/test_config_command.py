"""Unit tests for config management commands (view, get, set, reset)."""

import json

from typer.testing import CliRunner

from pomotodo.commands.config_command import app

runner = CliRunner()


# ---------------------------------------------------------------------------
# Help flags
# ---------------------------------------------------------------------------


class TestHelpFlags:
    def test_app_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0

    def test_subcommand_help(self):
        for name in ("view", "get", "set", "reset"):
            result = runner.invoke(app, [name, "--help"])
            assert result.exit_code == 0, name


# ---------------------------------------------------------------------------
# view / get
# ---------------------------------------------------------------------------


class TestView:
    def test_view_json(self, tmp_config):
        result = runner.invoke(app, ["view", "-o", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ui"]["theme"] == "dark"
        assert data["output"]["format"] == "table"

    def test_view_table(self, tmp_config):
        result = runner.invoke(app, ["view"])

        assert result.exit_code == 0
        assert "ui.theme" in result.output
        assert "logging.level" in result.output


    def test_view_uses_configured_format(self, tmp_config):
        tmp_config.set("output.format", "json")

        result = runner.invoke(app, ["view"])

        assert json.loads(result.output)["output"]["format"] == "json"


class TestGet:
    def test_get_known_key(self, tmp_config):
        result = runner.invoke(app, ["get", "logging.level"])

        assert result.exit_code == 0
        assert "INFO" in result.output

    def test_get_unknown_key(self, tmp_config):
        result = runner.invoke(app, ["get", "ui.font"])

        assert result.exit_code == 5
        assert "not found" in result.output


# ---------------------------------------------------------------------------
# set / reset
# ---------------------------------------------------------------------------


class TestSet:
    def test_set_persists(self, tmp_config):
        result = runner.invoke(app, ["set", "ui.theme", "light"])

        assert result.exit_code == 0
        assert "Success" in result.output
        stored = json.loads(tmp_config.config_path.read_text())
        assert stored["ui"]["theme"] == "light"

    def test_set_bool_is_coerced(self, tmp_config):
        result = runner.invoke(app, ["set", "output.color", "false"])

        assert result.exit_code == 0
        assert tmp_config.config.output.color is False

    def test_set_lowercase_level(self, tmp_config):
        result = runner.invoke(app, ["set", "logging.level", "debug"])

        assert result.exit_code == 0
        assert tmp_config.config.logging.level == "DEBUG"

    def test_set_invalid_value(self, tmp_config):
        result = runner.invoke(app, ["set", "ui.theme", "purple"])

        assert result.exit_code == 2
        assert tmp_config.config.ui.theme == "dark"

    def test_set_unknown_key(self, tmp_config):
        result = runner.invoke(app, ["set", "clock.focus", "60"])

        assert result.exit_code == 5


class TestReset:
    def test_reset_all_with_yes(self, tmp_config):
        tmp_config.set("ui.theme", "light")

        result = runner.invoke(app, ["reset", "--yes"])

        assert result.exit_code == 0
        assert tmp_config.config.ui.theme == "dark"

    def test_reset_single_key(self, tmp_config):
        tmp_config.set("ui.theme", "light")
        tmp_config.set("output.format", "json")

        result = runner.invoke(app, ["reset", "ui.theme", "-y"])

        assert result.exit_code == 0
        assert tmp_config.config.ui.theme == "dark"
        assert tmp_config.config.output.format == "json"

    def test_reset_declined(self, tmp_config):
        tmp_config.set("ui.theme", "light")

        result = runner.invoke(app, ["reset"], input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert tmp_config.config.ui.theme == "light"

    def test_reset_unknown_key(self, tmp_config):
        result = runner.invoke(app, ["reset", "ui.font", "--yes"])

        assert result.exit_code == 5
