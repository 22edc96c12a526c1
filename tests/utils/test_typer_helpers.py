"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

from unittest.mock import patch

import click
import pytest
import typer

from pomotodo.utils.typer_helpers import SuggestingGroup


def _make_group(*names: str) -> SuggestingGroup:
    group = SuggestingGroup(name="pomotodo")
    for name in names:
        group.add_command(click.Command(name), name)
    return group


def _ctx(group):
    return click.Context(group, info_name="pomotodo")


class TestSuggestingGroup:
    def test_valid_command_passes_through(self):
        group = _make_group("replay", "version")

        name, cmd, _ = group.resolve_command(_ctx(group), ["replay"])

        assert name == "replay"
        assert cmd is group.commands["replay"]

    def test_close_typo_suggests_and_exits(self, capsys):
        group = _make_group("replay", "version")

        with pytest.raises(typer.Exit) as exc_info:
            group.resolve_command(_ctx(group), ["replya"])

        assert exc_info.value.exit_code == 1
        out = capsys.readouterr().out
        assert "Did you mean this?" in out
        assert "replay" in out

    def test_several_suggestions(self, capsys):
        group = _make_group("config", "configure")

        with pytest.raises(typer.Exit):
            group.resolve_command(_ctx(group), ["confg"])

        assert "Did you mean one of these?" in capsys.readouterr().out

    def test_no_match_reraises(self):
        group = _make_group("replay")

        with pytest.raises(click.UsageError):
            group.resolve_command(_ctx(group), ["xyz"])

    def test_empty_args_reraises(self):
        group = _make_group("replay")

        with patch.object(
            SuggestingGroup.__bases__[0],
            "resolve_command",
            side_effect=click.UsageError("Missing command"),
        ):
            with pytest.raises(click.UsageError):
                group.resolve_command(_ctx(group), [])
