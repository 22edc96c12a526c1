"""Configuration management commands."""

from typing import Optional

import typer

from pomotodo.services.config_service import (
    ConfigKeyError,
    get_config_service,
    parse_value,
)
from pomotodo.ui.console import get_console
from pomotodo.ui.formatters import format_output, format_success
from pomotodo.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Show and change pomotodo settings")
console = get_console()


@app.command("view")
@command_wrapper
def view_config(
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
) -> None:
    """Show every setting."""
    config = get_config_service().config
    format_output(config.model_dump(mode="json"), output or config.output.format)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., ui.theme)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except ConfigKeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., ui.theme)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        stored = get_config_service().set(key, parse_value(value))
    except ConfigKeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    except ValueError as e:
        raise AppError(str(e), ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{stored}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        target = f"'{key}'" if key else "all configuration"
        if not typer.confirm(f"Reset {target} to defaults?"):
            console.print("[yellow]Cancelled.[/yellow]")
            return

    try:
        get_config_service().reset(key)
    except ConfigKeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    format_success(f"Reset {key or 'configuration'} to defaults")
