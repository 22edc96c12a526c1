"""Command 'ui' of pomotodo - launch the Textual timer and task list."""

import typer

from pomotodo.core.controller import RootController
from pomotodo.services.config_service import get_config_service
from pomotodo.ui.app import PomodoroApp

from .decorators import command_wrapper

app = typer.Typer()


@app.command()
@command_wrapper
def ui(
    theme: str | None = typer.Option(
        None, "--theme", help="dark or light (defaults to ui.theme)"
    ),
) -> None:
    """Open the Pomodoro timer with its task list."""
    theme_name = theme or get_config_service().config.ui.theme
    PomodoroApp(RootController(), theme_name=theme_name).run()
