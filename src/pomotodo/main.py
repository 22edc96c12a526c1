"""Main entry point for pomotodo."""

from typing import Optional

import typer

from pomotodo.commands import (
    config_command,
    replay_command,
    ui_command,
    version_command,
)
from pomotodo.services.config_service import get_config_service
from pomotodo.ui.console import get_console
from pomotodo.ui.formatters import format_error
from pomotodo.utils.exit_codes import ERROR_GENERAL
from pomotodo.utils.logger import set_log_level
from pomotodo.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="pomotodo",
    cls=SuggestingGroup,
    help="A Pomodoro focus/break timer with a small task list",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override logging.level for this run"
    ),
) -> None:
    """Load configuration and set up logging before any command runs."""
    try:
        config = get_config_service().config
        set_log_level(log_level or config.logging.level)
    except (RuntimeError, ValueError) as e:
        format_error(str(e))
        raise typer.Exit(ERROR_GENERAL) from e
    get_console().no_color = not config.output.color


app.add_typer(config_command.app, name="config", help="Show and change settings")
app.command("ui")(ui_command.ui)
app.command("replay")(replay_command.replay)
app.command("version")(version_command.version)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
