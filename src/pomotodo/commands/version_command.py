"""Command 'version' of pomotodo"""

import typer

from pomotodo import __version__
from pomotodo.ui.console import get_console

app = typer.Typer()
console = get_console()


@app.command()
def version() -> None:
    """Show version information"""
    console.print(__version__)
