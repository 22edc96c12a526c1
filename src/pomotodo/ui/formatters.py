"""Output formatters for headless commands."""

import json
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table

from pomotodo.models.clock import ClockState
from pomotodo.models.state import AppState

from .console import get_console

console = get_console()


def format_clock(clock: ClockState) -> str:
    """Render remaining time as zero-padded ``MM:SS``."""
    return f"{clock.minutes:02d}:{clock.seconds:02d}"


def snapshot_to_dict(state: AppState) -> dict[str, Any]:
    """Flatten a snapshot into plain data for json/yaml output."""
    data = state.model_dump(mode="json")
    data["clock"]["display"] = format_clock(state.clock)
    for key in ("add_error", "edit_error"):
        error = getattr(state.tasks, key)
        data["tasks"][key] = error.message if error else None
    return data


def format_output(data: Any, output_format: str = "table") -> None:
    """Print plain data as json, yaml or a rich key/value listing."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, sort_keys=False))
    elif isinstance(data, dict):
        format_settings(data)
    else:
        console.print(data)


def format_snapshot(state: AppState, output_format: str = "table") -> None:
    """Display a full application snapshot."""
    if output_format in ("json", "yaml"):
        format_output(snapshot_to_dict(state), output_format)
        return

    clock = state.clock
    color = "green" if clock.phase == "break" else "cyan"
    status = "running" if clock.running else "paused"
    console.print(f"[bold {color}]{clock.title}[/bold {color}]")
    console.print(f"[bold]{format_clock(clock)}[/bold]  [dim]({status})[/dim]")
    console.print()
    format_task_table(state)


def format_task_table(state: AppState) -> None:
    """Format the task list as a table, marking the task being renamed."""
    tasks = state.tasks
    if not tasks.items:
        console.print("[yellow]No tasks[/yellow]")
    else:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Done", justify="center")
        table.add_column("Task")
        table.add_column("ID", style="dim")

        for position, task in enumerate(tasks.items, start=1):
            text = escape(task.text)
            if tasks.edit is not None and task.id == tasks.edit.target_task_id:
                draft = escape(repr(tasks.edit.draft_text))
                text = f"{text} [yellow](editing: {draft})[/yellow]"
            elif task.done:
                text = f"[strike dim]{text}[/strike dim]"
            table.add_row(str(position), "✓" if task.done else "✗", text, task.id[:8])

        console.print(table)

    if tasks.add_error:
        format_error(tasks.add_error.message)
    if tasks.edit_error:
        format_error(tasks.edit_error.message)


def _flatten(data: dict, prefix: str = "") -> list[tuple[str, Any]]:
    rows = []
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            rows.extend(_flatten(value, f"{name}."))
        else:
            rows.append((name, value))
    return rows


def format_settings(data: dict) -> None:
    """List nested settings one dotted key per line (``ui.theme  dark``)."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in _flatten(data):
        if isinstance(value, bool):
            shown = "on" if value else "off"
        elif value is None:
            shown = "[dim]unset[/dim]"
        else:
            shown = escape(str(value))
        table.add_row(key, shown)
    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")
