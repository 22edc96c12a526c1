"""Command 'replay' of pomotodo - run a scripted list of intents headlessly.

A script is a YAML or JSON list. Each entry is an intent name or a mapping::

    - {name: add_task, text: "Write report"}
    - start
    - {name: tick, times: 1500}
    - {name: begin_edit, id: "#1"}
    - {name: change_edit_text, text: "Write the report"}
    - commit_edit

Task ids are generated at run time, so scripts refer to tasks by 1-based
position: ``"#1"`` is the first task in the list at the moment the intent
runs.
"""

import json
from pathlib import Path

import typer
import yaml

from pomotodo.core.controller import RootController
from pomotodo.core.intents import Intent, parse_script, resolve_task_ref
from pomotodo.models.state import AppState
from pomotodo.services.config_service import get_config_service
from pomotodo.ui.console import get_console
from pomotodo.ui.formatters import format_clock, format_snapshot
from pomotodo.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND

from .decorators import AppError, command_wrapper

app = typer.Typer()
console = get_console()


def load_script(path: Path) -> list[Intent]:
    """Read and parse an intent script from a .json, .yaml or .yml file."""
    if not path.exists():
        raise AppError(f"Script not found: {path}", ERROR_NOT_FOUND)

    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            entries = json.loads(text)
        else:
            entries = yaml.safe_load(text)
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise AppError(f"Cannot parse {path.name}: {e}", ERROR_INVALID_ARGS) from e

    return parse_script(entries or [])


def run_script(
    controller: RootController, intents: list[Intent], trace: bool = False
) -> AppState:
    """Dispatch *intents* in order and return the final snapshot."""
    snap = controller.snapshot()
    for step, intent in enumerate(intents, start=1):
        # a "#n" ref may point at a different task after each repetition
        for _ in range(intent.times):
            task_id = resolve_task_ref(controller.state.tasks, intent.id)
            snap = controller.dispatch(
                intent.model_copy(update={"id": task_id, "times": 1})
            )
        if trace:
            clock = snap.clock
            console.print(
                f"[dim]{step:>3}[/dim] {intent.name:<16} "
                f"{clock.phase:<5} {format_clock(clock)} "
                f"{'running' if clock.running else 'paused'}  "
                f"tasks={len(snap.tasks.items)}"
            )
    return snap


@app.command()
@command_wrapper
def replay(
    script: Path = typer.Argument(..., help="YAML or JSON list of intents"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format: table, json or yaml"
    ),
    trace: bool = typer.Option(False, "--trace", help="Print state after each intent"),
) -> None:
    """Replay a scripted list of intents and print the resulting state."""
    intents = load_script(script)
    output_format = output or get_config_service().config.output.format
    if output_format not in ("table", "json", "yaml"):
        raise AppError(f"Unknown output format: {output_format}", ERROR_INVALID_ARGS)

    snap = run_script(RootController(), intents, trace=trace)
    format_snapshot(snap, output_format)
