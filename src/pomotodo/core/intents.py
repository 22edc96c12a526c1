"""Intent values - named requests from a presentation layer.

Intents are what scripted runs (``pomotodo replay``) are made of. Names are
accepted in snake_case, kebab-case or camelCase (``add_task``, ``add-task``,
``addTask``).
"""

from __future__ import annotations

import re
from typing import Any, Literal, get_args

from pydantic import BaseModel, Field, ValidationError, model_validator

from pomotodo.models.task import TaskListState

IntentName = Literal[
    "start",
    "pause",
    "reset",
    "tick",
    "add_task",
    "toggle_task",
    "delete_task",
    "begin_edit",
    "change_edit_text",
    "commit_edit",
    "cancel_edit",
]

INTENT_NAMES: tuple[str, ...] = get_args(IntentName)

_NEEDS_TEXT = {"add_task", "change_edit_text"}
_NEEDS_ID = {"toggle_task", "delete_task", "begin_edit"}

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")
_POSITION_RE = re.compile(r"^#(\d+)$")


class IntentError(ValueError):
    """A scripted intent could not be understood."""


class Intent(BaseModel):
    """One request to mutate application state."""

    name: IntentName
    id: str | None = None
    text: str | None = None
    times: int = Field(default=1, ge=1, description="Repeat count, mostly for tick")

    @model_validator(mode="after")
    def _check_params(self) -> Intent:
        if self.name in _NEEDS_TEXT and self.text is None:
            raise ValueError(f"intent '{self.name}' requires 'text'")
        if self.name in _NEEDS_ID and self.id is None:
            raise ValueError(f"intent '{self.name}' requires 'id'")
        return self


def normalize_name(raw: str) -> str:
    """Map ``addTask`` / ``add-task`` / ``add_task`` to ``add_task``."""
    return _CAMEL_RE.sub("_", raw.strip()).replace("-", "_").lower()


def parse_intent(raw: Any) -> Intent:
    """Build an Intent from a script entry.

    An entry is either a bare name (``"start"``) or a mapping with a ``name``
    key and optional ``id``, ``text`` and ``times``.

    Raises:
        IntentError: If the entry is malformed
    """
    if isinstance(raw, str):
        data: dict[str, Any] = {"name": raw}
    elif isinstance(raw, dict):
        data = dict(raw)
    else:
        raise IntentError(f"Unsupported intent entry: {raw!r}")

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise IntentError(f"Intent entry has no name: {raw!r}")
    data["name"] = normalize_name(name)
    if data["name"] not in INTENT_NAMES:
        raise IntentError(
            f"Unknown intent '{name}'. Expected one of: {', '.join(INTENT_NAMES)}"
        )
    if data.get("id") is not None:
        data["id"] = str(data["id"])

    try:
        return Intent(**data)
    except ValidationError as e:
        details = "; ".join(err["msg"] for err in e.errors())
        raise IntentError(f"Invalid intent {raw!r}: {details}") from e


def parse_script(entries: Any) -> list[Intent]:
    """Parse a whole script (a list of entries)."""
    if not isinstance(entries, list):
        raise IntentError("An intent script must be a list of entries")
    return [parse_intent(entry) for entry in entries]


def resolve_task_ref(tasks: TaskListState, ref: str | None) -> str | None:
    """Turn a 1-based position reference like ``#2`` into that task's id.

    Anything else, including positions past the end, is returned unchanged
    so that the engine treats it as an unknown id.
    """
    if ref is None:
        return None
    match = _POSITION_RE.match(ref)
    if not match:
        return ref
    index = int(match.group(1)) - 1
    if 0 <= index < len(tasks.items):
        return tasks.items[index].id
    return ref
