"""JSON contract for the worker's ``list --json`` payload."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import asdict
from typing import Any

from todo_bridge.bridge.models import Task, TodoBridgeError


class TaskPayloadError(TodoBridgeError, ValueError):
    """Worker stdout could not be decoded into a task list."""


def decode_task_list(text: str) -> tuple[Task, ...]:
    """Parse and validate a ``{"todos": [...]}`` document."""

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as error:
        raise TaskPayloadError(f"malformed JSON: {error}") from error
    if not isinstance(raw, dict):
        raise TaskPayloadError("expected JSON object at top level")

    raw_todos = raw.get("todos")
    if not isinstance(raw_todos, list):
        raise TaskPayloadError("todos must be an array")

    return tuple(_decode_task(index, item) for index, item in enumerate(raw_todos))


def encode_task_list(tasks: Iterable[Task]) -> str:
    """Serialize tasks into the payload shape accepted by ``decode_task_list``."""

    return json.dumps({"todos": [asdict(task) for task in tasks]}, ensure_ascii=False, indent=2)


def _decode_task(index: int, item: Any) -> Task:
    if not isinstance(item, dict):
        raise TaskPayloadError(f"todos[{index}] must be an object")
    task_id = item.get("id")
    title = item.get("title")
    completed = item.get("completed")
    # bool is an int subclass; reject it explicitly.
    if isinstance(task_id, bool) or not isinstance(task_id, int):
        raise TaskPayloadError(f"todos[{index}].id must be an integer")
    if not isinstance(title, str):
        raise TaskPayloadError(f"todos[{index}].title must be a string")
    if not isinstance(completed, bool):
        raise TaskPayloadError(f"todos[{index}].completed must be a boolean")
    return Task(id=task_id, title=title, completed=completed)
