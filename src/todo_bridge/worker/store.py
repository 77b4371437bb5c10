"""JSON file store owned by the reference worker."""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from todo_bridge.bridge.contracts import decode_task_list, encode_task_list
from todo_bridge.bridge.models import Task


class TaskNotFoundError(LookupError):
    """No task with the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"task {task_id} not found")
        self.task_id = task_id


@dataclass(slots=True)
class TaskStore:
    """In-memory task list with file load/save."""

    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1

    @classmethod
    def load(cls, path: Path) -> TaskStore:
        """Read the store file; a missing file is an empty store."""

        if not path.exists():
            return cls()
        text = path.read_text("utf-8")
        tasks = list(decode_task_list(text))
        raw_next_id = json.loads(text).get("next_id")
        highest = max((task.id for task in tasks), default=0)
        if isinstance(raw_next_id, bool) or not isinstance(raw_next_id, int):
            raw_next_id = highest + 1
        return cls(tasks=tasks, next_id=max(raw_next_id, highest + 1))

    def save(self, path: Path) -> None:
        """Write the store atomically."""

        payload = json.loads(encode_task_list(self.tasks))
        payload["next_id"] = self.next_id
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def add(self, title: str) -> Task:
        task = Task(id=self.next_id, title=title, completed=False)
        self.tasks.append(task)
        self.next_id += 1
        return task

    def complete(self, task_id: int) -> Task:
        index = self._index_of(task_id)
        task = Task(id=task_id, title=self.tasks[index].title, completed=True)
        self.tasks[index] = task
        return task

    def remove(self, task_id: int) -> Task:
        return self.tasks.pop(self._index_of(task_id))

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError(task_id)
