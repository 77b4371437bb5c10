"""Controllers for todo CLI commands."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Sequence
from dataclasses import dataclass

from todo_bridge.bridge import BridgeResult, Task, TodoBridge
from todo_bridge.config import Settings


@dataclass(slots=True)
class TodoListCommand:
    """CLI input for task listing."""

    worker_command: str | None = None
    timeout_seconds: float | None = None


@dataclass(slots=True)
class TodoAddCommand:
    """CLI input for task creation."""

    title: str
    worker_command: str | None = None
    timeout_seconds: float | None = None


@dataclass(slots=True)
class TodoMutateCommand:
    """CLI input for complete/remove operations."""

    task_id: int
    worker_command: str | None = None
    timeout_seconds: float | None = None


@dataclass(slots=True)
class TodoCommandResult:
    """Lines to print and whether the command succeeded."""

    success: bool
    lines: list[str]


@dataclass(slots=True)
class TaskSummary:
    """Counters shown under the task list."""

    total: int
    active: int
    completed: int

    @classmethod
    def from_tasks(cls, tasks: Sequence[Task]) -> TaskSummary:
        completed = sum(1 for task in tasks if task.completed)
        return cls(total=len(tasks), active=len(tasks) - completed, completed=completed)


class TodoCliController:
    """Run bridge operations and render their results as text lines."""

    def list_tasks(self, command: TodoListCommand) -> TodoCommandResult:
        bridge = _bridge(command.worker_command, command.timeout_seconds)
        return _render_snapshot(asyncio.run(bridge.list_tasks()))

    def add_task(self, command: TodoAddCommand) -> TodoCommandResult:
        bridge = _bridge(command.worker_command, command.timeout_seconds)
        return asyncio.run(_mutate_then_list(bridge, bridge.add_task(command.title)))

    def complete_task(self, command: TodoMutateCommand) -> TodoCommandResult:
        bridge = _bridge(command.worker_command, command.timeout_seconds)
        return asyncio.run(_mutate_then_list(bridge, bridge.complete_task(command.task_id)))

    def remove_task(self, command: TodoMutateCommand) -> TodoCommandResult:
        bridge = _bridge(command.worker_command, command.timeout_seconds)
        return asyncio.run(_mutate_then_list(bridge, bridge.remove_task(command.task_id)))


def render_task_lines(tasks: Sequence[Task]) -> list[str]:
    """Render a task snapshot followed by its summary line."""

    lines = [f"[{'x' if task.completed else ' '}] {task.id} {task.title}" for task in tasks]
    if not lines:
        lines.append("No tasks.")
    summary = TaskSummary.from_tasks(tasks)
    lines.append(
        f"Total: {summary.total}  Active: {summary.active}  Completed: {summary.completed}",
    )
    return lines


async def _mutate_then_list(
    bridge: TodoBridge,
    mutation: Awaitable[BridgeResult],
) -> TodoCommandResult:
    result = await mutation
    if not result.ok:
        return TodoCommandResult(success=False, lines=[result.error or "unknown error"])
    return _render_snapshot(await bridge.list_tasks())


def _render_snapshot(result: BridgeResult) -> TodoCommandResult:
    if not result.ok:
        return TodoCommandResult(success=False, lines=[result.error or "unknown error"])
    return TodoCommandResult(success=True, lines=render_task_lines(result.tasks or ()))


def _bridge(worker_command: str | None, timeout_seconds: float | None) -> TodoBridge:
    settings = Settings.from_env(worker_command=worker_command, timeout_seconds=timeout_seconds)
    return TodoBridge.from_settings(settings)
