"""CLI entrypoint for todo-bridge."""

from __future__ import annotations

from dataclasses import dataclass

import rich_click as click

from todo_bridge import __version__
from todo_bridge.config import ConfigError, Settings
from todo_bridge.controllers import (
    TodoAddCommand,
    TodoCliController,
    TodoCommandResult,
    TodoListCommand,
    TodoMutateCommand,
)
from todo_bridge.logging_setup import setup_logging

click.rich_click.USE_MARKDOWN = True
TODO_CONTROLLER = TodoCliController()


@dataclass(slots=True)
class WorkerOptions:
    """Group-level options shared by every subcommand."""

    worker_command: str | None
    timeout_seconds: float | None


@click.group()
@click.version_option(version=__version__, prog_name="todo-bridge")
@click.option(
    "--worker",
    "worker_command",
    default=None,
    help="Worker command line. If omitted, TODO_BRIDGE_WORKER_COMMAND is used.",
)
@click.option(
    "--timeout-seconds",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Kill the worker after this many seconds. Waits forever by default.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log worker invocations.")
@click.pass_context
def todo_bridge(
    ctx: click.Context,
    worker_command: str | None,
    timeout_seconds: float | None,
    verbose: bool,
) -> None:
    """Manage tasks through the external todo worker."""

    try:
        settings = Settings.from_env(
            worker_command=worker_command,
            timeout_seconds=timeout_seconds,
        )
    except ConfigError as error:
        raise click.ClickException(str(error)) from error
    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = WorkerOptions(worker_command=worker_command, timeout_seconds=timeout_seconds)


@todo_bridge.command("list")
@click.pass_obj
def list_tasks(options: WorkerOptions) -> None:
    """Show all tasks."""

    _finish(
        TODO_CONTROLLER.list_tasks(
            TodoListCommand(
                worker_command=options.worker_command,
                timeout_seconds=options.timeout_seconds,
            ),
        ),
    )


@todo_bridge.command("add")
@click.argument("title")
@click.pass_obj
def add_task(options: WorkerOptions, title: str) -> None:
    """Add a task with TITLE."""

    _finish(
        TODO_CONTROLLER.add_task(
            TodoAddCommand(
                title=title,
                worker_command=options.worker_command,
                timeout_seconds=options.timeout_seconds,
            ),
        ),
    )


@todo_bridge.command("complete")
@click.argument("task_id", type=click.IntRange(min=0))
@click.pass_obj
def complete_task(options: WorkerOptions, task_id: int) -> None:
    """Mark task TASK_ID as completed."""

    _finish(
        TODO_CONTROLLER.complete_task(
            TodoMutateCommand(
                task_id=task_id,
                worker_command=options.worker_command,
                timeout_seconds=options.timeout_seconds,
            ),
        ),
    )


@todo_bridge.command("remove")
@click.argument("task_id", type=click.IntRange(min=0))
@click.pass_obj
def remove_task(options: WorkerOptions, task_id: int) -> None:
    """Delete task TASK_ID."""

    _finish(
        TODO_CONTROLLER.remove_task(
            TodoMutateCommand(
                task_id=task_id,
                worker_command=options.worker_command,
                timeout_seconds=options.timeout_seconds,
            ),
        ),
    )


def _finish(result: TodoCommandResult) -> None:
    if not result.success:
        raise click.ClickException("\n".join(result.lines))
    _emit_lines(result.lines)


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    todo_bridge()
