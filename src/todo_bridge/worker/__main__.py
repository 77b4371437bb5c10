"""Command-line entrypoint for the reference todo worker.

Protocol: ``todo-worker [--store PATH] <subcommand> [args...]`` with
subcommands ``add <title...>``, ``list [--json]``, ``complete <id>`` and
``remove <id>``. Exit code 0 means the command was applied; anything else
is a rejection explained on stderr.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from todo_bridge.bridge.contracts import TaskPayloadError, encode_task_list
from todo_bridge.config import store_path_from_env
from todo_bridge.worker.store import TaskNotFoundError, TaskStore

SUBCOMMANDS = ("add", "list", "complete", "remove")


def main(argv: list[str] | None = None) -> int:
    """Run one worker subcommand against the JSON store."""

    parser = argparse.ArgumentParser(prog="todo-worker")
    parser.add_argument("--store", type=Path, default=None, help="Path to the JSON task store.")
    parser.add_argument("command", nargs="?", help=f"One of: {', '.join(SUBCOMMANDS)}.")

    raw_args = sys.argv[1:] if argv is None else list(argv)
    split = _command_index(raw_args)
    # Only global options go through argparse; subcommand args are taken verbatim.
    parsed = parser.parse_args(raw_args[: split + 1])
    if parsed.command is None:
        parser.error("the following arguments are required: command")
    command_args = raw_args[split + 1 :]

    if parsed.command not in SUBCOMMANDS:
        print(f"error: unknown command: {parsed.command}", file=sys.stderr)
        print(f"available commands: {', '.join(SUBCOMMANDS)}", file=sys.stderr)
        return 1

    store_path = parsed.store or store_path_from_env()
    try:
        store = TaskStore.load(store_path)
    except (OSError, UnicodeDecodeError, TaskPayloadError) as error:
        print(f"error: cannot load task store {store_path}: {error}", file=sys.stderr)
        return 1

    if parsed.command == "list":
        if "--json" in command_args:
            print(encode_task_list(store.tasks))
        else:
            _print_listing(store)
        return 0

    if parsed.command == "add":
        title = " ".join(command_args)
        if not title:
            print("error: a task title is required", file=sys.stderr)
            return 1
        task = store.add(title)
        message = f"added task {task.id}"
    else:
        task_id = _parse_task_id(command_args)
        if task_id is None:
            return 1
        try:
            if parsed.command == "complete":
                store.complete(task_id)
                message = f"completed task {task_id}"
            else:
                store.remove(task_id)
                message = f"removed task {task_id}"
        except TaskNotFoundError as error:
            print(str(error), file=sys.stderr)
            return 1

    try:
        store.save(store_path)
    except OSError as error:
        print(f"error: cannot save task store {store_path}: {error}", file=sys.stderr)
        return 1
    print(message)
    return 0


def _command_index(args: list[str]) -> int:
    index = 0
    while index < len(args):
        token = args[index]
        if token == "--store":
            index += 2
            continue
        if token.startswith("--store=") or token in ("-h", "--help"):
            index += 1
            continue
        return index
    return len(args)


def _parse_task_id(args: list[str]) -> int | None:
    if not args:
        print("error: a task id is required", file=sys.stderr)
        return None
    raw = args[0]
    if not raw.isdigit():
        print(f"invalid task id: {raw}", file=sys.stderr)
        return None
    return int(raw)


def _print_listing(store: TaskStore) -> None:
    if not store.tasks:
        print("no tasks")
        return
    for task in store.tasks:
        status = "completed" if task.completed else "uncompleted"
        print(f"{status} [{task.id}] {task.title}")


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
