"""Shared test fixtures."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from todo_bridge.bridge import TodoBridge

_SCRIPTED_WORKER = """\
import json
import sys
import time

with open({argv_log!r}, "a", encoding="utf-8") as log:
    log.write(json.dumps(sys.argv[1:]) + "\\n")
time.sleep({sleep_seconds!r})
sys.stdout.write({stdout!r})
sys.stderr.write({stderr!r})
sys.exit({exit_code!r})
"""


class ScriptedWorker:
    """Fake worker that prints canned output and records its arguments."""

    def __init__(self, script_path: Path, argv_log: Path) -> None:
        self.script_path = script_path
        self.argv_log = argv_log

    def bridge(self, *, timeout_seconds: float | None = None) -> TodoBridge:
        return TodoBridge(
            sys.executable,
            base_args=[str(self.script_path)],
            timeout_seconds=timeout_seconds,
        )

    def calls(self) -> list[list[str]]:
        if not self.argv_log.exists():
            return []
        return [json.loads(line) for line in self.argv_log.read_text("utf-8").splitlines()]


@pytest.fixture()
def scripted_worker(tmp_path: Path) -> Callable[..., ScriptedWorker]:
    """Factory writing a fake worker script with the given behavior."""

    def _make(
        *,
        stdout: str = "",
        stderr: str = "",
        exit_code: int = 0,
        sleep_seconds: float = 0,
    ) -> ScriptedWorker:
        script_path = tmp_path / "fake_worker.py"
        argv_log = tmp_path / "fake_worker_argv.jsonl"
        script_path.write_text(
            _SCRIPTED_WORKER.format(
                argv_log=str(argv_log),
                sleep_seconds=sleep_seconds,
                stdout=stdout,
                stderr=stderr,
                exit_code=exit_code,
            ),
            "utf-8",
        )
        return ScriptedWorker(script_path, argv_log)

    return _make


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture()
def reference_bridge(store_path: Path) -> TodoBridge:
    """Bridge wired to the bundled reference worker with an isolated store."""

    return TodoBridge(
        sys.executable,
        base_args=["-m", "todo_bridge.worker", "--store", str(store_path)],
    )


@pytest.fixture()
def reference_worker_command(store_path: Path) -> str:
    return f'"{sys.executable}" -m todo_bridge.worker --store "{store_path}"'
