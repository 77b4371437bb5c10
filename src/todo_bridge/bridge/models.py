"""Value types shared by the invoker, interpreter and bridge client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TodoBridgeError(Exception):
    """Base class for todo-bridge errors."""


class CommandKind(str, Enum):
    """Whether a worker subcommand returns a payload on stdout."""

    DATA = "data"
    ACTION = "action"


class FailureKind(str, Enum):
    """Why a bridge operation failed."""

    LAUNCH = "launch"
    REJECTED = "rejected"
    PROTOCOL = "protocol"
    TIMEOUT = "timeout"


@dataclass(frozen=True, slots=True)
class Task:
    """One task as reported by the worker."""

    id: int
    title: str
    completed: bool


@dataclass(frozen=True, slots=True)
class InvocationOutcome:
    """Raw result of one worker process run."""

    exit_code: int
    stdout: str
    stderr: str
    timed_out: bool = False
    timeout_seconds: float | None = None


@dataclass(frozen=True, slots=True)
class BridgeResult:
    """Uniform success/failure value returned by every bridge operation."""

    ok: bool
    tasks: tuple[Task, ...] | None = None
    error: str | None = None
    failure_kind: FailureKind | None = None

    @classmethod
    def success(cls, tasks: tuple[Task, ...] | None = None) -> BridgeResult:
        return cls(ok=True, tasks=tasks)

    @classmethod
    def failure(cls, kind: FailureKind, error: str) -> BridgeResult:
        return cls(ok=False, error=error or f"{kind.value} failure", failure_kind=kind)
