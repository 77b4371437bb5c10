"""Command bridge between the front end and the external todo worker.

The worker owns every task. Each bridge operation spawns one worker process,
waits for it to exit, and turns its exit status and output into a
``BridgeResult``. Nothing is cached between calls, so a re-fetch with
``list_tasks`` is the only way to see fresh state.
"""

from todo_bridge.bridge.client import TodoBridge
from todo_bridge.bridge.contracts import TaskPayloadError, decode_task_list, encode_task_list
from todo_bridge.bridge.interpreter import interpret_outcome
from todo_bridge.bridge.invoker import ProcessInvoker, WorkerLaunchError
from todo_bridge.bridge.models import (
    BridgeResult,
    CommandKind,
    FailureKind,
    InvocationOutcome,
    Task,
    TodoBridgeError,
)

__all__ = [
    "BridgeResult",
    "CommandKind",
    "FailureKind",
    "InvocationOutcome",
    "ProcessInvoker",
    "Task",
    "TaskPayloadError",
    "TodoBridge",
    "TodoBridgeError",
    "WorkerLaunchError",
    "decode_task_list",
    "encode_task_list",
    "interpret_outcome",
]
