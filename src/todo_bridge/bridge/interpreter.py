"""Turn a raw worker outcome into a ``BridgeResult``."""

from __future__ import annotations

from todo_bridge.bridge.contracts import TaskPayloadError, decode_task_list
from todo_bridge.bridge.models import BridgeResult, CommandKind, FailureKind, InvocationOutcome


def interpret_outcome(outcome: InvocationOutcome, kind: CommandKind) -> BridgeResult:
    """Decide success or failure for one worker run.

    Non-zero exit codes are failures carrying stderr. For data-returning
    commands a zero exit is only a success once stdout decodes into a task
    list; a payload that does not decode is a failure, never an empty list.
    """

    if outcome.timed_out:
        if outcome.timeout_seconds is None:
            message = "process timed out"
        else:
            message = f"process timed out after {outcome.timeout_seconds:g} seconds"
        return BridgeResult.failure(FailureKind.TIMEOUT, message)

    if outcome.exit_code != 0:
        return BridgeResult.failure(
            FailureKind.REJECTED,
            f"process exited with code {outcome.exit_code}: {outcome.stderr.strip()}",
        )

    if kind is CommandKind.ACTION:
        return BridgeResult.success()

    try:
        tasks = decode_task_list(outcome.stdout)
    except TaskPayloadError as error:
        return BridgeResult.failure(FailureKind.PROTOCOL, f"invalid task list payload: {error}")
    return BridgeResult.success(tasks)
