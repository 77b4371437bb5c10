"""Public bridge API used by the presentation layer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from todo_bridge.bridge.interpreter import interpret_outcome
from todo_bridge.bridge.invoker import ProcessInvoker, WorkerLaunchError
from todo_bridge.bridge.models import BridgeResult, CommandKind, FailureKind

if TYPE_CHECKING:
    from todo_bridge.config import Settings

logger = logging.getLogger(__name__)


class TodoBridge:
    """Stateless relay from task intents to worker subcommands."""

    def __init__(
        self,
        executable: str,
        *,
        base_args: Sequence[str] = (),
        timeout_seconds: float | None = None,
        invoker: ProcessInvoker | None = None,
    ) -> None:
        self.executable = executable
        self.base_args = tuple(base_args)
        self.timeout_seconds = timeout_seconds
        self._invoker = invoker or ProcessInvoker()

    @classmethod
    def from_settings(cls, settings: Settings) -> TodoBridge:
        """Build a bridge for the worker command configured in ``settings``."""

        executable, *base_args = settings.worker_command
        return cls(
            executable,
            base_args=base_args,
            timeout_seconds=settings.timeout_seconds,
        )

    async def list_tasks(self) -> BridgeResult:
        """Fetch the current task collection from the worker."""

        return await self._execute("list", ["list", "--json"], CommandKind.DATA)

    async def add_task(self, title: str) -> BridgeResult:
        """Ask the worker to create a task with ``title``."""

        return await self._execute("add", ["add", title], CommandKind.ACTION)

    async def complete_task(self, task_id: int) -> BridgeResult:
        """Ask the worker to mark task ``task_id`` as completed."""

        return await self._execute("complete", ["complete", str(task_id)], CommandKind.ACTION)

    async def remove_task(self, task_id: int) -> BridgeResult:
        """Ask the worker to delete task ``task_id``."""

        return await self._execute("remove", ["remove", str(task_id)], CommandKind.ACTION)

    async def _execute(
        self,
        operation: str,
        args: list[str],
        kind: CommandKind,
    ) -> BridgeResult:
        try:
            outcome = await self._invoker.run(
                self.executable,
                [*self.base_args, *args],
                timeout_seconds=self.timeout_seconds,
            )
        except WorkerLaunchError as error:
            result = BridgeResult.failure(
                FailureKind.LAUNCH,
                f"failed to launch worker {error.executable}: {error}",
            )
        else:
            result = interpret_outcome(outcome, kind)

        if not result.ok and result.failure_kind is not None:
            logger.warning(
                "Bridge %s failed (%s): %s",
                operation,
                result.failure_kind.value,
                result.error,
            )
        return result
