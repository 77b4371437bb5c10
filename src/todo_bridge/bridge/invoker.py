"""Subprocess runner for the external todo worker."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence

from todo_bridge.bridge.models import InvocationOutcome, TodoBridgeError

logger = logging.getLogger(__name__)

TIMEOUT_EXIT_CODE = 124
_TERMINATE_GRACE_SECONDS = 2.0


class WorkerLaunchError(TodoBridgeError):
    """The worker executable could not be started."""

    def __init__(self, message: str, *, executable: str) -> None:
        super().__init__(message)
        self.executable = executable


class ProcessInvoker:
    """Run one worker process per call and collect its output."""

    async def run(
        self,
        executable: str,
        args: Sequence[str],
        *,
        timeout_seconds: float | None = None,
    ) -> InvocationOutcome:
        """Start ``executable`` with ``args`` and wait for it to exit.

        Arguments are handed to the OS as a vector, never through a shell.
        A non-zero exit is reported in the outcome; only a failure to start
        the process raises ``WorkerLaunchError``.
        """

        argv = [executable, *args]
        started = time.monotonic()
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as error:
            raise WorkerLaunchError(
                f"worker executable not found: {executable}",
                executable=executable,
            ) from error
        except PermissionError as error:
            raise WorkerLaunchError(
                f"worker executable is not executable: {executable}",
                executable=executable,
            ) from error
        except (OSError, ValueError) as error:
            # ValueError: NUL byte in the executable or an argument.
            raise WorkerLaunchError(
                f"worker failed to start: {error}",
                executable=executable,
            ) from error

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout=timeout_seconds,
            )
        except TimeoutError:
            await _terminate_process(process)
            logger.warning(
                "Worker timed out after %ss: %s",
                timeout_seconds,
                _format_argv(argv),
            )
            return InvocationOutcome(
                exit_code=TIMEOUT_EXIT_CODE,
                stdout="",
                stderr="",
                timed_out=True,
                timeout_seconds=timeout_seconds,
            )
        except asyncio.CancelledError:
            await _terminate_process(process)
            raise

        exit_code = process.returncode if process.returncode is not None else -1
        logger.debug(
            "Worker exited code=%d in %.3fs: %s",
            exit_code,
            time.monotonic() - started,
            _format_argv(argv),
        )
        return InvocationOutcome(
            exit_code=exit_code,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
        )


async def _terminate_process(process: asyncio.subprocess.Process) -> None:
    try:
        process.terminate()
    except ProcessLookupError:
        return
    try:
        await asyncio.wait_for(process.wait(), timeout=_TERMINATE_GRACE_SECONDS)
    except TimeoutError:
        try:
            process.kill()
        except ProcessLookupError:
            return
        await process.wait()


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def _format_argv(argv: Sequence[str], *, limit: int = 240) -> str:
    compact = " ".join(argv).replace("\n", " ")
    if len(compact) <= limit:
        return compact
    return compact[:limit] + "..."
