"""Runtime configuration for the bridge and its worker."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path

from todo_bridge.bridge.models import TodoBridgeError

DEFAULT_WORKER_COMMAND = "todo-worker"
DEFAULT_STORE_PATH = Path("todos.json")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(TodoBridgeError, ValueError):
    """Invalid configuration value."""


@dataclass(slots=True)
class Settings:
    """Application settings."""

    worker_command: tuple[str, ...] = (DEFAULT_WORKER_COMMAND,)
    timeout_seconds: float | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(
        cls,
        *,
        worker_command: str | None = None,
        timeout_seconds: float | None = None,
    ) -> Settings:
        """Load settings from environment; explicit arguments take precedence."""

        raw_command = worker_command
        if raw_command is None:
            raw_command = os.getenv("TODO_BRIDGE_WORKER_COMMAND", DEFAULT_WORKER_COMMAND)
        settings = cls(
            worker_command=_split_command(raw_command),
            timeout_seconds=(
                timeout_seconds
                if timeout_seconds is not None
                else _env_optional_float("TODO_BRIDGE_TIMEOUT_SECONDS")
            ),
            log_level=os.getenv("TODO_BRIDGE_LOG_LEVEL", "WARNING").strip().upper(),
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        """Raise ``ConfigError`` if any setting is unusable."""

        if not self.worker_command or not self.worker_command[0].strip():
            raise ConfigError("TODO_BRIDGE_WORKER_COMMAND must not be empty.")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ConfigError("TODO_BRIDGE_TIMEOUT_SECONDS must be > 0.")
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(
                f"TODO_BRIDGE_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, "
                f"got {self.log_level!r}.",
            )


def store_path_from_env() -> Path:
    """Store file used by the reference worker."""

    raw = os.getenv("TODO_BRIDGE_STORE_PATH", "").strip()
    if not raw:
        return DEFAULT_STORE_PATH
    return Path(raw).expanduser()


def _split_command(raw: str) -> tuple[str, ...]:
    try:
        parts = shlex.split(raw, posix=os.name != "nt")
    except ValueError as error:
        raise ConfigError(f"Invalid TODO_BRIDGE_WORKER_COMMAND: {error}") from error
    return tuple(parts)


def _env_optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as error:
        raise ConfigError(f"{name} must be a number, got {raw!r}.") from error
