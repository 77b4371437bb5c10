from __future__ import annotations

import allure
import pytest

from todo_bridge.config import ConfigError, Settings, store_path_from_env

pytestmark = [
    allure.epic("Configuration"),
    allure.feature("Environment Settings"),
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TODO_BRIDGE_WORKER_COMMAND",
        "TODO_BRIDGE_TIMEOUT_SECONDS",
        "TODO_BRIDGE_LOG_LEVEL",
        "TODO_BRIDGE_STORE_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    settings = Settings.from_env()

    assert settings.worker_command == ("todo-worker",)
    assert settings.timeout_seconds is None
    assert settings.log_level == "WARNING"


def test_from_env_splits_worker_command(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(
        "TODO_BRIDGE_WORKER_COMMAND",
        'python -m todo_bridge.worker --store "my tasks.json"',
    )

    settings = Settings.from_env()

    assert settings.worker_command == (
        "python",
        "-m",
        "todo_bridge.worker",
        "--store",
        "my tasks.json",
    )


def test_explicit_arguments_override_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_BRIDGE_WORKER_COMMAND", "from-env")
    monkeypatch.setenv("TODO_BRIDGE_TIMEOUT_SECONDS", "5")

    settings = Settings.from_env(worker_command="from-cli", timeout_seconds=1.5)

    assert settings.worker_command == ("from-cli",)
    assert settings.timeout_seconds == 1.5


def test_from_env_parses_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_BRIDGE_TIMEOUT_SECONDS", "2.5")
    assert Settings.from_env().timeout_seconds == 2.5


def test_from_env_rejects_empty_worker_command(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_BRIDGE_WORKER_COMMAND", "   ")
    with pytest.raises(ConfigError, match="WORKER_COMMAND must not be empty"):
        Settings.from_env()


def test_from_env_rejects_unbalanced_quotes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_BRIDGE_WORKER_COMMAND", 'worker "oops')
    with pytest.raises(ConfigError, match="Invalid TODO_BRIDGE_WORKER_COMMAND"):
        Settings.from_env()


@pytest.mark.parametrize("raw", ["0", "-1"])
def test_from_env_rejects_non_positive_timeout(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("TODO_BRIDGE_TIMEOUT_SECONDS", raw)
    with pytest.raises(ConfigError, match="TIMEOUT_SECONDS must be > 0"):
        Settings.from_env()


def test_from_env_rejects_non_numeric_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_BRIDGE_TIMEOUT_SECONDS", "soon")
    with pytest.raises(ConfigError, match="must be a number"):
        Settings.from_env()


def test_from_env_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_BRIDGE_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigError, match="LOG_LEVEL"):
        Settings.from_env()


def test_store_path_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    assert str(store_path_from_env()) == "todos.json"
    monkeypatch.setenv("TODO_BRIDGE_STORE_PATH", "/tmp/x.json")
    assert str(store_path_from_env()) == "/tmp/x.json"
