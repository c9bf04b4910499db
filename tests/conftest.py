from __future__ import annotations

from typing import Any

import pytest
from fastapi import FastAPI
from loguru import logger

from nudger.app.routers.health import health_router
from nudger.app.routers.nudge import nudge_router

NUDGE_ENV_KEYS = (
    "DSN",
    "USER",
    "PASSWORD",
    "LOG_POLICY",
    "DATABASE_BACKEND",
    "DRIVER_PATH",
    "DATABASE_LOGIN_TIMEOUT_SECONDS",
)


class FakeConnection:
    """Implements DatabaseConnection for tests; records every call it receives."""

    def __init__(
        self,
        *,
        raise_on_connect: Exception | None = None,
        raise_on_execute: Exception | None = None,
    ) -> None:
        self._raise_on_connect = raise_on_connect
        self._raise_on_execute = raise_on_execute
        self.connect_calls: list[tuple[str, str]] = []
        self.executed: list[str] = []
        self.disconnect_calls = 0

    async def connect(self, username: str, password: str) -> None:
        self.connect_calls.append((username, password))
        if self._raise_on_connect is not None:
            raise self._raise_on_connect

    async def execute(self, query: str) -> None:
        self.executed.append(query)
        if self._raise_on_execute is not None:
            raise self._raise_on_execute

    async def disconnect(self) -> None:
        self.disconnect_calls += 1


class FakeConnectionFactory:
    """Implements ConnectionFactory; hands out one prepared FakeConnection and remembers settings."""

    def __init__(self, connection: FakeConnection | None = None) -> None:
        self.connection = connection or FakeConnection()
        self.settings_seen: list[Any] = []

    def __call__(self, settings: Any) -> FakeConnection:
        self.settings_seen.append(settings)
        return self.connection


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Start every test without nudger environment variables (USER is usually set by the shell).

    Runs from an empty directory so a developer's .env is not picked up.
    """
    for key in NUDGE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def log_records():
    """Collect loguru records emitted during the test."""
    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)


@pytest.fixture()
def connection_factory() -> FakeConnectionFactory:
    return FakeConnectionFactory()


@pytest.fixture()
def test_app(connection_factory) -> FastAPI:
    app = FastAPI()
    app.state.connection_factory = connection_factory
    app.include_router(health_router)
    app.include_router(nudge_router)
    return app
