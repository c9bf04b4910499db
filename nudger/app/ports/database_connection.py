"""Port: database connection the nudger borrows. Implementations live in infrastructure."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from nudger.app.config.settings import Settings


@runtime_checkable
class DatabaseConnection(Protocol):
    """Interface for one database session: authenticate, run a query, release."""

    async def connect(self, username: str, password: str) -> None: ...

    async def execute(self, query: str) -> None: ...

    async def disconnect(self) -> None: ...


class ConnectionFactory(Protocol):
    """Builds a fresh, not yet connected DatabaseConnection for one request."""

    def __call__(self, settings: Settings) -> DatabaseConnection: ...
