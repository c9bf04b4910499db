from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from fastapi.concurrency import run_in_threadpool
from loguru import logger

from nudger.app.core import SERVICE_NAME

if TYPE_CHECKING:
    import pyodbc

Connector = Callable[..., "pyodbc.Connection"]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


def _brace(value: str) -> str:
    return "{" + value.replace("}", "}}") + "}"


def _quote(value: str) -> str:
    """Brace-quote an ODBC attribute value when it contains separators."""
    if any(ch in value for ch in ";{}") or value != value.strip():
        return _brace(value)
    return value


def build_connection_string(dsn: str, driver_path: str, username: str, password: str) -> str:
    return (
        f"DRIVER={_brace(driver_path)};"
        f"DBQ={_quote(dsn)};"
        f"UID={_quote(username)};"
        f"PWD={_quote(password)};"
    )


def _pyodbc_connector() -> Connector:
    # pyodbc needs the unixODBC shared library; import only when a connection is made.
    import pyodbc

    return pyodbc.connect


class OdbcConnection:
    """DatabaseConnection implementation over pyodbc.

    pyodbc is blocking; every driver call runs in the threadpool so the event
    loop keeps serving other requests.
    """

    def __init__(
        self,
        dsn: str,
        driver_path: str,
        *,
        login_timeout_seconds: int = 0,
        connector: Connector | None = None,
    ) -> None:
        self._dsn = dsn
        self._driver_path = driver_path
        self._login_timeout_seconds = login_timeout_seconds
        self._connector = connector
        self._connection: pyodbc.Connection | None = None

    @property
    def connection(self) -> pyodbc.Connection:
        if self._connection is None:
            raise RuntimeError("db_not_connected")
        return self._connection

    async def connect(self, username: str, password: str) -> None:
        _log("db_connect_attempt", dsn=self._dsn)
        conn_str = build_connection_string(self._dsn, self._driver_path, username, password)
        try:
            connector = self._connector or _pyodbc_connector()
            self._connection = await run_in_threadpool(
                connector,
                conn_str,
                autocommit=True,
                timeout=self._login_timeout_seconds,
            )
        except Exception:
            _log("db_connect_failed", dsn=self._dsn)
            raise
        _log("db_connected", dsn=self._dsn)

    async def execute(self, query: str) -> None:
        connection = self.connection
        await run_in_threadpool(_execute, connection, query)

    async def disconnect(self) -> None:
        """Release the session. Close failures are logged, never raised; the handle is gone either way."""
        if self._connection is None:
            return
        connection, self._connection = self._connection, None
        try:
            await run_in_threadpool(connection.close)
        except Exception as exc:
            logger.bind(service_name=SERVICE_NAME, event="db_disconnect_failed", dsn=self._dsn).warning(
                "db disconnect failed: {}", exc
            )
            return
        _log("db_disconnected", dsn=self._dsn)


def _execute(connection: pyodbc.Connection, query: str) -> None:
    cursor = connection.cursor()
    try:
        cursor.execute(query)
    finally:
        cursor.close()
