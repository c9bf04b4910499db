"""Builds the per-request database connection for the configured DATABASE_BACKEND.

The nudge route never imports a driver adapter directly; it asks this module.
"""
from __future__ import annotations

from nudger.app.config.settings import Settings
from nudger.app.ports.database_connection import DatabaseConnection
from nudger.app.infrastructure.persistence.odbc.odbc_connection import OdbcConnection


def create_database_connection(settings: Settings) -> DatabaseConnection:
    """Return a fresh, unconnected session for the DSN in settings."""
    backend = settings.database_backend.strip().lower()
    if backend != "odbc":
        raise ValueError(f"Unsupported database backend: {backend}")

    return OdbcConnection(
        settings.dsn,
        settings.driver_path,
        login_timeout_seconds=settings.database_login_timeout_seconds,
    )
