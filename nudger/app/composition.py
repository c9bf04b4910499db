"""
Composition root: single place where per-request collaborators are wired.

Each request builds its own Settings, NudgeConfig and connection; nothing is
shared between requests. No DI container library, explicit wiring only. The
connection factory defaults to the settings-driven one and can be swapped via
app.state.connection_factory.
"""
from __future__ import annotations

from fastapi import Request

from nudger.app.config.settings import Settings
from nudger.app.domain.models import NudgeConfig
from nudger.app.infrastructure.persistence.factory import create_database_connection
from nudger.app.ports.database_connection import ConnectionFactory


def build_nudge_config(settings: Settings | None = None) -> NudgeConfig:
    """Build the immutable NudgeConfig from environment-backed settings."""
    _settings = settings or Settings()
    return NudgeConfig(
        dsn=_settings.dsn,
        database_user=_settings.database_user,
        database_password=_settings.database_password,
        log_policy=_settings.log_policy,
    )


def get_connection_factory(request: Request) -> ConnectionFactory:
    """Connection factory from app.state, falling back to the settings-driven one."""
    factory = getattr(request.app.state, "connection_factory", None)
    if factory is not None:
        return factory
    return create_database_connection
