"""Nudge capability: keeps a database session alive with one lightweight query.

Works over any DatabaseConnection; the connection is passed in rather than
subclassed, so existing driver wrappers gain the capability unchanged.

Usage:

    config = NudgeConfig(dsn, user, password, LogPolicy.ON_NUDGE)
    await connection.connect(user, password)
    ok = await nudge(connection, config)

How often to nudge is the caller's decision (cron, uptime pinger, timer).
"""
from __future__ import annotations

from nudger.app.core.log_policy import PolicyLogger
from nudger.app.domain.models import NudgeConfig
from nudger.app.ports.database_connection import DatabaseConnection

NUDGE_QUERY = "SELECT NOW();"


async def nudge(connection: DatabaseConnection, config: NudgeConfig) -> bool:
    """Run the liveness query once against an already connected database.

    Returns True when the query ran, False when it raised. Query errors are
    logged per config.log_policy and never propagate.
    """
    log = PolicyLogger(config.log_policy, component="nudger", event="nudge")

    try:
        await connection.execute(NUDGE_QUERY)
    except Exception as exc:
        log.error("Couldn't nudge the database ({}).", exc)
        return False

    log.info("Database nudged")
    return True


__all__ = ["NUDGE_QUERY", "nudge"]
