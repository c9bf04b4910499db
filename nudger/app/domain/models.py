"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass

from nudger.app.core.log_policy import LogPolicy


@dataclass(frozen=True)
class NudgeConfig:
    """How the nudger connects to the database and what it may log.

    dsn: host, port and database name of the database.
    database_user / database_password: database credentials.
    log_policy: what the nudger is allowed to log.
    """

    dsn: str
    database_user: str
    database_password: str
    log_policy: LogPolicy = LogPolicy.NONE
