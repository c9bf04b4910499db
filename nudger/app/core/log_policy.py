"""Logging policy: decides which nudge log calls reach the loguru sinks.

A policy maps to a single loguru severity threshold. The threshold is resolved
once when a PolicyLogger is built; each call only compares level numbers.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from loguru import logger

from nudger.app.core import SERVICE_NAME


class LogPolicy(str, Enum):
    """What the nudger is allowed to log."""

    # No logging at all.
    NONE = "none"
    # Connection and nudge errors only.
    ON_ERROR = "onError"
    # Complete connection and nudge flow.
    ON_NUDGE = "onNudge"


_THRESHOLDS: dict[LogPolicy, str | None] = {
    LogPolicy.NONE: None,
    LogPolicy.ON_ERROR: "ERROR",
    LogPolicy.ON_NUDGE: "INFO",
}


def threshold_for(policy: LogPolicy) -> int | None:
    """Loguru level number a record must reach to be emitted, or None when muted."""
    level_name = _THRESHOLDS[LogPolicy(policy)]
    if level_name is None:
        return None
    return logger.level(level_name).no


class PolicyLogger:
    """Loguru logger gated by a LogPolicy and bound to service context."""

    def __init__(self, policy: LogPolicy, **context: Any) -> None:
        policy = LogPolicy(policy)
        self._threshold = threshold_for(policy)
        self._logger = logger.bind(
            service_name=SERVICE_NAME,
            log_policy=policy.value,
            **context,
        )

    def enabled(self, level: str) -> bool:
        if self._threshold is None:
            return False
        return logger.level(level).no >= self._threshold

    def info(self, message: str, *args: Any) -> None:
        self._emit("INFO", message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._emit("ERROR", message, *args)

    def critical(self, message: str, *args: Any) -> None:
        self._emit("CRITICAL", message, *args)

    def _emit(self, level: str, message: str, *args: Any) -> None:
        if self.enabled(level):
            self._logger.opt(depth=2).log(level, message, *args)


__all__ = ["LogPolicy", "PolicyLogger", "threshold_for"]
