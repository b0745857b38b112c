"""Observability – structured logging and access auditing."""

from mp_acl.observability.logging import (
    AccessAuditLogger,
    AuditOutcome,
    JsonLoggerFactory,
    Logger,
    get_logger,
)

__all__ = [
    "AccessAuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "Logger",
    "get_logger",
]
