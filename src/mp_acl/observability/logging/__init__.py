"""Observability – structured logging helpers."""
from mp_acl.observability.logging.audit import AccessAuditLogger, AuditOutcome
from mp_acl.observability.logging.factory import JsonLoggerFactory
from mp_acl.observability.logging.processors import AclNameProcessor, get_logger
from mp_acl.observability.logging.protocol import Logger

__all__ = [
    "AccessAuditLogger",
    "AclNameProcessor",
    "AuditOutcome",
    "JsonLoggerFactory",
    "Logger",
    "get_logger",
]
