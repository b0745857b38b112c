"""Observability – AccessAuditLogger.

A dedicated structured-log sink for access decisions.  It can be attached to
an :class:`~mp_acl.events.AclEventsManager` so that every completed check is
recorded::

    audit = AccessAuditLogger(service="billing")
    events.attach(AclEvent.AFTER_CHECK_ACCESS, audit.on_after_check)
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from mp_acl.observability.logging.processors import get_logger
from mp_acl.observability.logging.protocol import Logger

if TYPE_CHECKING:
    from mp_acl.events import Event


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    ALLOWED = "allowed"
    DENIED = "denied"
    DEFAULT = "default"


class AccessAuditLogger:
    """Emit one ``audit.access`` entry per access check.

    All entries are emitted at ``WARNING`` level so they pass through even
    restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying logger.  Defaults to the structlog logger ``audit``.
    """

    def __init__(self, service: str = "unknown", logger: Logger | None = None) -> None:
        self._service = service
        self._log: Logger = logger if logger is not None else get_logger("audit")

    def log_access(
        self,
        role: str,
        resource: str,
        access: str,
        outcome: AuditOutcome | str,
        **extra: Any,
    ) -> None:
        """Record an access decision for *role* on *resource* / *access*."""
        self._log.warning(
            "audit.access",
            service=self._service,
            role=role,
            resource=resource,
            access=access,
            outcome=outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            timestamp=datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        )

    def on_after_check(self, event: Event) -> None:
        """Listener for ``acl:afterCheckAccess``.

        The outcome reflects the matched rule before any predicate runs;
        ``default`` means no rule matched.
        """
        acl = event.source
        granted = acl.access_granted
        if granted is None:
            outcome = AuditOutcome.DEFAULT
        elif granted:
            outcome = AuditOutcome.ALLOWED
        else:
            outcome = AuditOutcome.DENIED
        self.log_access(acl.active_role, acl.active_resource, acl.active_access, outcome)


__all__ = ["AccessAuditLogger", "AuditOutcome"]
