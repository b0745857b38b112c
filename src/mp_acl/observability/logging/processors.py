"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class AclNameProcessor:
    """structlog processor that tags every event with the owning ACL's name.

    Several engines may live in one process (e.g. one per tenant); the name
    keeps their log lines apart::

        structlog.configure(processors=[AclNameProcessor("billing"), ...])
    """

    def __init__(self, acl_name: str) -> None:
        self._acl_name = acl_name

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        event_dict.setdefault("acl", self._acl_name)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["AclNameProcessor", "get_logger"]
