"""ACL model – Decision."""
from __future__ import annotations

from enum import Enum


class Decision(str, Enum):
    """Outcome attached to a rule or used as a default."""

    ALLOW = "ALLOW"
    DENY = "DENY"

    def __bool__(self) -> bool:
        return self is Decision.ALLOW

    @classmethod
    def of(cls, value: Decision | bool | str) -> Decision:
        """Coerce ``True``/``False``, ``"allow"``/``"deny"`` or a :class:`Decision`."""
        if isinstance(value, Decision):
            return value
        if isinstance(value, bool):
            return cls.ALLOW if value else cls.DENY
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise ValueError(f"Cannot interpret {value!r} as an ACL decision")


__all__ = ["Decision"]
