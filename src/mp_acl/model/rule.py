"""ACL model – RuleKey and Rule."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, NamedTuple

from mp_acl.model.decision import Decision

if TYPE_CHECKING:
    from mp_acl.predicates import Predicate


class RuleKey(NamedTuple):
    """Composite ``(role, resource, access)`` lookup key."""

    role: str
    resource: str
    access: str


@dataclasses.dataclass(frozen=True)
class Rule:
    """Decision stored for a :class:`RuleKey`, optionally gated by a predicate."""

    decision: Decision
    predicate: Predicate | None = None

    @property
    def allows(self) -> bool:
        return self.decision is Decision.ALLOW


__all__ = ["Rule", "RuleKey"]
