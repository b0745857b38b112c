"""Engine – RuleTable: ``(role, resource, access)`` → :class:`Rule`."""
from __future__ import annotations

from collections.abc import Iterable

from mp_acl.engine.registry import Registry, access_names
from mp_acl.errors import UnknownAccessError, UnknownResourceError, UnknownRoleError
from mp_acl.model import Decision, Rule, RuleKey
from mp_acl.predicates import Predicate


class RuleTable:
    """Stores one :class:`Rule` per :class:`RuleKey`; later writes overwrite."""

    def __init__(self, registry: Registry) -> None:
        self._registry = registry
        self._rules: dict[RuleKey, Rule] = {}

    def set_rule(
        self,
        role_name: str,
        resource_name: str,
        access: str | Iterable[str],
        decision: Decision,
        predicate: Predicate | None = None,
    ) -> list[RuleKey]:
        """Write one rule per access name and return the keys written.

        Every access name is validated before anything is written, so a
        failing call leaves the table unchanged.
        """
        if not self._registry.has_role(role_name):
            raise UnknownRoleError(role_name)
        if not self._registry.has_resource(resource_name):
            raise UnknownResourceError(resource_name)
        names = access_names(access)
        for name in names:
            if not self._registry.has_access(resource_name, name):
                raise UnknownAccessError(resource_name, name)

        rule = Rule(decision, predicate)
        keys = [RuleKey(role_name, resource_name, name) for name in names]
        for key in keys:
            self._rules[key] = rule
        return keys

    def get(self, key: RuleKey) -> Rule | None:
        return self._rules.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __len__(self) -> int:
        return len(self._rules)


__all__ = ["RuleTable"]
