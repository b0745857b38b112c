"""Engine – Resolver: rule lookup fallbacks and predicate argument binding.

Lookup order for ``(role, resource, access)``, first match wins:

1. ``(role, resource, access)``, then each inherited role;
2. ``(role, resource, "*")``, then each inherited role;
3. ``(role, "*", "*")``, then each inherited role.

Inherited roles are visited in the order they were added to the role's
(already transitively closed) ancestor set.
"""
from __future__ import annotations

import dataclasses
import warnings
from typing import Any, Mapping

from mp_acl.engine.inheritance import InheritanceGraph
from mp_acl.engine.rules import RuleTable
from mp_acl.errors import (
    ExcessPredicateArgumentsWarning,
    MissingPredicateArgumentsError,
    MissingPredicateArgumentsWarning,
    PredicateArgumentTypeError,
)
from mp_acl.model import WILDCARD, Decision, Rule, RuleKey
from mp_acl.observability.logging import get_logger

_log = get_logger(__name__)

# is_allowed -> Resolver.evaluate -> Resolver._warn -> warnings.warn
_WARN_STACKLEVEL = 4


@dataclasses.dataclass(frozen=True)
class AccessCheck:
    """One ``is_allowed`` call, with names resolved and objects kept for binding."""

    role: str
    resource: str
    access: str
    role_object: Any = None
    resource_object: Any = None
    parameters: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def describe(self) -> str:
        return f"{self.role} can {self.access} {self.resource}"


class Resolver:
    """Find the rule governing an :class:`AccessCheck` and evaluate it."""

    def __init__(self, graph: InheritanceGraph, rules: RuleTable) -> None:
        self._graph = graph
        self._rules = rules

    def lookup(self, role: str, resource: str, access: str) -> Rule | None:
        ancestors = self._graph.ancestors(role)
        for res, acc in ((resource, access), (resource, WILDCARD), (WILDCARD, WILDCARD)):
            rule = self._rules.get(RuleKey(role, res, acc))
            if rule is not None:
                return rule
            for ancestor in ancestors:
                rule = self._rules.get(RuleKey(ancestor, res, acc))
                if rule is not None:
                    return rule
        return None

    def evaluate(self, rule: Rule, check: AccessCheck, no_arguments_default: Decision) -> bool:
        """Combine *rule*'s decision with its predicate, if it has one."""
        predicate = rule.predicate
        if predicate is None:
            return rule.allows
        if not predicate.params:
            return rule.allows and bool(predicate())

        bound: dict[str, Any] = {}
        caller_slots = len(predicate.params)
        for param in predicate.params:
            if param.expected is not None:
                if check.role_object is not None and isinstance(check.role_object, param.expected):
                    bound[param.name] = check.role_object
                    caller_slots -= 1
                    continue
                if check.resource_object is not None and isinstance(
                    check.resource_object, param.expected
                ):
                    bound[param.name] = check.resource_object
                    caller_slots -= 1
                    continue
                value = check.parameters.get(param.name)
                if (
                    param.name in check.parameters
                    and not (value is None and not param.required)
                    and not isinstance(value, param.expected)
                ):
                    raise PredicateArgumentTypeError(
                        check.describe(),
                        param.name,
                        param.expected,
                        type(value),
                    )
            if param.name in check.parameters:
                bound[param.name] = check.parameters[param.name]

        if caller_slots < len(check.parameters):
            self._warn(
                ExcessPredicateArgumentsWarning,
                f"More parameters were passed than the predicate accepts when checking "
                f"{check.describe()}; the extra parameters are ignored",
                check,
            )

        if not bound:
            if predicate.required_count > 0:
                self._warn(
                    MissingPredicateArgumentsWarning,
                    f"No parameters were passed when checking {check.describe()}; "
                    f"using the no-arguments default action",
                    check,
                )
                return rule.allows and no_arguments_default is Decision.ALLOW
            return rule.allows and bool(predicate())

        missing = [p.name for p in predicate.params if p.required and p.name not in bound]
        if missing:
            raise MissingPredicateArgumentsError(check.describe(), missing)
        return rule.allows and bool(predicate(bound))

    @staticmethod
    def _warn(category: type[Warning], message: str, check: AccessCheck) -> None:
        _log.warning(
            "acl.predicate_arguments",
            role=check.role,
            resource=check.resource,
            access=check.access,
            warning=category.__name__,
        )
        warnings.warn(message, category, stacklevel=_WARN_STACKLEVEL)


__all__ = ["AccessCheck", "Resolver"]
