"""Engine – MemoryAcl, the in-memory access control list.

Example::

    acl = MemoryAcl(default_action=Decision.DENY)

    acl.add_role("guests")
    acl.add_role("users", inherit_from="guests")
    acl.add_resource("invoices", ["index", "profile"])

    acl.allow("guests", "invoices", "index")
    acl.allow("users", "invoices", "profile", lambda user: user.is_active)

    acl.is_allowed("users", "invoices", "index")                # True (inherited)
    acl.is_allowed("users", "invoices", "profile", {"user": u})  # predicate decides

Configuration calls take an exclusive lock and evaluation a shared one; once
the rule set is complete :meth:`MemoryAcl.freeze` rejects further changes.
"""
from __future__ import annotations

import contextlib
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, Callable, Mapping

from mp_acl.engine.inheritance import InheritanceGraph
from mp_acl.engine.locking import ReadWriteLock
from mp_acl.engine.registry import Registry
from mp_acl.engine.resolver import AccessCheck, Resolver
from mp_acl.engine.rules import RuleTable
from mp_acl.errors import FrozenAclError
from mp_acl.events import AclEvent, AclEventsManager
from mp_acl.model import (
    WILDCARD,
    Decision,
    Resource,
    Role,
    as_resource,
    as_role,
    resolve_resource,
    resolve_role,
)
from mp_acl.observability.logging import get_logger
from mp_acl.predicates import Predicate, as_predicate

if TYPE_CHECKING:
    from mp_acl.config import AclSettings, SettingsLoader

_log = get_logger(__name__)

PredicateLike = Predicate | Callable[..., Any]


class MemoryAcl:
    """Roles, resources, inheritance and allow/deny rules held in memory.

    Parameters
    ----------
    default_action:
        Decision returned when no rule matches (or the role is unknown).
    no_arguments_default_action:
        Decision combined with a matched rule when its predicate needs
        arguments and the caller passed none.
    events_manager:
        Optional :class:`AclEventsManager` notified before and after each
        check.  A before-check listener returning ``False`` denies access.
    """

    def __init__(
        self,
        default_action: Decision | bool | str = Decision.ALLOW,
        no_arguments_default_action: Decision | bool | str = Decision.ALLOW,
        *,
        events_manager: AclEventsManager | None = None,
        freeze_after_build: bool = False,
    ) -> None:
        self._registry = Registry()
        self._graph = InheritanceGraph(self._registry)
        self._rules = RuleTable(self._registry)
        self._resolver = Resolver(self._graph, self._rules)
        self._lock = ReadWriteLock()
        self._frozen = False
        self._freeze_after_build = freeze_after_build

        self._default_action = Decision.of(default_action)
        self._no_arguments_default_action = Decision.of(no_arguments_default_action)
        self._events_manager = events_manager

        self._active_role: str | None = None
        self._active_resource: str | None = None
        self._active_access: str | None = None
        self._access_granted: Decision | None = None

    @classmethod
    def from_settings(
        cls,
        settings: AclSettings | None = None,
        *,
        loader: SettingsLoader | None = None,
        events_manager: AclEventsManager | None = None,
    ) -> MemoryAcl:
        """Build an engine from :class:`~mp_acl.config.AclSettings`.

        Without explicit *settings* they are read with *loader*
        (default: :class:`~mp_acl.config.EnvSettingsLoader`).
        """
        from mp_acl.config import AclSettings, EnvSettingsLoader

        if settings is None:
            settings = (loader or EnvSettingsLoader()).load(AclSettings)
        return cls(
            settings.default_decision,
            settings.no_arguments_decision,
            events_manager=events_manager,
            freeze_after_build=settings.freeze_after_build,
        )

    # ------------------------------------------------------------------
    # Defaults and collaborators
    # ------------------------------------------------------------------

    @property
    def default_action(self) -> Decision:
        return self._default_action

    @default_action.setter
    def default_action(self, value: Decision | bool | str) -> None:
        self._default_action = Decision.of(value)

    @property
    def no_arguments_default_action(self) -> Decision:
        return self._no_arguments_default_action

    @no_arguments_default_action.setter
    def no_arguments_default_action(self, value: Decision | bool | str) -> None:
        self._no_arguments_default_action = Decision.of(value)

    @property
    def events_manager(self) -> AclEventsManager | None:
        return self._events_manager

    @events_manager.setter
    def events_manager(self, manager: AclEventsManager | None) -> None:
        self._events_manager = manager

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def add_role(self, role: Role | str, inherit_from: Role | str | None = None) -> bool:
        """Register *role*; ``False`` if a role with that name already exists.

        With *inherit_from* the new role also inherits from that role and the
        result of :meth:`add_inherit` is returned.
        """
        role = as_role(role)
        with self._mutation("add_role"):
            if not self._registry.add_role(role):
                return False
            _log.debug("acl.role_added", role=role.name)
            if inherit_from is not None:
                return self._add_inherit(role.name, inherit_from)
            return True

    def add_inherit(self, role: Role | str, parent: Role | str) -> bool:
        """Make *role* inherit every rule of *parent* (and of its ancestors)."""
        with self._mutation("add_inherit"):
            return self._add_inherit(as_role(role).name, parent)

    def _add_inherit(self, role_name: str, parent: Role | str) -> bool:
        parent_name = as_role(parent).name
        linked = self._graph.add(role_name, parent_name)
        if linked:
            _log.debug("acl.inherit_added", role=role_name, parent=parent_name)
        return linked

    def inherited_roles(self, role: Role | str) -> tuple[str, ...]:
        """Every role *role* inherits from, directly or transitively."""
        with self._lock.read():
            return self._graph.ancestors(as_role(role).name)

    def has_role(self, name: str) -> bool:
        with self._lock.read():
            return self._registry.has_role(name)

    def roles(self) -> list[Role]:
        with self._lock.read():
            return self._registry.roles()

    def add_resource(
        self,
        resource: Resource | str,
        access: str | Iterable[str] | None = None,
    ) -> bool:
        """Register *resource*, optionally declaring *access* names on it.

        Returns ``True`` when the resource or any access name was new.
        """
        resource = as_resource(resource)
        with self._mutation("add_resource"):
            added = self._registry.add_resource(resource)
            if added:
                _log.debug("acl.resource_added", resource=resource.name)
            if access is not None:
                added = self._registry.add_access(resource.name, access) or added
            return added

    def add_resource_access(self, resource_name: str, access: str | Iterable[str]) -> bool:
        """Declare *access* (a name or list of names) on a registered resource."""
        with self._mutation("add_resource_access"):
            added = self._registry.add_access(resource_name, access)
            _log.debug("acl.access_added", resource=resource_name, access=access)
            return added

    def drop_resource_access(self, resource_name: str, access: str | Iterable[str]) -> None:
        """Remove access declarations; names that were never declared are ignored."""
        with self._mutation("drop_resource_access"):
            self._registry.drop_access(resource_name, access)
            _log.debug("acl.access_dropped", resource=resource_name, access=access)

    def has_resource(self, name: str) -> bool:
        with self._lock.read():
            return self._registry.has_resource(name)

    def has_access(self, resource_name: str, access: str) -> bool:
        with self._lock.read():
            return self._registry.has_access(resource_name, access)

    def resources(self) -> list[Resource]:
        with self._lock.read():
            return self._registry.resources()

    def resource_accesses(self, resource_name: str) -> frozenset[str]:
        with self._lock.read():
            return self._registry.accesses(resource_name)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def allow(
        self,
        role: Role | str,
        resource: Resource | str,
        access: str | Iterable[str],
        predicate: PredicateLike | None = None,
    ) -> None:
        """Allow *role* to perform *access* on *resource*.

        ``role="*"`` applies the rule to every role registered *now*; roles
        added afterwards do not receive it.
        """
        self._allow_or_deny(role, resource, access, Decision.ALLOW, predicate)

    def deny(
        self,
        role: Role | str,
        resource: Resource | str,
        access: str | Iterable[str],
        predicate: PredicateLike | None = None,
    ) -> None:
        """Deny *role* to perform *access* on *resource* (see :meth:`allow`)."""
        self._allow_or_deny(role, resource, access, Decision.DENY, predicate)

    def _allow_or_deny(
        self,
        role: Role | str,
        resource: Resource | str,
        access: str | Iterable[str],
        decision: Decision,
        predicate: PredicateLike | None,
    ) -> None:
        role_name = as_role(role).name
        resource_name = as_resource(resource).name
        bound_predicate = as_predicate(predicate)
        with self._mutation(decision.value.lower()):
            targets = self._registry.role_names() if role_name == WILDCARD else [role_name]
            for target in targets:
                self._rules.set_rule(target, resource_name, access, decision, bound_predicate)
            _log.debug(
                "acl.rule_set",
                roles=targets,
                resource=resource_name,
                access=access,
                decision=decision.value,
                predicate=bound_predicate is not None,
            )

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def is_allowed(
        self,
        role: Any,
        resource: Any,
        access: str,
        parameters: Mapping[str, Any] | None = None,
    ) -> bool:
        """Return whether *role* may perform *access* on *resource*.

        *role* and *resource* are names or objects exposing one
        (:class:`~mp_acl.model.RoleAware`, :class:`~mp_acl.model.ResourceAware`
        or anything with a ``name``).  *parameters* feed the rule's predicate.
        """
        role_name, role_object = resolve_role(role)
        resource_name, resource_object = resolve_resource(resource)

        self._active_role = role_name
        self._active_resource = resource_name
        self._active_access = access

        events = self._events_manager
        if events is not None and events.fire(AclEvent.BEFORE_CHECK_ACCESS, self) is False:
            _log.debug("acl.check_vetoed", role=role_name, resource=resource_name, access=access)
            return False

        with self._lock.read():
            if not self._registry.has_role(role_name):
                self._access_granted = None
                _log.debug("acl.check_unknown_role", role=role_name)
                return bool(self._default_action)
            rule = self._resolver.lookup(role_name, resource_name, access)

        self._access_granted = rule.decision if rule is not None else None
        if events is not None:
            events.fire(AclEvent.AFTER_CHECK_ACCESS, self)

        if rule is None:
            result = bool(self._default_action)
        else:
            check = AccessCheck(
                role_name,
                resource_name,
                access,
                role_object,
                resource_object,
                parameters or {},
            )
            result = self._resolver.evaluate(rule, check, self._no_arguments_default_action)
        _log.debug(
            "acl.check",
            role=role_name,
            resource=resource_name,
            access=access,
            matched=rule is not None,
            allowed=result,
        )
        return result

    @property
    def active_role(self) -> str | None:
        """Role name of the most recent :meth:`is_allowed` call."""
        return self._active_role

    @property
    def active_resource(self) -> str | None:
        return self._active_resource

    @property
    def active_access(self) -> str | None:
        return self._active_access

    @property
    def access_granted(self) -> Decision | None:
        """Decision of the rule matched by the most recent check, ``None`` if none matched.

        This is the rule's static decision, before any predicate ran.
        """
        return self._access_granted

    # ------------------------------------------------------------------
    # Build / freeze
    # ------------------------------------------------------------------

    def build(self, *configurators: Callable[[MemoryAcl], None]) -> MemoryAcl:
        """Run each configurator against this ACL, then freeze if configured to."""
        for configure in configurators:
            configure(self)
        if self._freeze_after_build:
            self.freeze()
        return self

    def freeze(self) -> None:
        """Reject every further configuration change with :class:`FrozenAclError`."""
        with self._lock.write():
            self._frozen = True
        _log.info("acl.frozen", roles=len(self._registry.role_names()), rules=len(self._rules))

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @contextlib.contextmanager
    def _mutation(self, operation: str) -> Iterator[None]:
        with self._lock.write():
            if self._frozen:
                raise FrozenAclError(operation)
            yield


__all__ = ["MemoryAcl", "PredicateLike"]
