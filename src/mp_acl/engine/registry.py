"""Engine – Registry of roles, resources and declared access names."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from mp_acl.errors import InvalidAccessError, UnknownResourceError
from mp_acl.model import WILDCARD, Resource, Role


def access_names(access: Any) -> list[str]:
    """Normalise an access argument (a name or an iterable of names)."""
    if isinstance(access, str):
        return [access]
    if isinstance(access, (bytes, bytearray, dict)) or not isinstance(access, Iterable):
        raise InvalidAccessError(access)
    names = list(access)
    for name in names:
        if not isinstance(name, str):
            raise InvalidAccessError(name)
    return names


class Registry:
    """Known roles, resources and the access names declared per resource.

    The wildcard resource ``"*"`` is registered up-front with the wildcard
    access, so that catch-all ``(role, "*", "*")`` rules can be authored.
    """

    def __init__(self) -> None:
        self._roles: dict[str, Role] = {}
        self._resources: dict[str, Resource] = {WILDCARD: Resource(WILDCARD)}
        self._accesses: dict[str, dict[str, None]] = {WILDCARD: {WILDCARD: None}}

    # ------------------------------------------------------------------
    # Roles
    # ------------------------------------------------------------------

    def add_role(self, role: Role) -> bool:
        if role.name in self._roles:
            return False
        self._roles[role.name] = role
        return True

    def has_role(self, name: str) -> bool:
        return name in self._roles

    def role_names(self) -> list[str]:
        return list(self._roles)

    def roles(self) -> list[Role]:
        return list(self._roles.values())

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    def add_resource(self, resource: Resource) -> bool:
        if resource.name in self._resources:
            return False
        self._resources[resource.name] = resource
        self._accesses[resource.name] = {}
        return True

    def has_resource(self, name: str) -> bool:
        return name in self._resources

    def resources(self) -> list[Resource]:
        return list(self._resources.values())

    # ------------------------------------------------------------------
    # Access declarations
    # ------------------------------------------------------------------

    def add_access(self, resource_name: str, access: str | Iterable[str]) -> bool:
        """Declare *access* on *resource_name*; ``True`` if anything was new."""
        if resource_name not in self._resources:
            raise UnknownResourceError(resource_name)
        declared = self._accesses[resource_name]
        added = False
        for name in access_names(access):
            if name not in declared:
                declared[name] = None
                added = True
        return added

    def drop_access(self, resource_name: str, access: str | Iterable[str]) -> None:
        declared = self._accesses.get(resource_name)
        if declared is None:
            return
        for name in access_names(access):
            declared.pop(name, None)

    def has_access(self, resource_name: str, access: str) -> bool:
        """``True`` if *access* may be used in a rule on *resource_name*."""
        if access == WILDCARD:
            return resource_name in self._resources
        return access in self._accesses.get(resource_name, ())

    def accesses(self, resource_name: str) -> frozenset[str]:
        return frozenset(self._accesses.get(resource_name, ()))


__all__ = ["Registry", "access_names"]
