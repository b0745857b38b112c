"""Engine – role inheritance graph, closed transitively at write time."""
from __future__ import annotations

from mp_acl.engine.registry import Registry
from mp_acl.errors import UnknownRoleError


class InheritanceGraph:
    """Map each role to the ordered set of every role it inherits from.

    The closure is maintained eagerly by :meth:`add`, so a lookup never has
    to follow more than one level: ``ancestors("admin")`` already contains
    the parents of its parents.
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry
        self._inherits: dict[str, dict[str, None]] = {}

    def add(self, role_name: str, parent_name: str) -> bool:
        """Make *role_name* inherit from *parent_name*.

        Returns ``False`` (and changes nothing) when a role is asked to
        inherit from itself.
        """
        if not self._registry.has_role(role_name):
            raise UnknownRoleError(
                role_name, f"Role '{role_name}' does not exist in the role list"
            )
        if not self._registry.has_role(parent_name):
            raise UnknownRoleError(
                parent_name,
                f"Role '{parent_name}' (to inherit) does not exist in the role list",
            )
        if role_name == parent_name:
            return False

        gained = [parent_name, *self._inherits.get(parent_name, ())]
        heirs = [role_name] + [
            heir for heir, ancestors in self._inherits.items() if role_name in ancestors
        ]
        for heir in heirs:
            ancestors = self._inherits.setdefault(heir, {})
            for ancestor in gained:
                # cycles are tolerated but a role never lists itself
                if ancestor != heir:
                    ancestors.setdefault(ancestor, None)
        return True

    def ancestors(self, role_name: str) -> tuple[str, ...]:
        return tuple(self._inherits.get(role_name, ()))


__all__ = ["InheritanceGraph"]
