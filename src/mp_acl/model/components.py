"""ACL model – Role, Resource and the name-accessor contracts.

A role or resource can be handed to the engine either as a plain name or as
an object from which a name can be read:

* :class:`RoleAware` / :class:`ResourceAware` — host objects (a user, a
  document, …) exposing ``role_name`` / ``resource_name``.  These objects are
  also made available to predicates during evaluation.
* :class:`Role` / :class:`Resource` (or anything with a ``name`` string).
"""
from __future__ import annotations

import dataclasses
from typing import Any, Protocol, runtime_checkable

from mp_acl.errors import ConfigurationError, InvalidComponentError

WILDCARD = "*"


@dataclasses.dataclass(frozen=True)
class Role:
    """Named role (e.g. ``guests``, ``editor``)."""
    name: str
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("Role name cannot be empty")

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class Resource:
    """Named protected entity (e.g. ``invoices``)."""
    name: str
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("Resource name cannot be empty")

    def __str__(self) -> str:
        return self.name


@runtime_checkable
class RoleAware(Protocol):
    """Host object that can act as a role."""

    @property
    def role_name(self) -> str: ...


@runtime_checkable
class ResourceAware(Protocol):
    """Host object that can act as a resource."""

    @property
    def resource_name(self) -> str: ...


def _plain_name(value: Any) -> str | None:
    name = getattr(value, "name", None)
    return name if isinstance(name, str) else None


def resolve_role(value: Any) -> tuple[str, Any]:
    """Return ``(name, object)`` for a role argument.

    ``object`` is the :class:`RoleAware` instance when one was given, otherwise
    ``None``.
    """
    if isinstance(value, str):
        return value, None
    if isinstance(value, RoleAware):
        return value.role_name, value
    name = _plain_name(value)
    if name is None:
        raise InvalidComponentError("role", value)
    return name, None


def resolve_resource(value: Any) -> tuple[str, Any]:
    """Return ``(name, object)`` for a resource argument."""
    if isinstance(value, str):
        return value, None
    if isinstance(value, ResourceAware):
        return value.resource_name, value
    name = _plain_name(value)
    if name is None:
        raise InvalidComponentError("resource", value)
    return name, None


def as_role(value: Role | str | Any) -> Role:
    """Normalise a registration argument into a :class:`Role`."""
    if isinstance(value, Role):
        return value
    if isinstance(value, str):
        return Role(value)
    name = _plain_name(value)
    if name is None:
        raise InvalidComponentError("role", value)
    return Role(name, getattr(value, "description", None))


def as_resource(value: Resource | str | Any) -> Resource:
    """Normalise a registration argument into a :class:`Resource`."""
    if isinstance(value, Resource):
        return value
    if isinstance(value, str):
        return Resource(value)
    name = _plain_name(value)
    if name is None:
        raise InvalidComponentError("resource", value)
    return Resource(name, getattr(value, "description", None))


__all__ = [
    "WILDCARD",
    "Resource",
    "ResourceAware",
    "Role",
    "RoleAware",
    "as_resource",
    "as_role",
    "resolve_resource",
    "resolve_role",
]
