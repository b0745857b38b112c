"""ACL model – Role, Resource, Decision, Rule."""
from mp_acl.model.components import (
    WILDCARD,
    Resource,
    ResourceAware,
    Role,
    RoleAware,
    as_resource,
    as_role,
    resolve_resource,
    resolve_role,
)
from mp_acl.model.decision import Decision
from mp_acl.model.rule import Rule, RuleKey

__all__ = [
    "WILDCARD",
    "Decision",
    "Resource",
    "ResourceAware",
    "Role",
    "RoleAware",
    "Rule",
    "RuleKey",
    "as_resource",
    "as_role",
    "resolve_resource",
    "resolve_role",
]
