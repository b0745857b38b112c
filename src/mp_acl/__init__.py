"""
mp_acl – in-memory access control lists.

Import path convention::

    from mp_acl import MemoryAcl, Decision
    from mp_acl.errors import ConfigurationError
    from mp_acl.predicates import Param, Predicate
    from mp_acl.events import AclEvent, AclEventsManager
"""

from mp_acl.engine import MemoryAcl
from mp_acl.errors import ConfigurationError
from mp_acl.events import AclEvent, AclEventsManager
from mp_acl.model import WILDCARD, Decision, Resource, ResourceAware, Role, RoleAware
from mp_acl.predicates import Param, Predicate

__version__ = "0.1.0"
__all__ = [
    "AclEvent",
    "AclEventsManager",
    "ConfigurationError",
    "Decision",
    "MemoryAcl",
    "Param",
    "Predicate",
    "Resource",
    "ResourceAware",
    "Role",
    "RoleAware",
    "WILDCARD",
    "__version__",
]
