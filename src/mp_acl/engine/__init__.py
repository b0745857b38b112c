"""Engine – registry, inheritance graph, rule table and resolver."""
from mp_acl.engine.inheritance import InheritanceGraph
from mp_acl.engine.locking import ReadWriteLock
from mp_acl.engine.memory import MemoryAcl, PredicateLike
from mp_acl.engine.registry import Registry, access_names
from mp_acl.engine.resolver import AccessCheck, Resolver
from mp_acl.engine.rules import RuleTable

__all__ = [
    "AccessCheck",
    "InheritanceGraph",
    "MemoryAcl",
    "PredicateLike",
    "ReadWriteLock",
    "Registry",
    "Resolver",
    "RuleTable",
    "access_names",
]
