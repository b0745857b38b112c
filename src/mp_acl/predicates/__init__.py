"""Predicates – callables gating a rule beyond its static decision."""
from mp_acl.predicates.descriptor import Param, Predicate, as_predicate

__all__ = ["Param", "Predicate", "as_predicate"]
