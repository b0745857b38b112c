"""Testing generators – Hypothesis strategies."""
from mp_acl.testing.generators.strategies import inheritance_edges_strategy, role_names_strategy

__all__ = ["inheritance_edges_strategy", "role_names_strategy"]
