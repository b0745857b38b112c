"""conftest.py for benchmarks.

Silences engine debug logging during each benchmark so the timings measure
evaluation rather than log rendering, and provides a pre-built ACL.
"""

from __future__ import annotations

import logging

import pytest
import structlog

from mp_acl import Decision, MemoryAcl


@pytest.fixture(autouse=True)
def quiet_logging():
    """Drop structlog events below WARNING while benchmarks run."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()


@pytest.fixture(scope="session")
def layered_acl() -> MemoryAcl:
    """Ten roles in a single inheritance chain over twenty resources.

    ``role-9`` inherits from every other role; the only rules are on
    ``role-0`` so lookups for ``role-9`` walk the whole ancestor list.
    """
    acl = MemoryAcl(default_action=Decision.DENY)
    previous = None
    for i in range(10):
        acl.add_role(f"role-{i}", inherit_from=previous)
        previous = f"role-{i}"
    for r in range(20):
        acl.add_resource(f"resource-{r}", ["read", "write", "delete"])
        acl.allow("role-0", f"resource-{r}", "read")
    acl.allow("role-0", "*", "*")
    acl.freeze()
    return acl
