"""Testing support – fakes, fixtures and Hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_acl.testing.fixtures"]
"""

from mp_acl.testing.fakes import RecordedCheck, RecordingListener
from mp_acl.testing.generators import inheritance_edges_strategy, role_names_strategy

__all__ = [
    "RecordedCheck",
    "RecordingListener",
    "inheritance_edges_strategy",
    "role_names_strategy",
]
