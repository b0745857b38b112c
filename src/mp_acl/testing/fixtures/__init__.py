"""Testing fixtures – pytest fixtures for ACL tests.

Enable them in your ``conftest.py``::

    pytest_plugins = ["mp_acl.testing.fixtures"]
"""
try:
    import pytest  # noqa: F401

    from mp_acl.testing.fixtures.acl import acl, events_manager, recording_listener

except ImportError:
    pass

__all__ = ["acl", "events_manager", "recording_listener"]
