"""Testing fakes – in-memory doubles."""
from mp_acl.testing.fakes.events import RecordedCheck, RecordingListener

__all__ = ["RecordedCheck", "RecordingListener"]
