"""Events – before/after check-access notifications."""
from mp_acl.events.manager import (
    DEFAULT_PRIORITY,
    AclEvent,
    AclEventsManager,
    Event,
    Listener,
)

__all__ = ["AclEvent", "AclEventsManager", "DEFAULT_PRIORITY", "Event", "Listener"]
