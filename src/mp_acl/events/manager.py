"""Events – synchronous, priority-ordered listener dispatch.

Components that want to be observed fire named events such as
``"acl:beforeCheckAccess"``.  A listener may be attached to the full name or
to the event *type* (the part before the colon, ``"acl"``), and is either a
callable taking the :class:`Event` or an object exposing a method named after
the event action in snake case (``before_check_access``).

Example::

    events = AclEventsManager()
    events.attach("acl:beforeCheckAccess", lambda event: event.source.active_role != "banned")
    acl = MemoryAcl(events_manager=events)
"""
from __future__ import annotations

import dataclasses
import re
from enum import Enum
from typing import Any, Callable

from mp_acl.observability.logging import get_logger

_log = get_logger(__name__)

DEFAULT_PRIORITY = 100

Listener = Callable[["Event"], Any]

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


class AclEvent(str, Enum):
    """Events fired by :class:`~mp_acl.engine.MemoryAcl`."""

    BEFORE_CHECK_ACCESS = "acl:beforeCheckAccess"
    AFTER_CHECK_ACCESS = "acl:afterCheckAccess"


@dataclasses.dataclass
class Event:
    """A fired event, passed to every listener."""

    name: str
    source: Any
    data: Any = None
    cancelable: bool = True
    stopped: bool = False

    @property
    def type(self) -> str:
        return self.name.partition(":")[0]

    @property
    def action(self) -> str:
        return self.name.partition(":")[2]

    def stop(self) -> None:
        """Stop propagation to the remaining listeners."""
        if not self.cancelable:
            raise RuntimeError(f"Event '{self.name}' cannot be stopped")
        self.stopped = True


@dataclasses.dataclass(order=True)
class _Subscription:
    sort_key: tuple[int, int]
    listener: Any = dataclasses.field(compare=False)


def _name(event: AclEvent | str) -> str:
    return event.value if isinstance(event, AclEvent) else event


class AclEventsManager:
    """Register listeners and dispatch events to them in priority order.

    Higher priorities run first; listeners with equal priority run in the
    order they were attached.
    """

    def __init__(self, *, collect_responses: bool = False) -> None:
        self._subscriptions: dict[str, list[_Subscription]] = {}
        self._sequence = 0
        self._collect = collect_responses
        self._responses: list[Any] = []

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def attach(
        self,
        event: AclEvent | str,
        listener: Listener,
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Attach *listener* to a full event name or to an event type."""
        self._sequence += 1
        subs = self._subscriptions.setdefault(_name(event), [])
        subs.append(_Subscription((-priority, self._sequence), listener))
        subs.sort()

    def detach(self, event: AclEvent | str, listener: Listener) -> None:
        """Detach *listener* from *event* (no-op if it was not attached)."""
        name = _name(event)
        subs = self._subscriptions.get(name)
        if subs:
            self._subscriptions[name] = [s for s in subs if s.listener is not listener]

    def detach_all(self, event: AclEvent | str | None = None) -> None:
        """Detach every listener, or only those attached to *event*."""
        if event is None:
            self._subscriptions.clear()
        else:
            self._subscriptions.pop(_name(event), None)

    def listeners(self, event: AclEvent | str) -> list[Listener]:
        """Return the listeners attached to *event*, in dispatch order."""
        return [s.listener for s in self._subscriptions.get(_name(event), [])]

    def has_listeners(self, event: AclEvent | str) -> bool:
        return bool(self._subscriptions.get(_name(event)))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def fire(
        self,
        event: AclEvent | str,
        source: Any,
        data: Any = None,
        *,
        cancelable: bool = True,
    ) -> Any:
        """Fire *event* and return the last listener's response.

        Type-level listeners run before listeners attached to the full name.
        A listener returning ``False`` on a cancelable event stops the
        propagation and ``fire`` returns ``False``.
        """
        name = _name(event)
        if ":" not in name:
            raise ValueError(f"Event name '{name}' must have the form 'type:action'")
        if self._collect:
            self._responses = []

        fired = Event(name=name, source=source, data=data, cancelable=cancelable)
        status: Any = None
        for key in (fired.type, name):
            for sub in list(self._subscriptions.get(key, [])):
                status = self._call(sub.listener, fired)
                if self._collect:
                    self._responses.append(status)
                if cancelable and status is False:
                    fired.stopped = True
                if fired.stopped:
                    _log.debug("acl.event_stopped", event_name=name)
                    return False
        return status

    def responses(self) -> list[Any]:
        """Responses of the last :meth:`fire` (requires ``collect_responses``)."""
        return list(self._responses)

    @staticmethod
    def _call(listener: Listener, event: Event) -> Any:
        method = getattr(listener, _CAMEL.sub("_", event.action).lower(), None)
        if callable(method):
            return method(event)
        if callable(listener):
            return listener(event)
        raise TypeError(
            f"Listener {listener!r} is not callable and has no "
            f"'{_CAMEL.sub('_', event.action).lower()}' method"
        )


__all__ = ["AclEvent", "AclEventsManager", "DEFAULT_PRIORITY", "Event", "Listener"]
