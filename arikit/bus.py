"""An in-process event bus distributing ARI events to keyed subscriptions."""

from __future__ import annotations

import threading
from collections import deque
from typing import Iterator, Optional

from arikit.events import EventData, EventTypes
from arikit.key import Key

SUBSCRIPTION_EVENT_BUFFER_SIZE = 100


class Subscription:
    """A buffered stream of events from a bus; events beyond the buffer are dropped."""

    def __init__(self, bus: Optional["Bus"], key: Optional[Key], event_types: tuple[str, ...]) -> None:
        self.key = key
        self.event_types = tuple(event_types)
        self._bus = bus
        self._events: deque[EventData] = deque()
        self._cond = threading.Condition()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _deliver(self, event: EventData) -> None:
        with self._cond:
            if self._closed or len(self._events) >= SUBSCRIPTION_EVENT_BUFFER_SIZE:
                return
            self._events.append(event)
            self._cond.notify()

    def get(self, timeout: Optional[float] = None) -> Optional[EventData]:
        """Next event; None once cancelled and drained; TimeoutError if none arrives in time."""
        with self._cond:
            if not self._cond.wait_for(lambda: self._events or self._closed, timeout):
                raise TimeoutError("no event received")
            if self._events:
                return self._events.popleft()
            return None

    def __iter__(self) -> Iterator[EventData]:
        while (event := self.get()) is not None:
            yield event

    def cancel(self) -> None:
        """Stop the subscription and detach it from its bus; repeated calls do nothing."""
        with self._cond:
            if self._closed:
                return
            self._closed = True
            self._cond.notify_all()
        if self._bus is not None:
            self._bus._remove(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc: object) -> None:
        self.cancel()


class Bus:
    """Receives events and forwards them to matching subscriptions without blocking."""

    def __init__(self) -> None:
        self._subs: list[Subscription] = []
        self._lock = threading.Lock()
        self._closed = False

    def __len__(self) -> int:
        with self._lock:
            return len(self._subs)

    def close(self) -> None:
        """Cancel every subscription; repeated calls do nothing."""
        if self._closed:
            return
        self._closed = True
        with self._lock:
            subs = list(self._subs)
        for sub in subs:
            sub.cancel()

    def send(self, event: EventData) -> None:
        """Deliver the event to each subscription whose key matches one of its keys."""
        with self._lock:
            subs = list(self._subs)
        keys = event.keys()
        for sub in subs:
            if not any(sub.key is None or sub.key.match(k) for k in keys):
                continue
            for topic in sub.event_types:
                if topic == event.type or topic == EventTypes.ALL:
                    sub._deliver(event)

    def subscribe(self, key: Optional[Key], *event_types: str) -> Subscription:
        """Subscribe to the given event types for entities matching ``key`` (None matches all)."""
        sub = Subscription(self, key, event_types)
        with self._lock:
            self._subs.append(sub)
        return sub

    def _remove(self, sub: Subscription) -> None:
        with self._lock:
            try:
                self._subs.remove(sub)
            except ValueError:
                pass