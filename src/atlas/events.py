"""EventBus — pub/sub channel between the layer store and its consumers.

The upload handler mutates the store; the map view and the smart help
panel learn about it by draining their subscription queue. Every event
carries an immutable snapshot, never a live handle on store state.
"""

from __future__ import annotations

import queue
import threading

LAYERS_CHANGED = "layers_changed"


class EventBus:
    """Thread-safe pub/sub where each subscriber owns a bounded queue."""

    def __init__(self, maxsize: int = 100) -> None:
        self._lock = threading.Lock()
        self._maxsize = maxsize
        self._subscribers: list[queue.Queue] = []

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribe(self) -> queue.Queue:
        """Subscribe to events. Returns a Queue that receives every event."""
        q: queue.Queue = queue.Queue(maxsize=self._maxsize)
        with self._lock:
            self._subscribers.append(q)
        return q

    def unsubscribe(self, q: queue.Queue) -> None:
        with self._lock:
            try:
                self._subscribers.remove(q)
            except ValueError:
                pass

    def publish(self, event_type: str, data: dict | None = None) -> None:
        """Deliver an event to every subscriber without blocking."""
        msg = {"type": event_type}
        if data is not None:
            msg["data"] = data
        with self._lock:
            for q in self._subscribers:
                self._offer(q, msg)

    @staticmethod
    def _offer(q: queue.Queue, msg: dict) -> None:
        # A full queue gives up its stalest snapshot for the new one.
        while True:
            try:
                q.put_nowait(msg)
                return
            except queue.Full:
                try:
                    q.get_nowait()
                except queue.Empty:
                    continue

    @staticmethod
    def drain(q: queue.Queue) -> list[dict]:
        """Pop every pending message from a subscription queue, oldest first."""
        messages = []
        while True:
            try:
                messages.append(q.get_nowait())
            except queue.Empty:
                return messages
