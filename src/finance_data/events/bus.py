"""In-process bus notifying subscribers of completed data writes.

Handlers are called synchronously, in subscription order, on the posting
thread. Posts are serialised so every subscriber sees the events of a given
publisher in the order they were posted. An event posted from inside a
handler is queued and delivered once the current event has reached every
subscriber.

INVARIANT: Subscriber failures are logged, never raised to the publisher.
"""

import logging
import threading
from collections import deque
from collections.abc import Callable

from finance_data.domain.events import DataWriteEvent

logger = logging.getLogger(__name__)

# Type alias for write event handlers.
WriteEventHandler = Callable[[DataWriteEvent], None]


class EventBusClosedError(RuntimeError):
    """Raised when subscribing to a bus that has been closed."""

    pass


class Subscription:
    """Handle returned by ``DataWriteEventBus.subscribe``."""

    def __init__(self, bus: "DataWriteEventBus", handler: WriteEventHandler) -> None:
        self._bus = bus
        self.handler = handler

    def cancel(self) -> None:
        """Detach the handler from the bus. Safe to call more than once."""
        self._bus.unsubscribe(self.handler)


class DataWriteEventBus:
    """Multi-subscriber publish mechanism for data write events.

    Constructed once per process and passed to every repository that writes.
    """

    def __init__(self) -> None:
        self._handlers: list[WriteEventHandler] = []
        self._lock = threading.RLock()
        self._closed = False
        self._pending: deque[DataWriteEvent] = deque()
        self._delivering = False

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._handlers)

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, handler: WriteEventHandler) -> Subscription:
        """Attach a handler that receives every event posted from now on.

        Raises:
            EventBusClosedError: If the bus has been closed.
        """
        with self._lock:
            if self._closed:
                raise EventBusClosedError("Cannot subscribe to a closed event bus")
            self._handlers.append(handler)
        return Subscription(self, handler)

    def unsubscribe(self, handler: WriteEventHandler) -> None:
        """Detach a handler. Unknown handlers are ignored."""
        with self._lock:
            if handler in self._handlers:
                self._handlers.remove(handler)

    def post(self, event: DataWriteEvent) -> None:
        """Deliver an event to every current subscriber."""
        with self._lock:
            if self._closed:
                logger.warning(
                    "Dropping %s posted after event bus was closed",
                    type(event).__name__,
                )
                return

            self._pending.append(event)
            # Re-entrant post from a handler; the outer call delivers it.
            if self._delivering:
                return

            self._delivering = True
            try:
                while self._pending:
                    self._deliver(self._pending.popleft())
            finally:
                self._delivering = False

    def _deliver(self, event: DataWriteEvent) -> None:
        """Call every current handler with one event."""
        handlers = list(self._handlers)
        logger.debug(
            "Posting %s to %d subscribers", type(event).__name__, len(handlers)
        )
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Write event handler %r failed on %s",
                    handler,
                    type(event).__name__,
                )

    def close(self) -> None:
        """Detach every subscriber and refuse new subscriptions."""
        with self._lock:
            self._closed = True
            self._handlers.clear()
            self._pending.clear()
