"""Write event publishing."""

from finance_data.events.bus import (
    DataWriteEventBus,
    EventBusClosedError,
    Subscription,
    WriteEventHandler,
)

__all__ = [
    "DataWriteEventBus",
    "EventBusClosedError",
    "Subscription",
    "WriteEventHandler",
]
