from events.stores.connection import ConnectionManager
from events.stores.interfaces import BookingStore, EventStore

__all__ = ["ConnectionManager", "EventStore", "BookingStore"]
