"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from events.domain import Booking, Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    async def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    async def get_event_by_slug(self, slug: str) -> Event | None:
        """Return the event with exactly this slug, or None if not found."""
        ...

    @abstractmethod
    async def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    async def find_events_with_any_tag(
        self, tags: Sequence[str], exclude_id: EventId
    ) -> list[Event]:
        """Return events sharing at least one tag, excluding ``exclude_id``."""
        ...

    @abstractmethod
    async def insert_event(self, fields: Mapping[str, Any]) -> Event:
        """Insert a validated event.

        Raises:
            DuplicateSlugError: If the slug is already taken.
        """
        ...

    @abstractmethod
    async def update_event(self, event_id: EventId, fields: Mapping[str, Any]) -> Event | None:
        """Replace the fields of an event, or return None if it is gone.

        Raises:
            DuplicateSlugError: If the new slug is already taken.
        """
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    async def insert_booking(self, event_id: EventId, email: str) -> Booking:
        """Insert a validated booking."""
        ...
