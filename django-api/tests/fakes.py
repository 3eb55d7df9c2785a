"""In-memory stores implementing the store interfaces."""

from collections.abc import Mapping, Sequence
from datetime import datetime, timedelta, timezone
from typing import Any

from bson import ObjectId

from events.domain import Booking, BookingId, Event, EventId
from events.domain.errors import DuplicateSlugError
from events.stores.interfaces import BookingStore, EventStore

BASE_TIME = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)


class InMemoryEventStore(EventStore):
    def __init__(self) -> None:
        self.events: dict[str, Event] = {}
        self._ticks = 0

    def _now(self) -> datetime:
        self._ticks += 1
        return BASE_TIME + timedelta(minutes=self._ticks)

    def _slug_taken(self, slug: str, ignore_id: str | None = None) -> bool:
        return any(e.slug == slug and e.id.value != ignore_id for e in self.events.values())

    async def list_events(self) -> list[Event]:
        return sorted(self.events.values(), key=lambda e: e.created_at, reverse=True)

    async def get_event_by_slug(self, slug: str) -> Event | None:
        return next((e for e in self.events.values() if e.slug == slug), None)

    async def event_exists(self, event_id: EventId) -> bool:
        return event_id.value in self.events

    async def find_events_with_any_tag(
        self, tags: Sequence[str], exclude_id: EventId
    ) -> list[Event]:
        wanted = set(tags)
        return [
            e
            for e in await self.list_events()
            if e.id != exclude_id and wanted.intersection(e.tags)
        ]

    async def insert_event(self, fields: Mapping[str, Any]) -> Event:
        if self._slug_taken(fields["slug"]):
            raise DuplicateSlugError(fields["slug"])
        now = self._now()
        event = Event(
            id=EventId(value=str(ObjectId())),
            created_at=now,
            updated_at=now,
            **{**fields, "agenda": tuple(fields["agenda"]), "tags": tuple(fields["tags"])},
        )
        self.events[event.id.value] = event
        return event

    async def update_event(self, event_id: EventId, fields: Mapping[str, Any]) -> Event | None:
        current = self.events.get(event_id.value)
        if current is None:
            return None
        if self._slug_taken(fields["slug"], ignore_id=event_id.value):
            raise DuplicateSlugError(fields["slug"])
        event = Event(
            id=current.id,
            created_at=current.created_at,
            updated_at=self._now(),
            **{**fields, "agenda": tuple(fields["agenda"]), "tags": tuple(fields["tags"])},
        )
        self.events[event_id.value] = event
        return event


class InMemoryBookingStore(BookingStore):
    def __init__(self) -> None:
        self.bookings: list[Booking] = []

    async def insert_booking(self, event_id: EventId, email: str) -> Booking:
        now = BASE_TIME
        booking = Booking(
            id=BookingId(value=str(ObjectId())),
            event_id=event_id,
            email=email,
            created_at=now,
            updated_at=now,
        )
        self.bookings.append(booking)
        return booking


class BrokenEventStore(EventStore):
    """Every operation fails the way an unreachable database would."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or ConnectionError("connection refused")

    async def list_events(self):
        raise self.error

    async def get_event_by_slug(self, slug):
        raise self.error

    async def event_exists(self, event_id):
        raise self.error

    async def find_events_with_any_tag(self, tags, exclude_id):
        raise self.error

    async def insert_event(self, fields):
        raise self.error

    async def update_event(self, event_id, fields):
        raise self.error


def event_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "title": "Cloud Native Summit",
        "description": "A day of talks on running software in the cloud.",
        "overview": "Talks, workshops and networking.",
        "image": "/images/cloud-summit.png",
        "venue": "Moscone Center",
        "location": "San Francisco, CA",
        "date": "2026-11-05",
        "time": "9:30 am",
        "mode": "hybrid",
        "audience": "Developers",
        "organizer": "Cloud Guild",
        "agenda": ["Keynote", "Workshops", "Closing panel"],
        "tags": ["cloud", "devops"],
    }
    payload.update(overrides)
    return payload
