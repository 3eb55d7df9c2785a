"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain import Event, Slug
from events.domain.errors import DomainError, EventNotFoundError
from events.domain.validation import prepare_event
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    async def list_events(self) -> list[Event]:
        """Return all events, newest first."""
        return await self._store.list_events()

    async def get_event_by_slug(self, raw_slug: str | None) -> Event:
        """Return an event by its slug.

        Raises:
            MissingSlugError: If no slug was given.
            InvalidSlugFormatError: If the slug is blank or malformed.
            EventNotFoundError: If the event does not exist.
        """
        slug = Slug.from_raw(raw_slug)
        event = await self._store.get_event_by_slug(slug.value)
        if event is None:
            raise EventNotFoundError()
        return event

    async def create_event(self, data: Mapping[str, Any]) -> Event:
        """Validate and insert a new event.

        Raises:
            InvalidEventError, InvalidDateError, InvalidTimeError: On bad input.
            DuplicateSlugError: If the derived slug is taken.
        """
        fields = prepare_event(data)
        event = await self._store.insert_event(fields)
        logger.info("Created event %s (%s)", event.slug, event.id)
        return event

    async def update_event(self, raw_slug: str | None, changes: Mapping[str, Any]) -> Event:
        """Apply ``changes`` to the event behind ``raw_slug``.

        The slug is only regenerated when the title changes.
        """
        current = await self.get_event_by_slug(raw_slug)

        merged: dict[str, Any] = {
            "title": current.title,
            "description": current.description,
            "overview": current.overview,
            "image": current.image,
            "venue": current.venue,
            "location": current.location,
            "date": current.date,
            "time": current.time,
            "mode": current.mode,
            "audience": current.audience,
            "organizer": current.organizer,
            "agenda": list(current.agenda),
            "tags": list(current.tags),
        }
        merged.update(changes)

        fields = prepare_event(merged, previous=current)
        event = await self._store.update_event(current.id, fields)
        if event is None:
            raise EventNotFoundError()
        logger.info("Updated event %s (%s)", event.slug, event.id)
        return event

    async def get_similar_events(self, raw_slug: str | None) -> list[Event]:
        """Return other events sharing at least one tag with this one.

        Best effort: never raises, returns [] on any failure.
        """
        try:
            event = await self.get_event_by_slug(raw_slug)
            if not event.tags:
                return []
            return await self._store.find_events_with_any_tag(event.tags, exclude_id=event.id)
        except DomainError as exc:
            logger.info("No similar events for %r: %s", raw_slug, exc)
            return []
        except Exception:
            logger.warning("Similar events lookup failed for %r", raw_slug, exc_info=True)
            return []
