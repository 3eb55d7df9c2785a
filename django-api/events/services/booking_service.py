"""Booking service - validates and records interest in an event."""

import logging

from events.domain import Booking, EventId
from events.domain.errors import BookingEventNotFoundError
from events.domain.normalizers import normalize_email
from events.services.event_service import EventService
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


async def validate_booking(
    event_id: EventId,
    email: object,
    events: EventStore,
    previous: Booking | None = None,
) -> str:
    """Pre-write gate for bookings. Returns the normalized email.

    The referenced event is only looked up for new bookings or when the
    booking moves to a different event.

    Raises:
        InvalidEmailError: If the email is missing or malformed.
        BookingEventNotFoundError: If the referenced event does not exist.
    """
    normalized = normalize_email(email)

    if previous is None or previous.event_id != event_id:
        if not await events.event_exists(event_id):
            raise BookingEventNotFoundError()

    return normalized


class BookingService:
    """Service for booking submissions."""

    def __init__(self, events: EventStore, bookings: BookingStore) -> None:
        self._events = events
        self._bookings = bookings

    async def create_booking(self, event_id: EventId, email: object) -> Booking:
        normalized = await validate_booking(event_id, email, self._events)
        booking = await self._bookings.insert_booking(event_id, normalized)
        logger.info("Booked %s for event %s", booking.id, event_id)
        return booking

    async def book_event(self, raw_slug: str | None, email: object) -> Booking:
        """Book the event behind ``raw_slug``.

        Raises:
            MissingSlugError, InvalidSlugFormatError, EventNotFoundError:
                If the slug does not resolve to an event.
            InvalidEmailError: If the email is missing or malformed.
        """
        event = await EventService(self._events).get_event_by_slug(raw_slug)
        return await self.create_booking(event.id, email)
