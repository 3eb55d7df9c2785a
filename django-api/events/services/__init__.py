from events.services.booking_service import BookingService, validate_booking
from events.services.event_service import EventService

__all__ = ["EventService", "BookingService", "validate_booking"]
