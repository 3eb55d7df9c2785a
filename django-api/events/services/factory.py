"""Builds services wired to the process-wide MongoDB connection."""

from django.apps import apps

from events.services.booking_service import BookingService
from events.services.event_service import EventService
from events.stores.mongo_store import MongoBookingStore, MongoEventStore


def _connections():
    return apps.get_app_config("events").connections


def build_event_service() -> EventService:
    return EventService(MongoEventStore(_connections()))


def build_booking_service() -> BookingService:
    connections = _connections()
    return BookingService(MongoEventStore(connections), MongoBookingStore(connections))
