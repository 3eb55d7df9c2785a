"""Pytest configuration and shared fixtures."""

import pytest
from asgiref.sync import async_to_sync
from rest_framework.test import APIClient

from events.handlers.views import EventAPIView
from events.services import BookingService, EventService
from tests.fakes import InMemoryBookingStore, InMemoryEventStore, event_payload


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def event_service(event_store) -> EventService:
    return EventService(event_store)


@pytest.fixture
def booking_service(event_store, booking_store) -> BookingService:
    return BookingService(event_store, booking_store)


@pytest.fixture
def wired_views(monkeypatch, event_service, booking_service):
    """Point the HTTP handlers at the in-memory services."""
    monkeypatch.setattr(EventAPIView, "event_service_factory", staticmethod(lambda: event_service))
    monkeypatch.setattr(EventAPIView, "booking_service_factory", staticmethod(lambda: booking_service))


@pytest.fixture
def create_event(event_service):
    def _create(**overrides):
        return async_to_sync(event_service.create_event)(event_payload(**overrides))

    return _create
