"""Unit tests for the pre-write validators.

Run with: pytest tests/test_validation.py -v
"""

from dataclasses import replace

import pytest
from asgiref.sync import async_to_sync

from events.domain import Booking, BookingId, EventId
from events.domain.errors import (
    BookingEventNotFoundError,
    InvalidDateError,
    InvalidEmailError,
    InvalidEventError,
    InvalidTimeError,
)
from events.domain.validation import prepare_event
from events.services import validate_booking
from tests.fakes import BASE_TIME, event_payload


class TestPrepareEvent:
    """Tests for the event record validator."""

    def test_normalizes_new_event(self):
        fields = prepare_event(event_payload(title="  Cloud Native Summit  ", date="Nov 5, 2026"))

        assert fields["title"] == "Cloud Native Summit"
        assert fields["slug"] == "cloud-native-summit"
        assert fields["date"] == "2026-11-05"
        assert fields["time"] == "09:30"
        assert fields["agenda"] == ["Keynote", "Workshops", "Closing panel"]

    def test_trims_array_items_and_drops_duplicate_tags(self):
        fields = prepare_event(event_payload(tags=[" ai ", "cloud", "ai"], agenda=[" Intro "]))

        assert fields["tags"] == ["ai", "cloud"]
        assert fields["agenda"] == ["Intro"]

    @pytest.mark.parametrize("field", ["title", "venue", "date", "time", "organizer"])
    def test_missing_string_field(self, field):
        payload = event_payload()
        del payload[field]

        with pytest.raises(InvalidEventError, match=f'"{field}"'):
            prepare_event(payload)

    @pytest.mark.parametrize("value", ["", "   ", 12, None])
    def test_blank_or_non_string_field(self, value):
        with pytest.raises(InvalidEventError, match='"description"'):
            prepare_event(event_payload(description=value))

    @pytest.mark.parametrize("value", [[], ["ok", " "], ["ok", 3], "cloud", None])
    def test_bad_array_field(self, value):
        with pytest.raises(InvalidEventError, match='"tags" must be a non-empty array'):
            prepare_event(event_payload(tags=value))

    def test_string_fields_checked_before_array_fields(self):
        with pytest.raises(InvalidEventError, match='"mode"'):
            prepare_event(event_payload(mode="", agenda=[]))

    def test_title_without_slug_characters_is_rejected(self):
        with pytest.raises(InvalidEventError, match="at least one letter or digit"):
            prepare_event(event_payload(title="!!!"))

    def test_bad_date(self):
        with pytest.raises(InvalidDateError):
            prepare_event(event_payload(date="next tuesday-ish"))

    def test_bad_time(self):
        with pytest.raises(InvalidTimeError):
            prepare_event(event_payload(time="13pm"))

    def test_keeps_slug_when_title_unchanged(self, create_event):
        current = replace(create_event(), slug="hand-picked-slug")

        fields = prepare_event(event_payload(venue="Pier 48"), previous=current)

        assert fields["slug"] == "hand-picked-slug"
        assert fields["venue"] == "Pier 48"

    def test_regenerates_slug_when_title_changes(self, create_event):
        current = create_event()

        fields = prepare_event(event_payload(title="Cloud Native Summit 2027"), previous=current)

        assert fields["slug"] == "cloud-native-summit-2027"

    def test_regenerates_slug_when_previous_has_none(self, create_event):
        current = replace(create_event(), slug="")

        fields = prepare_event(event_payload(), previous=current)

        assert fields["slug"] == "cloud-native-summit"


class TestValidateBooking:
    """Tests for the booking record validator."""

    def test_normalizes_email_for_existing_event(self, create_event, event_store):
        event = create_event()

        email = async_to_sync(validate_booking)(event.id, "  USER@Example.com ", event_store)

        assert email == "user@example.com"

    def test_rejects_unknown_event(self, event_store):
        with pytest.raises(BookingEventNotFoundError):
            async_to_sync(validate_booking)(
                EventId(value="65f1c2a4e13b2a7d9c0b1234"), "user@example.com", event_store
            )

    def test_rejects_bad_email_before_store_access(self, event_store):
        with pytest.raises(InvalidEmailError):
            async_to_sync(validate_booking)(
                EventId(value="65f1c2a4e13b2a7d9c0b1234"), "not-an-email", event_store
            )

    def test_skips_lookup_when_event_reference_unchanged(self, event_store):
        event_id = EventId(value="65f1c2a4e13b2a7d9c0b1234")
        previous = Booking(
            id=BookingId(value="65f1c2a4e13b2a7d9c0b9999"),
            event_id=event_id,
            email="old@example.com",
            created_at=BASE_TIME,
            updated_at=BASE_TIME,
        )

        email = async_to_sync(validate_booking)(
            event_id, "New@Example.com", event_store, previous=previous
        )

        assert email == "new@example.com"

    def test_checks_lookup_when_event_reference_changes(self, create_event, event_store):
        event = create_event()
        previous = Booking(
            id=BookingId(value="65f1c2a4e13b2a7d9c0b9999"),
            event_id=event.id,
            email="old@example.com",
            created_at=BASE_TIME,
            updated_at=BASE_TIME,
        )

        with pytest.raises(BookingEventNotFoundError):
            async_to_sync(validate_booking)(
                EventId(value="65f1c2a4e13b2a7d9c0b1234"),
                "old@example.com",
                event_store,
                previous=previous,
            )
