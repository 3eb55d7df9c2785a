"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details in production
"""

import functools
import io
import logging
from typing import Any

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.views import View
from rest_framework.exceptions import ParseError
from rest_framework.parsers import JSONParser

from events.domain.errors import DomainError, ErrorCode, InvalidRequestBodyError
from events.handlers.serializers import BookingSerializer, EventSerializer
from events.services.factory import build_booking_service, build_event_service

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

STATUS_BY_CODE = {
    ErrorCode.MISSING_SLUG: 400,
    ErrorCode.INVALID_SLUG_FORMAT: 400,
    ErrorCode.INVALID_EVENT: 400,
    ErrorCode.INVALID_DATE: 400,
    ErrorCode.INVALID_TIME: 400,
    ErrorCode.INVALID_EMAIL: 400,
    ErrorCode.INVALID_REQUEST_BODY: 400,
    ErrorCode.EVENT_NOT_FOUND: 404,
    ErrorCode.BOOKING_EVENT_NOT_FOUND: 409,
    ErrorCode.DUPLICATE_SLUG: 409,
}


def error_response(message: str, code: str, status: int, details: str | None = None) -> JsonResponse:
    body: dict[str, Any] = {"message": message, "error": code}
    if details is not None:
        body["details"] = details
    return JsonResponse(body, status=status)


def api_errors(failure_message: str):
    """Map domain errors to their status and anything else to a 500."""

    def decorator(handler):
        @functools.wraps(handler)
        async def wrapper(self, request: HttpRequest, *args, **kwargs) -> JsonResponse:
            try:
                return await handler(self, request, *args, **kwargs)
            except DomainError as exc:
                return error_response(exc.message, exc.code.value, STATUS_BY_CODE[exc.code])
            except Exception as exc:
                logger.exception("%s %s failed", request.method, request.path)
                details = str(exc) if settings.APP_ENV != "production" else None
                return error_response(failure_message, INTERNAL_SERVER_ERROR, 500, details)

        return wrapper

    return decorator


def read_json_object(request: HttpRequest) -> dict[str, Any]:
    try:
        data = JSONParser().parse(io.BytesIO(request.body))
    except ParseError as exc:
        raise InvalidRequestBodyError() from exc
    if not isinstance(data, dict):
        raise InvalidRequestBodyError()
    return data


# Route prefixes, never slugs
ROUTE_SEGMENTS = frozenset({"events", "event"})


def slug_from_request(request: HttpRequest, slug: str | None = None) -> str | None:
    """Pick the raw slug: route kwarg, then ``?slug=``, then the last path segment."""
    raw = slug if slug is not None else request.GET.get("slug")
    if not raw:
        segments = [segment for segment in request.path.split("/") if segment]
        if segments and segments[-1] not in ROUTE_SEGMENTS:
            raw = segments[-1]
    return raw


class EventAPIView(View):
    """Base view; services come from overridable factories."""

    event_service_factory = staticmethod(build_event_service)
    booking_service_factory = staticmethod(build_booking_service)


class EventListView(EventAPIView):
    """Handler for GET/POST /api/events"""

    @api_errors("Failed to fetch events.")
    async def get(self, request: HttpRequest) -> JsonResponse:
        events = await self.event_service_factory().list_events()
        return JsonResponse(
            {
                "message": "Events fetched successfully.",
                "events": EventSerializer(events, many=True).data,
            }
        )

    @api_errors("Failed to create event.")
    async def post(self, request: HttpRequest) -> JsonResponse:
        data = read_json_object(request)
        event = await self.event_service_factory().create_event(data)
        return JsonResponse(
            {"message": "Event created successfully.", "event": EventSerializer(event).data},
            status=201,
        )


class EventDetailView(EventAPIView):
    """Handler for GET/PATCH /api/events/{slug}"""

    @api_errors("Failed to fetch event.")
    async def get(self, request: HttpRequest, slug: str | None = None) -> JsonResponse:
        event = await self.event_service_factory().get_event_by_slug(
            slug_from_request(request, slug)
        )
        return JsonResponse(
            {"message": "Event fetched successfully.", "event": EventSerializer(event).data}
        )

    @api_errors("Failed to update event.")
    async def patch(self, request: HttpRequest, slug: str | None = None) -> JsonResponse:
        changes = read_json_object(request)
        event = await self.event_service_factory().update_event(
            slug_from_request(request, slug), changes
        )
        return JsonResponse(
            {"message": "Event updated successfully.", "event": EventSerializer(event).data}
        )


class SimilarEventListView(EventAPIView):
    """Handler for GET /api/events/{slug}/similar"""

    async def get(self, request: HttpRequest, slug: str) -> JsonResponse:
        events = await self.event_service_factory().get_similar_events(slug)
        return JsonResponse(
            {
                "message": "Similar events fetched successfully.",
                "events": EventSerializer(events, many=True).data,
            }
        )


class BookingCreateView(EventAPIView):
    """Handler for POST /api/events/{slug}/bookings"""

    @api_errors("Failed to create booking.")
    async def post(self, request: HttpRequest, slug: str) -> JsonResponse:
        data = read_json_object(request)
        booking = await self.booking_service_factory().book_event(slug, data.get("email"))
        return JsonResponse(
            {"message": "Booking created successfully.", "booking": BookingSerializer(booking).data},
            status=201,
        )
