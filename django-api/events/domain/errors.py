"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_SLUG = "MISSING_SLUG"
    INVALID_SLUG_FORMAT = "INVALID_SLUG_FORMAT"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT = "INVALID_EVENT"
    INVALID_DATE = "INVALID_DATE"
    INVALID_TIME = "INVALID_TIME"
    INVALID_EMAIL = "INVALID_EMAIL"
    BOOKING_EVENT_NOT_FOUND = "BOOKING_EVENT_NOT_FOUND"
    DUPLICATE_SLUG = "DUPLICATE_SLUG"
    INVALID_REQUEST_BODY = "INVALID_REQUEST_BODY"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class MissingSlugError(DomainError):
    """Raised when no slug was supplied."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_SLUG,
            message="Slug parameter is required.",
        )


class InvalidSlugFormatError(DomainError):
    """Raised when a slug is blank or contains disallowed characters."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_SLUG_FORMAT, message=message)


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found.",
        )


class InvalidEventError(DomainError):
    """Raised when an event record breaks a field rule."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_EVENT, message=message)


class InvalidDateError(DomainError):
    """Raised when an event date cannot be parsed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid date format. Date must be a recognizable calendar date.",
        )


class InvalidTimeError(DomainError):
    """Raised when an event time is not a 24h or 12h clock value."""

    def __init__(self, message: str = 'Invalid time format. Use 24h "HH:MM" or 12h "H:MM am/pm".') -> None:
        super().__init__(code=ErrorCode.INVALID_TIME, message=message)


class InvalidEmailError(DomainError):
    """Raised when a booking email is missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_EMAIL, message=message)


class BookingEventNotFoundError(DomainError):
    """Raised when a booking references an event that does not exist."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_EVENT_NOT_FOUND,
            message="Referenced event does not exist.",
        )


class DuplicateSlugError(DomainError):
    """Raised when the store rejects a write because the slug is taken."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SLUG,
            message=f'An event with slug "{slug}" already exists.',
        )


class InvalidRequestBodyError(DomainError):
    """Raised when a request body is not a JSON object."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_REQUEST_BODY,
            message="Request body must be a JSON object.",
        )
