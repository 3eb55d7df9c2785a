"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from typing import Self

from events.domain.errors import InvalidSlugFormatError, MissingSlugError

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Slug:
    """Lookup key for an event, as accepted from a request."""

    value: str

    def __post_init__(self) -> None:
        if not SLUG_PATTERN.match(self.value):
            raise InvalidSlugFormatError(
                "Slug may only contain lowercase letters, numbers, and hyphens."
            )

    @classmethod
    def from_raw(cls, raw: str | None) -> Self:
        """Trim and lowercase a raw slug token.

        Raises:
            MissingSlugError: If nothing was supplied.
            InvalidSlugFormatError: If the token is blank or has characters
                outside ``[a-z0-9-]``.
        """
        if not raw:
            raise MissingSlugError()
        slug = raw.strip().lower()
        if not slug:
            raise InvalidSlugFormatError("Slug parameter cannot be empty.")
        return cls(value=slug)

    def __str__(self) -> str:
        return self.value
