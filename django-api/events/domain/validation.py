"""Pre-write validation for event records.

``prepare_event`` is the single gate every insert and update goes through:
it either returns the complete, normalized field mapping to persist or
raises a domain error, in which case nothing is written.
"""

from collections.abc import Mapping
from typing import Any

from events.domain.errors import InvalidEventError
from events.domain.models import Event
from events.domain.normalizers import normalize_date, normalize_time, slugify

REQUIRED_STRING_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)

REQUIRED_ARRAY_FIELDS = ("agenda", "tags")


def _dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def prepare_event(data: Mapping[str, Any], previous: Event | None = None) -> dict[str, Any]:
    """Validate and normalize an event record before it is written.

    Args:
        data: Full set of event fields (for updates, the merged record).
        previous: The stored record being updated, or None for an insert.

    Returns:
        The fields to persist, including ``slug``.

    Raises:
        InvalidEventError: A required field is missing, blank, or the title
            yields an empty slug.
        InvalidDateError: The date cannot be parsed.
        InvalidTimeError: The time is not a recognizable clock value.
    """
    fields: dict[str, Any] = {}

    for name in REQUIRED_STRING_FIELDS:
        value = data.get(name)
        if not isinstance(value, str) or not value.strip():
            raise InvalidEventError(f'Field "{name}" is required and must be a non-empty string.')
        fields[name] = value.strip()

    for name in REQUIRED_ARRAY_FIELDS:
        value = data.get(name)
        if (
            not isinstance(value, (list, tuple))
            or not value
            or any(not isinstance(item, str) or not item.strip() for item in value)
        ):
            raise InvalidEventError(f'Field "{name}" must be a non-empty array of strings.')
        fields[name] = [item.strip() for item in value]

    fields["tags"] = _dedupe(fields["tags"])

    if previous is None or not previous.slug or previous.title != fields["title"]:
        slug = slugify(fields["title"])
        if not slug:
            raise InvalidEventError('Field "title" must contain at least one letter or digit.')
        fields["slug"] = slug
    else:
        fields["slug"] = previous.slug

    fields["date"] = normalize_date(fields["date"])
    fields["time"] = normalize_time(fields["time"])

    return fields
