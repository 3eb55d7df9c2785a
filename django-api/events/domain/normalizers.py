"""Pure normalization helpers for event and booking fields."""

import re
from datetime import date, datetime, timezone

from django.utils.dateparse import parse_date, parse_datetime

from events.domain.errors import InvalidDateError, InvalidEmailError, InvalidTimeError

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_TIME_24H = re.compile(r"^([01]?[0-9]|2[0-3]):([0-5][0-9])$")
_TIME_12H = re.compile(r"^([0-9]{1,2})(?::([0-5][0-9]))?\s*(am|pm)$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Tried in order after the ISO parsers
DATE_FORMATS = (
    "%B %d, %Y",  # "March 5, 2026"
    "%b %d, %Y",  # "Mar 5, 2026"
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",  # "5 March 2026"
    "%d %b %Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%a, %d %b %Y",
)


def slugify(title: str) -> str:
    """Derive a URL-safe slug from a title.

    Runs of anything outside ``[a-z0-9]`` collapse to a single hyphen and
    edge hyphens are stripped. A title with no letters or digits gives "".
    """
    return _NON_ALNUM.sub("-", title.strip().lower()).strip("-")


def normalize_time(value: str) -> str:
    """Return ``value`` as a 24-hour ``HH:MM`` string.

    Accepts ``H:MM``/``HH:MM`` (00-23) and ``H[:MM] am|pm`` (1-12).

    Raises:
        InvalidTimeError: For anything else.
    """
    text = value.strip().lower()

    match = _TIME_24H.match(text)
    if match:
        return f"{int(match.group(1)):02d}:{match.group(2)}"

    match = _TIME_12H.match(text)
    if match:
        hour = int(match.group(1))
        minute = match.group(2) or "00"
        period = match.group(3)

        if hour < 1 or hour > 12:
            raise InvalidTimeError("Invalid 12-hour time format.")

        if period == "pm" and hour != 12:
            hour += 12
        elif period == "am" and hour == 12:
            hour = 0

        return f"{hour:02d}:{minute}"

    raise InvalidTimeError()


def _parse_iso(text: str) -> date | None:
    try:
        parsed = parse_datetime(text)
        if parsed is not None:
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone(timezone.utc)
            return parsed.date()
        return parse_date(text)
    except ValueError:
        # well formed but out of range, e.g. 2026-02-30
        return None


def normalize_date(value: str) -> str:
    """Return ``value`` as an ISO calendar date (``YYYY-MM-DD``).

    Raises:
        InvalidDateError: If no known format matches.
    """
    text = value.strip()

    parsed = _parse_iso(text)
    if parsed is not None:
        return parsed.isoformat()

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue

    raise InvalidDateError()


def normalize_email(value: object) -> str:
    """Trim and lowercase an email address, then check its shape.

    Raises:
        InvalidEmailError: If the value is not a non-empty ``local@domain.tld``.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidEmailError("Email is required and must be a non-empty string.")

    email = value.strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise InvalidEmailError("Email is not in a valid format.")
    return email
