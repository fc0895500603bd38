"""Date parsing for job postings: ISO timestamps and "3 days ago" phrases."""

import logging
import re
from datetime import date, datetime, time, timezone
from typing import Optional

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

RELATIVE_PATTERN = re.compile(
    r"\b(\d+|an?|one)\s+(minute|hour|day|week|month|year)s?\s+ago\b",
    re.IGNORECASE,
)

SAME_DAY_PATTERN = re.compile(
    r"\b(just now|today|moments? ago|(?:a )?few seconds ago|\d+\s+seconds? ago)\b",
    re.IGNORECASE,
)

# Extended-format date and time of day; date-only and compact forms are rejected
ISO_TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}")

YESTERDAY_PATTERN = re.compile(r"\byesterday\b", re.IGNORECASE)

WORD_QUANTITIES = {"a": 1, "an": 1, "one": 1}


class InvalidDateError(ValueError):
    """Raised when a machine-generated timestamp is malformed."""
    pass


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_iso_date(text: str) -> date:
    """Parse an ISO-8601/RFC-3339 timestamp into its UTC calendar date.

    A time of day is required. Timestamps without an offset are taken as UTC.

    Raises:
        InvalidDateError: If the text is not a valid ISO-8601 timestamp
    """
    if not isinstance(text, str) or not ISO_TIMESTAMP_PATTERN.match(text):
        raise InvalidDateError(f"Invalid ISO timestamp: {text!r}")
    try:
        parsed = isoparse(text)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(f"Invalid ISO timestamp: {text!r}") from e
    return _as_utc(parsed).date()


def parse_relative_date(phrase: str, now: Optional[datetime] = None) -> Optional[date]:
    """Resolve a relative posted-date phrase against an anchor time.

    Handles formats like:
    - 3 days ago / 1 day ago / a day ago
    - 2 weeks ago, 1 month ago, 5 hours ago
    - yesterday
    - just now / today

    Args:
        phrase: Phrase scraped from the page
        now: Anchor time; defaults to the current UTC time. Naive values are UTC.

    Returns:
        The UTC calendar date, or None if the phrase is not recognized
    """
    if not phrase:
        return None

    anchor = _as_utc(now) if now is not None else datetime.now(timezone.utc)

    match = RELATIVE_PATTERN.search(phrase)
    if match:
        raw_quantity = match.group(1).lower()
        unit = match.group(2).lower()
        try:
            quantity = WORD_QUANTITIES.get(raw_quantity) or int(raw_quantity)
            return (anchor - relativedelta(**{f"{unit}s": quantity})).date()
        except (ValueError, OverflowError) as e:
            logger.debug(f"Relative date out of range: {phrase!r}: {e}")
            return None

    if YESTERDAY_PATTERN.search(phrase):
        return (anchor - relativedelta(days=1)).date()

    if SAME_DAY_PATTERN.search(phrase):
        return anchor.date()

    logger.debug(f"Unrecognized relative date phrase: {phrase!r}")
    return None


def date_to_timestamp(value: date) -> int:
    """Epoch seconds of midnight UTC on the given date."""
    return int(datetime.combine(value, time.min, tzinfo=timezone.utc).timestamp())


def timestamp_to_date(timestamp: Optional[int]) -> Optional[date]:
    """UTC calendar date of an epoch timestamp."""
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).date()
