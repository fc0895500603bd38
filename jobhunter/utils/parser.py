"""Utility functions for parsing job data from scraped text."""

import logging
import math
import re
from typing import Optional

from ..models import ExperienceRange, LocationType

logger = logging.getLogger(__name__)

# "3-5 years", "5+ years", "10 to 15 Years"; every digit group is a candidate
EXPERIENCE_PATTERN = re.compile(r"(\d*)(?:\D|^)(\d+)\+?\s+(years?)", re.IGNORECASE)


def extract_experience_range(text: str) -> ExperienceRange:
    """Extract the overall years-of-experience envelope from text.

    This is a heuristic: every number attached to "year(s)" anywhere in the
    text counts, and the smallest and largest win. A description asking for
    "3-5 years" plus "7+ years" of some tool yields 3-7.

    Handles formats like:
    - 3-5 years of experience
    - 5+ years
    - minimum 2 years

    Args:
        text: Text containing experience information

    Returns:
        ExperienceRange; max_years is only set when it differs from min_years
    """
    if not text:
        return ExperienceRange()

    min_years: Optional[int] = None
    max_years: Optional[int] = None

    for match in EXPERIENCE_PATTERN.finditer(text):
        for group in match.groups():
            if not group or not group.isdigit():
                continue
            years = int(group)
            if min_years is None or years < min_years:
                min_years = years
            if max_years is None or years > max_years:
                max_years = years

    if min_years is None:
        return ExperienceRange()

    logger.debug(f"Experience envelope: {min_years}-{max_years}")
    if max_years == min_years:
        return ExperienceRange(min_years=min_years)
    return ExperienceRange(min_years=min_years, max_years=max_years)


def months_to_years(months: Optional[int]) -> Optional[int]:
    """Convert months of experience to whole years, rounding halves up."""
    if months is None:
        return None
    return math.floor(months / 12 + 0.5)


def normalize_list(text: str) -> str:
    """Canonicalize a comma-separated list ("  python, sql,Go " -> "Python, Sql, Go").

    Only the first letter of each entry is uppercased. Empty entries are kept
    as empty segments.
    """
    if text is None:
        return ""
    entries = []
    for entry in text.split(","):
        entry = entry.strip()
        entries.append(entry[:1].upper() + entry[1:])
    return ", ".join(entries)


def format_location(
    city: Optional[str],
    region: Optional[str],
    country: Optional[str],
) -> str:
    """Join the non-blank location parts as "City, Region, Country"."""
    parts = [part.strip() for part in (city, region, country) if part and part.strip()]
    return ", ".join(parts)


def detect_location_type(description: str) -> LocationType:
    """Guess the workplace type from a job description.

    Any mention of "remote" wins over "hybrid"; everything else is on-site.
    """
    text_lower = (description or "").lower()
    if "remote" in text_lower:
        return LocationType.REMOTE
    if "hybrid" in text_lower:
        return LocationType.HYBRID
    return LocationType.ONSITE


def normalize_workplace_type(raw: Optional[str]) -> LocationType:
    """Map an API workplace type ("on-site", "remote", "hybrid") to LocationType."""
    if not raw or not raw.strip():
        return LocationType.UNKNOWN

    label = raw.strip().replace("-", "")
    label = label[:1].upper() + label[1:].lower()
    try:
        return LocationType(label)
    except ValueError:
        logger.warning(f"Unknown workplace type {raw!r}, using Unknown")
        return LocationType.UNKNOWN


def clean_text(text: str) -> str:
    """Clean and normalize text content.

    Args:
        text: Raw text

    Returns:
        Cleaned text
    """
    if not text:
        return ""

    # Remove excessive whitespace
    text = re.sub(r"\s+", " ", text)

    # Remove common markdown artifacts
    text = re.sub(r"\[([^\]]+)\]\([^)]+\)", r"\1", text)  # [text](url) -> text
    text = re.sub(r"[*_]{1,2}([^*_]+)[*_]{1,2}", r"\1", text)  # **text** -> text

    return text.strip()
