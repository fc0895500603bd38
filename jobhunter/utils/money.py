"""Money parsing: typed dollar amounts and scraped salary ranges, in cents."""

import logging
import math
import re
from typing import Literal, Optional

from ..config import get_settings
from ..models import PayRange, SalaryMatch

logger = logging.getLogger(__name__)

# "$85,000.00/yr" -> amount "85,000.00", unit "yr"
SALARY_PATTERN = re.compile(r"(?<![\d,.])((?:\d{1,3}(?:,\d{3})+|\d+)\.\d{2})/([a-z]+)")

# Plain decimal literal accepted for manual entry
MONEY_PATTERN = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)")

# Same, with well-formed comma thousands grouping ("85,000.50")
GROUPED_MONEY_PATTERN = re.compile(r"\d{1,3}(?:,\d{3})+(?:\.\d*)?")


class InvalidMoneyError(ValueError):
    """Raised when a typed amount cannot be read as dollars."""
    pass


def to_cents(dollars: float) -> int:
    """Convert a dollar amount to integer cents."""
    return round(dollars * 100)


def parse_money(text: str, strip_thousands: Optional[bool] = None) -> int:
    """Parse a user-typed dollar amount into cents.

    Comma thousands separators are rejected unless ``strip_thousands`` is set
    (defaults to the ``money_strip_thousands`` setting), and even then only
    well-formed groups of three ("85,000.50") are accepted.

    Args:
        text: Amount as typed, e.g. "85000" or "85000.50"
        strip_thousands: Remove commas before parsing

    Returns:
        Amount in cents

    Raises:
        InvalidMoneyError: If the text is not a non-negative decimal number
    """
    if strip_thousands is None:
        strip_thousands = get_settings().money_strip_thousands

    candidate = (text or "").strip()
    if strip_thousands and GROUPED_MONEY_PATTERN.fullmatch(candidate):
        candidate = candidate.replace(",", "")

    if not MONEY_PATTERN.fullmatch(candidate):
        raise InvalidMoneyError(f"Invalid amount: {text!r}")

    try:
        dollars = float(candidate)
    except ValueError as e:
        raise InvalidMoneyError(f"Invalid amount: {text!r}") from e

    if not math.isfinite(dollars):
        raise InvalidMoneyError(f"Amount out of range: {text!r}")

    return to_cents(dollars)


def format_money(cents: Optional[int]) -> str:
    """Format cents as a plain dollar string ("850.00"), empty for None."""
    if cents is None:
        return ""
    return f"{cents / 100:.2f}"


def format_pay_range(min_cents: Optional[int], max_cents: Optional[int]) -> str:
    """Format a pay range for display."""
    if min_cents is not None and max_cents is not None:
        return f"${format_money(min_cents)} - ${format_money(max_cents)}"
    if min_cents is not None:
        return f"${format_money(min_cents)}+"
    if max_cents is not None:
        return f"${format_money(max_cents)}"
    return ""


def parse_salary_range(text: str) -> list[SalaryMatch]:
    """Find every "amount/period" occurrence in scraped salary text.

    Handles formats like:
    - $85,000.00/yr - $120,000.00/yr
    - $45.50/hr
    - Base pay range $150,000.00/yr - $180,000.00/yr (embedded in a description)

    Args:
        text: Scraped text that may contain salary amounts

    Returns:
        Matches in order of appearance, empty when nothing matches
    """
    if not text:
        return []

    matches = []
    for match in SALARY_PATTERN.finditer(text):
        amount = float(match.group(1).replace(",", ""))
        matches.append(SalaryMatch(amount=amount, period_unit=match.group(2)))

    logger.debug(f"Found {len(matches)} salary amounts in {len(text)} chars")
    return matches


def salary_range_cents(
    text: str,
    order: Optional[Literal["max_first", "min_first"]] = None,
) -> PayRange:
    """Turn scraped salary text into a pay range in cents.

    Job boards print ranges in a fixed order. With ``max_first`` (the default
    ``salary_order`` setting) the first amount is the upper bound and the second
    is the lower bound. A single amount only fills the upper bound.

    Args:
        text: Scraped salary text
        order: Which bound is listed first; defaults to settings

    Returns:
        PayRange, empty when no amount is found
    """
    if order is None:
        order = get_settings().salary_order

    matches = parse_salary_range(text)
    if not matches:
        return PayRange()

    if len(matches) > 2:
        logger.debug(f"Ignoring {len(matches) - 2} extra salary amounts")

    first = to_cents(matches[0].amount)
    second = to_cents(matches[1].amount) if len(matches) > 1 else None

    if order == "min_first" and second is not None:
        min_cents, max_cents = first, second
    elif order == "min_first":
        min_cents, max_cents = None, first
    else:
        min_cents, max_cents = second, first

    return PayRange(
        min_cents=min_cents,
        max_cents=max_cents,
        pay_unit=matches[0].period_unit,
    )
