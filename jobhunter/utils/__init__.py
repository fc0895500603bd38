"""Utility functions for parsing and processing."""

from .dates import InvalidDateError, parse_iso_date, parse_relative_date
from .money import InvalidMoneyError, parse_money, parse_salary_range, salary_range_cents
from .parser import extract_experience_range, format_location, normalize_list

__all__ = [
    "InvalidDateError",
    "InvalidMoneyError",
    "extract_experience_range",
    "format_location",
    "normalize_list",
    "parse_iso_date",
    "parse_money",
    "parse_relative_date",
    "parse_salary_range",
    "salary_range_cents",
]
