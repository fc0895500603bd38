"""Pydantic data models for values extracted from job postings."""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class LocationType(str, Enum):
    """Where the work happens."""

    ONSITE = "Onsite"
    HYBRID = "Hybrid"
    REMOTE = "Remote"
    UNKNOWN = "Unknown"

    @property
    def display_name(self) -> str:
        """Human-readable label ("On-site" rather than "Onsite")."""
        if self is LocationType.ONSITE:
            return "On-site"
        return self.value


class SalaryMatch(BaseModel):
    """A single "$85,000.00/yr" style occurrence found in scraped text."""

    amount: float = Field(description="Dollar amount with thousands separators removed")
    period_unit: str = Field(description="Pay period unit, e.g. 'yr' or 'hr'")


class PayRange(BaseModel):
    """Pay bounds in cents, either side may be absent."""

    min_cents: Optional[int] = Field(default=None, description="Lower bound in cents")
    max_cents: Optional[int] = Field(default=None, description="Upper bound in cents")
    pay_unit: Optional[str] = Field(default=None, description="Pay period unit of the range")

    @property
    def is_empty(self) -> bool:
        """True when no amount was found."""
        return self.min_cents is None and self.max_cents is None


class ExperienceRange(BaseModel):
    """Years-of-experience bounds. A lone value is a floor, not a range."""

    min_years: Optional[int] = Field(default=None, ge=0, description="Minimum years")
    max_years: Optional[int] = Field(default=None, ge=0, description="Maximum years")

    @model_validator(mode="after")
    def check_order(self) -> "ExperienceRange":
        if (
            self.min_years is not None
            and self.max_years is not None
            and self.min_years > self.max_years
        ):
            raise ValueError(
                f"min_years ({self.min_years}) must not exceed max_years ({self.max_years})"
            )
        return self

    @property
    def is_empty(self) -> bool:
        return self.min_years is None and self.max_years is None

    def __str__(self) -> str:
        if self.min_years is not None and self.max_years is not None:
            return f"{self.min_years}-{self.max_years} years"
        if self.min_years is not None:
            return f"{self.min_years}+ years"
        if self.max_years is not None:
            return f"up to {self.max_years} years"
        return ""


class PostingPage(BaseModel):
    """Raw text fragments located on a job posting page by the browser layer."""

    url: str = Field(description="Job posting URL")
    company: str = Field(default="", description="Company name text")
    title: str = Field(default="", description="Job title text")
    location: str = Field(default="", description="Location text")
    description: str = Field(default="", description="Full description text")
    salary_text: Optional[str] = Field(default=None, description="Salary/compensation element text")
    posted_text: Optional[str] = Field(default=None, description="Relative posted date, e.g. '3 days ago'")


class JobPostFields(BaseModel):
    """Structured job post fields ready to be stored."""

    title: str = Field(description="Job title")
    company: str = Field(description="Company name")
    location: str = Field(default="", description="Display location string")
    location_type: LocationType = Field(default=LocationType.UNKNOWN, description="Onsite/Hybrid/Remote")
    url: str = Field(description="Original job posting URL")
    min_yoe: Optional[int] = Field(default=None, description="Minimum years of experience")
    max_yoe: Optional[int] = Field(default=None, description="Maximum years of experience")
    min_pay_cents: Optional[int] = Field(default=None, description="Minimum pay in cents")
    max_pay_cents: Optional[int] = Field(default=None, description="Maximum pay in cents")
    pay_unit: Optional[str] = Field(default=None, description="Pay period unit")
    currency: Optional[str] = Field(default=None, description="Currency code")
    date_posted: Optional[date] = Field(default=None, description="Calendar date the job was posted (UTC)")
    date_retrieved: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When we extracted this",
    )
    skills: Optional[str] = Field(default=None, description="Canonical comma-separated skills")
    benefits: Optional[str] = Field(default=None, description="Canonical comma-separated benefits")
    platform_url: Optional[str] = Field(default=None, description="Job board the post came from")
    source: str = Field(default="", description="Parser or integration name")
    external_id: Optional[str] = Field(default=None, description="Identifier at the source, if any")

    @property
    def date_posted_timestamp(self) -> Optional[int]:
        """Posted date as epoch seconds at midnight UTC."""
        from .utils.dates import date_to_timestamp

        if self.date_posted is None:
            return None
        return date_to_timestamp(self.date_posted)
