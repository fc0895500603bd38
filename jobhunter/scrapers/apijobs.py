"""Conversion of APIJobs.dev search hits into job post fields.

Only the JSON payload is handled here; fetching it is up to the caller.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from ..models import JobPostFields
from ..utils.dates import InvalidDateError, parse_iso_date
from ..utils.money import to_cents
from ..utils.parser import format_location, months_to_years, normalize_workplace_type

logger = logging.getLogger(__name__)


class APIJobsHit(BaseModel):
    """A single job from an APIJobs.dev search response."""

    id: str
    title: str
    employment_type: Optional[str] = None
    workplace_type: Optional[str] = None
    hiring_organization_name: str
    country: str = ""
    region: Optional[str] = None
    city: Optional[str] = None
    base_salary_currency: Optional[str] = None
    base_salary_min_value: Optional[float] = None
    base_salary_max_value: Optional[float] = None
    base_salary_unit: Optional[str] = None
    experience_requirements_months: Optional[int] = None
    skills_requirements: Optional[list[str]] = None
    website: Optional[str] = None
    url: str
    published_at: str


class APIJobsSearchResponse(BaseModel):
    """Search response envelope."""

    hits: list[dict[str, Any]] = Field(default_factory=list)


def hit_to_fields(hit: APIJobsHit) -> JobPostFields:
    """Convert a search hit into job post fields.

    The API reports a single experience figure in months; it becomes the
    minimum years. Skills are joined with bare commas as the API lists them.

    Raises:
        InvalidDateError: If published_at is not a valid ISO timestamp
    """
    min_pay = to_cents(hit.base_salary_min_value) if hit.base_salary_min_value is not None else None
    max_pay = to_cents(hit.base_salary_max_value) if hit.base_salary_max_value is not None else None

    return JobPostFields(
        title=hit.title,
        company=hit.hiring_organization_name,
        location=format_location(hit.city, hit.region, hit.country),
        location_type=normalize_workplace_type(hit.workplace_type),
        url=hit.url,
        min_yoe=months_to_years(hit.experience_requirements_months),
        max_yoe=None,
        min_pay_cents=min_pay,
        max_pay_cents=max_pay,
        pay_unit=hit.base_salary_unit,
        currency=hit.base_salary_currency,
        date_posted=parse_iso_date(hit.published_at),
        skills=",".join(hit.skills_requirements) if hit.skills_requirements else None,
        source="apijobs",
        external_id=hit.id,
    )


def parse_search_response(payload: dict[str, Any]) -> list[JobPostFields]:
    """Convert every usable hit in a search response.

    Hits that fail validation or carry a malformed date are skipped and logged.

    Args:
        payload: Decoded JSON body of a search response

    Returns:
        Job post fields, in response order
    """
    response = APIJobsSearchResponse.model_validate(payload)
    logger.debug(f"Search response has {len(response.hits)} hits")

    posts = []
    for raw in response.hits:
        try:
            posts.append(hit_to_fields(APIJobsHit.model_validate(raw)))
        except ValidationError as e:
            logger.warning(f"Skipping malformed hit {raw.get('id', '?')}: {e.error_count()} errors")
        except InvalidDateError as e:
            logger.warning(f"Skipping hit {raw.get('id', '?')}: {e}")
    return posts
