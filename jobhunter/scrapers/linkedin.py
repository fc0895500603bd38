"""LinkedIn posting parser."""

import logging
from datetime import datetime
from typing import Optional

from . import register_parser
from .base import BasePostingParser
from ..config import get_settings
from ..models import ExperienceRange, JobPostFields, PayRange, PostingPage
from ..utils.dates import parse_relative_date
from ..utils.money import salary_range_cents
from ..utils.parser import clean_text, detect_location_type, extract_experience_range

logger = logging.getLogger(__name__)


@register_parser("linkedin")
class LinkedInPostingParser(BasePostingParser):
    """Parser for public LinkedIn job pages.

    LinkedIn shows the salary as "$120,000.00/yr - $85,000.00/yr" in the
    compensation block and the posting age as "3 days ago".
    """

    name = "linkedin"
    domain = "linkedin.com"
    platform_url = "https://linkedin.com"

    def parse_posting(
        self,
        page: PostingPage,
        now: Optional[datetime] = None,
    ) -> JobPostFields:
        """Parse a LinkedIn posting.

        Args:
            page: Text from the top card, description and compensation block
            now: Anchor time for the posted date

        Returns:
            JobPostFields for the posting
        """
        description = clean_text(page.description)

        experience = self._safe_extract(
            "experience", extract_experience_range, description, default=ExperienceRange()
        )
        pay = PayRange()
        if page.salary_text:
            pay = self._safe_extract("pay", salary_range_cents, page.salary_text, default=PayRange())

        date_posted = None
        if page.posted_text:
            date_posted = self._safe_extract("date_posted", parse_relative_date, page.posted_text, now)
            if date_posted is None:
                logger.info(f"{self.name}: unrecognized posted date {page.posted_text!r}")

        return JobPostFields(
            title=clean_text(page.title),
            company=clean_text(page.company),
            location=clean_text(page.location),
            location_type=detect_location_type(description),
            url=page.url,
            min_yoe=experience.min_years,
            max_yoe=experience.max_years,
            min_pay_cents=pay.min_cents,
            max_pay_cents=pay.max_cents,
            pay_unit=pay.pay_unit,
            currency=get_settings().default_currency if not pay.is_empty else None,
            date_posted=date_posted,
            platform_url=self.platform_url,
            source=self.name,
        )
