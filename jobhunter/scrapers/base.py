"""Base posting parser for job boards."""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ..models import JobPostFields, PostingPage

logger = logging.getLogger(__name__)


class BasePostingParser(ABC):
    """Abstract base class for job board posting parsers."""

    # Subclasses must define these
    name: str = ""
    domain: str = ""
    platform_url: str = ""

    @classmethod
    def handles(cls, url: str) -> bool:
        """Whether this parser understands postings at the URL.

        Args:
            url: Job posting URL

        Returns:
            True if the URL belongs to this parser's job board
        """
        return bool(cls.domain) and cls.domain in (url or "")

    @abstractmethod
    def parse_posting(
        self,
        page: PostingPage,
        now: Optional[datetime] = None,
    ) -> JobPostFields:
        """Build job post fields from the text fragments of a posting page.

        Args:
            page: Text located on the posting page
            now: Anchor time for relative dates (defaults to current time)

        Returns:
            JobPostFields; fields that could not be extracted are left empty
        """
        pass

    def _safe_extract(self, field: str, func, *args, default=None):
        """Run one extractor, leaving the field blank if it fails.

        Args:
            field: Field name, for logging
            func: Extractor to call
            *args: Extractor arguments
            default: Value used when the extractor raises

        Returns:
            Extractor result or default
        """
        try:
            return func(*args)
        except (ValueError, OverflowError) as e:
            logger.warning(f"{self.name}: could not extract {field}: {e}")
            return default
