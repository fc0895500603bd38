"""Tests for posting parsers and APIJobs hit conversion."""

from datetime import date

import pytest

from jobhunter.models import JobPostFields, LocationType, PostingPage
from jobhunter.scrapers import get_available_parsers, get_parser, get_parser_for_url
from jobhunter.scrapers.apijobs import APIJobsHit, hit_to_fields, parse_search_response
from jobhunter.scrapers.linkedin import LinkedInPostingParser
from jobhunter.utils.dates import InvalidDateError


def _make_hit(**overrides):
    """Create a raw APIJobs search hit."""
    hit = {
        "id": "abc123",
        "title": "Backend Engineer",
        "employment_type": "full-time",
        "workplace_type": "on-site",
        "hiring_organization_name": "Acme",
        "country": "USA",
        "region": "TX",
        "city": "Austin",
        "base_salary_currency": "USD",
        "base_salary_min_value": 95000.0,
        "base_salary_max_value": 130000.5,
        "base_salary_unit": "year",
        "experience_requirements_months": 30,
        "skills_requirements": ["python", "sql"],
        "website": "https://acme.example",
        "url": "https://jobs.acme.example/123",
        "published_at": "2024-06-01T09:30:00Z",
    }
    hit.update(overrides)
    return hit


# ============================================================
# Registry
# ============================================================

def test_linkedin_parser_registered():
    assert "linkedin" in get_available_parsers()
    assert get_parser("linkedin") is LinkedInPostingParser


def test_get_parser_for_url():
    parser = get_parser_for_url("https://www.linkedin.com/jobs/view/12345")
    assert isinstance(parser, LinkedInPostingParser)


def test_get_parser_for_unknown_url():
    assert get_parser_for_url("https://example.com/careers/1") is None


# ============================================================
# LinkedIn
# ============================================================

def test_linkedin_parse_posting(now):
    page = PostingPage(
        url="https://www.linkedin.com/jobs/view/12345",
        company=" Acme Corp ",
        title="Senior  Data Engineer",
        location="New York, NY",
        description=(
            "We are a **remote-first** team.\n"
            "Requires 3-5 years of experience, prefer 7+ years with Spark."
        ),
        salary_text="$150,000.00/yr - $120,000.00/yr",
        posted_text="2 weeks ago",
    )

    post = LinkedInPostingParser().parse_posting(page, now)

    assert post.company == "Acme Corp"
    assert post.title == "Senior Data Engineer"
    assert post.location == "New York, NY"
    assert post.location_type == LocationType.REMOTE
    assert (post.min_yoe, post.max_yoe) == (3, 7)
    assert post.max_pay_cents == 15_000_000
    assert post.min_pay_cents == 12_000_000
    assert post.pay_unit == "yr"
    assert post.currency == "USD"
    assert post.date_posted == date(2024, 5, 27)
    assert post.platform_url == "https://linkedin.com"
    assert post.source == "linkedin"


def test_linkedin_missing_fields_stay_blank(now):
    page = PostingPage(
        url="https://www.linkedin.com/jobs/view/1",
        title="Engineer",
        company="Acme",
        description="Come work in our office.",
        salary_text="Competitive",
        posted_text="sometime last season",
    )

    post = LinkedInPostingParser().parse_posting(page, now)

    assert post.location_type == LocationType.ONSITE
    assert post.min_yoe is None and post.max_yoe is None
    assert post.min_pay_cents is None and post.max_pay_cents is None
    assert post.currency is None
    assert post.date_posted is None


def test_linkedin_extraction_failure_does_not_abort(now, monkeypatch):
    import jobhunter.scrapers.linkedin as linkedin

    def broken(text):
        raise ValueError("bad number")

    monkeypatch.setattr(linkedin, "salary_range_cents", broken)
    page = PostingPage(
        url="https://www.linkedin.com/jobs/view/2",
        title="Engineer",
        company="Acme",
        description="5 years",
        salary_text="$1.00/hr",
    )

    post = LinkedInPostingParser().parse_posting(page, now)

    assert post.min_pay_cents is None
    assert post.min_yoe == 5


# ============================================================
# APIJobs
# ============================================================

def test_hit_to_fields():
    post = hit_to_fields(APIJobsHit.model_validate(_make_hit()))

    assert isinstance(post, JobPostFields)
    assert post.title == "Backend Engineer"
    assert post.company == "Acme"
    assert post.location == "Austin, TX, USA"
    assert post.location_type == LocationType.ONSITE
    assert post.min_yoe == 3
    assert post.max_yoe is None
    assert post.min_pay_cents == 9_500_000
    assert post.max_pay_cents == 13_000_050
    assert post.pay_unit == "year"
    assert post.currency == "USD"
    assert post.date_posted == date(2024, 6, 1)
    assert post.date_posted_timestamp == 1717200000
    assert post.skills == "python,sql"
    assert post.external_id == "abc123"
    assert post.source == "apijobs"


def test_hit_to_fields_optional_values_missing():
    raw = _make_hit(
        city=None,
        region=None,
        workplace_type=None,
        base_salary_min_value=None,
        base_salary_max_value=None,
        experience_requirements_months=None,
        skills_requirements=None,
    )
    post = hit_to_fields(APIJobsHit.model_validate(raw))

    assert post.location == "USA"
    assert post.location_type == LocationType.UNKNOWN
    assert post.min_pay_cents is None
    assert post.max_pay_cents is None
    assert post.min_yoe is None
    assert post.skills is None


def test_hit_to_fields_bad_date():
    with pytest.raises(InvalidDateError):
        hit_to_fields(APIJobsHit.model_validate(_make_hit(published_at="last week")))


def test_parse_search_response_skips_bad_hits(caplog):
    payload = {
        "hits": [
            _make_hit(id="1"),
            {"id": "2", "title": "Missing everything"},
            _make_hit(id="3", published_at="garbage"),
            _make_hit(id="4", workplace_type="remote"),
        ]
    }

    posts = parse_search_response(payload)

    assert [p.external_id for p in posts] == ["1", "4"]
    assert posts[1].location_type == LocationType.REMOTE
    assert "Skipping" in caplog.text


def test_parse_search_response_empty():
    assert parse_search_response({"hits": []}) == []
    assert parse_search_response({}) == []


def test_linkedin_out_of_range_posted_date(now):
    page = PostingPage(
        url="https://www.linkedin.com/jobs/view/3",
        title="Engineer",
        company="Acme",
        description="Hybrid. 2-4 years of experience.",
        salary_text="$100,000.00/yr - $80,000.00/yr",
        posted_text="3000 years ago",
    )

    post = LinkedInPostingParser().parse_posting(page, now)

    assert post.date_posted is None
    assert (post.min_yoe, post.max_yoe) == (2, 4)
    assert post.max_pay_cents == 10_000_000


def test_linkedin_posted_date_error_leaves_field_blank(now, monkeypatch, caplog):
    import jobhunter.scrapers.linkedin as linkedin

    def broken(phrase, anchor):
        raise OverflowError("date value out of range")

    monkeypatch.setattr(linkedin, "parse_relative_date", broken)
    page = PostingPage(
        url="https://www.linkedin.com/jobs/view/4",
        title="Engineer",
        company="Acme",
        posted_text="2 days ago",
    )

    post = LinkedInPostingParser().parse_posting(page, now)

    assert post.date_posted is None
    assert post.title == "Engineer"
    assert "could not extract date_posted" in caplog.text
