"""Main CLI entry point for jobhunter."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from dateutil.parser import isoparse
from pydantic import ValidationError
from rich.console import Console

from .config import get_settings
from .display.ui import (
    display_error,
    display_experience,
    display_info,
    display_post_detail,
    display_posts_table,
    display_salary,
    display_warning,
)
from .models import PostingPage
from .scrapers import get_available_parsers, get_parser_for_url
from .scrapers.apijobs import parse_search_response
from .utils.dates import InvalidDateError, parse_iso_date, parse_relative_date
from .utils.money import InvalidMoneyError, format_money, parse_money, parse_salary_range, salary_range_cents
from .utils.parser import extract_experience_range, format_location, normalize_list

app = typer.Typer(
    name="jobhunter",
    help="Extract structured fields from job posting text.",
    add_completion=False,
)
console = Console()


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show debug logging"),
) -> None:
    """Extract salaries, experience, dates, skills and locations from job postings."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=get_settings().log_level.upper())


def _read_text(text: Optional[str], file: Optional[Path]) -> str:
    """Return the TEXT argument or the contents of --file."""
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            display_error(f"Not UTF-8 text: {file} ({e.reason} at byte {e.start})")
            raise typer.Exit(1)
        except OSError as e:
            display_error(f"Could not read {file}: {e}")
            raise typer.Exit(1)
    if text is None:
        display_error("Provide TEXT or --file.")
        raise typer.Exit(1)
    return text


@app.command()
def money(
    value: str = typer.Argument(..., help="Amount as typed, e.g. 85000.50"),
    strip_commas: bool = typer.Option(False, "--strip-commas", help="Allow comma thousands separators"),
) -> None:
    """Convert a typed dollar amount to cents."""
    try:
        cents = parse_money(value, strip_thousands=strip_commas or None)
    except InvalidMoneyError as e:
        display_error(str(e), title="Invalid amount")
        raise typer.Exit(1)
    console.print(f"{cents} cents (${format_money(cents)})")


@app.command()
def salary(
    text: Optional[str] = typer.Argument(None, help="Salary text, e.g. '$120,000.00/yr - $85,000.00/yr'"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read text from a file"),
    order: Optional[str] = typer.Option(None, "--order", help="Which bound is listed first: max_first or min_first"),
) -> None:
    """Find salary amounts in scraped text."""
    if order is not None and order not in ("max_first", "min_first"):
        display_error(f"Unknown order {order!r}. Use max_first or min_first.")
        raise typer.Exit(1)

    content = _read_text(text, file)
    matches = parse_salary_range(content)
    display_salary(matches, salary_range_cents(content, order=order))


@app.command()
def yoe(
    text: Optional[str] = typer.Argument(None, help="Job description text"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read text from a file"),
) -> None:
    """Find the years-of-experience range in a job description."""
    display_experience(extract_experience_range(_read_text(text, file)))


@app.command()
def date(
    text: str = typer.Argument(..., help="'3 days ago' style phrase, or a timestamp with --iso"),
    now: Optional[str] = typer.Option(None, "--now", help="Anchor time as ISO timestamp (default: current time)"),
    iso: bool = typer.Option(False, "--iso", help="Parse TEXT as an ISO-8601 timestamp"),
) -> None:
    """Convert a posted-date phrase or timestamp to a calendar date."""
    try:
        if iso:
            console.print(parse_iso_date(text).isoformat())
            return

        anchor = None
        if now is not None:
            try:
                anchor = isoparse(now)
            except ValueError as e:
                raise InvalidDateError(f"Invalid --now value: {now!r}") from e

        parsed = parse_relative_date(text, anchor)
    except InvalidDateError as e:
        display_error(str(e), title="Invalid date")
        raise typer.Exit(1)

    if parsed is None:
        display_warning(f"Unrecognized date phrase: {text!r}")
        raise typer.Exit(1)
    console.print(parsed.isoformat())


@app.command()
def skills(
    text: str = typer.Argument(..., help="Comma-separated list, e.g. 'python, sql,Go'"),
) -> None:
    """Normalize a comma-separated list."""
    console.print(normalize_list(text), markup=False)


@app.command()
def location(
    city: str = typer.Argument("", help="City"),
    region: str = typer.Argument("", help="Region or state"),
    country: str = typer.Argument("", help="Country"),
) -> None:
    """Format city, region and country as one location string."""
    console.print(format_location(city, region, country), markup=False)


@app.command()
def extract(
    url: str = typer.Argument(..., help="Job posting URL"),
    description_file: Optional[Path] = typer.Option(None, "--description-file", "-d", help="File with the description text"),
    title: str = typer.Option("", "--title", help="Job title text"),
    company: str = typer.Option("", "--company", help="Company name text"),
    location_text: str = typer.Option("", "--location", help="Location text"),
    salary_text: Optional[str] = typer.Option(None, "--salary", help="Salary block text"),
    posted: Optional[str] = typer.Option(None, "--posted", help="Posted date text, e.g. '3 days ago'"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a panel"),
) -> None:
    """Extract job post fields from text scraped off a posting page."""
    parser = get_parser_for_url(url)
    if parser is None:
        display_error(
            f"No parser for {url}.\n"
            f"Available parsers: {', '.join(get_available_parsers())}"
        )
        raise typer.Exit(1)

    description = ""
    if description_file is not None:
        description = _read_text(None, description_file)

    page = PostingPage(
        url=url,
        company=company,
        title=title,
        location=location_text,
        description=description,
        salary_text=salary_text,
        posted_text=posted,
    )
    post = parser.parse_posting(page)

    if as_json:
        console.print_json(post.model_dump_json())
    else:
        display_post_detail(post)


@app.command("import-hits")
def import_hits(
    file: Path = typer.Argument(..., help="JSON file with an APIJobs.dev search response"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """Convert a saved APIJobs.dev search response into job posts."""
    try:
        payload = json.loads(_read_text(None, file))
    except json.JSONDecodeError as e:
        display_error(f"{file} is not valid JSON: {e}")
        raise typer.Exit(1)

    try:
        posts = parse_search_response(payload)
    except ValidationError as e:
        display_error(f"{file} is not a search response: {e.error_count()} errors")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps([post.model_dump(mode="json") for post in posts]))
        return

    display_posts_table(posts, title=f"Job posts from {file.name}")
    skipped = len(payload.get("hits", [])) - len(posts)
    if skipped:
        display_info(f"Skipped {skipped} malformed hits. Use --verbose for details.")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
