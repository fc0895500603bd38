"""Rich terminal UI components for displaying extracted job information."""

from datetime import date, datetime, timezone
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models import ExperienceRange, JobPostFields, PayRange, SalaryMatch
from ..utils.money import format_money, format_pay_range

console = Console()


def display_posts_table(
    posts: list[JobPostFields],
    title: str = "Job Posts",
    show_source: bool = True,
) -> None:
    """Display job posts in a formatted table.

    Args:
        posts: List of posts to display
        title: Table title
        show_source: Whether to show the source column
    """
    if not posts:
        console.print("[yellow]No job posts found.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")

    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="white", max_width=30)
    table.add_column("Company", style="green", max_width=20)
    table.add_column("Location", style="blue", max_width=25)
    table.add_column("Pay", style="yellow", max_width=26)
    table.add_column("YOE", style="cyan", max_width=10)
    if show_source:
        table.add_column("Source", style="magenta", max_width=12)

    for i, post in enumerate(posts, 1):
        pay_display = format_pay_range(post.min_pay_cents, post.max_pay_cents) or "-"
        yoe_display = str(ExperienceRange(min_years=post.min_yoe, max_years=post.max_yoe)) or "-"
        row = [
            str(i),
            _truncate(post.title, 30),
            _truncate(post.company, 20),
            _truncate(post.location, 25),
            pay_display,
            yoe_display,
        ]
        if show_source:
            row.append(post.source)
        table.add_row(*row)

    console.print(table)


def display_post_detail(post: JobPostFields) -> None:
    """Display detailed information about a single job post.

    Args:
        post: The post to display
    """
    # Header
    header = Text()
    header.append_text(Text(post.title or "Untitled", style="bold white"))
    header.append_text(Text(f" @ {post.company or 'Unknown company'}", style="green"))

    content_parts = []

    location = post.location or "-"
    content_parts.append(f"[blue]Location:[/blue]   {location} ({post.location_type.display_name})")

    pay = format_pay_range(post.min_pay_cents, post.max_pay_cents)
    if pay:
        unit = f"/{post.pay_unit}" if post.pay_unit else ""
        currency = f" {post.currency}" if post.currency else ""
        content_parts.append(f"[yellow]Pay:[/yellow]        {pay}{unit}{currency}")

    experience = ExperienceRange(min_years=post.min_yoe, max_years=post.max_yoe)
    if not experience.is_empty:
        content_parts.append(f"[cyan]Experience:[/cyan] {experience}")

    if post.date_posted:
        age = _format_relative_date(post.date_posted)
        content_parts.append(f"[dim]Posted:[/dim]     {post.date_posted.isoformat()} ({age})")

    if post.skills:
        content_parts.append(f"[bold]Skills:[/bold]     {post.skills}")
    if post.benefits:
        content_parts.append(f"[bold]Benefits:[/bold]   {post.benefits}")

    content_parts.append(f"[magenta]Source:[/magenta]     {post.source}")
    content_parts.append("")
    content_parts.append(f"[dim]URL: {post.url}[/dim]")

    panel = Panel(
        "\n".join(content_parts),
        title=header,
        border_style="cyan",
        padding=(1, 2),
    )
    console.print(panel)


def display_salary(matches: list[SalaryMatch], pay: PayRange) -> None:
    """Display salary matches and the resulting pay range."""
    if not matches:
        console.print("[yellow]No salary amounts found.[/yellow]")
        return

    table = Table(title="Salary Amounts", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Amount", style="yellow", justify="right")
    table.add_column("Per", style="white")

    for i, match in enumerate(matches, 1):
        table.add_row(str(i), f"${match.amount:,.2f}", match.period_unit)

    console.print(table)
    console.print(
        f"[bold]Min:[/bold] {format_money(pay.min_cents) or '-'}  "
        f"[bold]Max:[/bold] {format_money(pay.max_cents) or '-'}  "
        f"[dim](cents: {pay.min_cents} / {pay.max_cents})[/dim]"
    )


def display_experience(experience: ExperienceRange) -> None:
    """Display an experience range."""
    if experience.is_empty:
        console.print("[yellow]No experience requirement found.[/yellow]")
        return
    console.print(
        f"[cyan]Experience:[/cyan] {experience} "
        f"[dim](min={experience.min_years}, max={experience.max_years})[/dim]"
    )


def display_error(message: str, title: str = "Error") -> None:
    """Display an error message.

    Args:
        message: Error message
        title: Panel title
    """
    console.print(Panel(f"[red]{message}[/red]", title=title, border_style="red"))


def display_warning(message: str) -> None:
    """Display a warning message."""
    console.print(f"[yellow]Warning:[/yellow] {message}")


def display_info(message: str) -> None:
    """Display an info message."""
    console.print(f"[blue]Info:[/blue] {message}")


def _truncate(text: str, max_length: int) -> str:
    """Truncate text to max length with ellipsis."""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def _format_relative_date(day: date, today: Optional[date] = None) -> str:
    """Format a date relative to today (e.g., '2 days ago')."""
    if today is None:
        today = datetime.now(timezone.utc).date()

    days = (today - day).days
    if days <= 0:
        return "Today"
    elif days == 1:
        return "Yesterday"
    elif days < 7:
        return f"{days} days ago"
    elif days < 30:
        weeks = days // 7
        return f"{weeks} weeks ago" if weeks > 1 else "1 week ago"
    else:
        return day.strftime("%Y-%m-%d")
