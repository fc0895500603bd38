"""Rich terminal UI components."""

from .ui import (
    display_error,
    display_experience,
    display_post_detail,
    display_posts_table,
    display_salary,
)

__all__ = [
    "display_error",
    "display_experience",
    "display_post_detail",
    "display_posts_table",
    "display_salary",
]
