"""Posting parsers that turn scraped page fragments into job post fields."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .base import BasePostingParser

# Registry of available posting parsers
PARSERS: dict[str, type["BasePostingParser"]] = {}


def register_parser(name: str):
    """Decorator to register a posting parser class."""

    def decorator(cls: type["BasePostingParser"]) -> type["BasePostingParser"]:
        PARSERS[name] = cls
        return cls

    return decorator


def get_parser(name: str) -> type["BasePostingParser"] | None:
    """Get a posting parser class by name."""
    return PARSERS.get(name)


def get_parser_for_url(url: str) -> Optional["BasePostingParser"]:
    """Instantiate the first registered parser that handles the URL."""
    for cls in PARSERS.values():
        if cls.handles(url):
            return cls()
    return None


def get_available_parsers() -> list[str]:
    """Get list of available parser names."""
    return list(PARSERS.keys())


# Import parser modules so their classes register themselves
from . import linkedin  # noqa: E402,F401
