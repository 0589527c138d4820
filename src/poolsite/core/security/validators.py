"""Slug helpers for projects and content pages."""

import re
from typing import Final

MAX_SLUG_LENGTH: Final[int] = 255
SLUG_REGEX: Final[str] = r"^[a-z0-9]+(-[a-z0-9]+)*$"

_SLUG_PATTERN: Final[re.Pattern[str]] = re.compile(SLUG_REGEX)
_STRIP_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9\s-]")
_SPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s+")
_DASH_PATTERN: Final[re.Pattern[str]] = re.compile(r"-+")


def make_slug(title: str) -> str | None:
    """Derive a URL slug from a title.

    Lowercases, drops anything that is not ascii alphanumeric, whitespace or
    a hyphen, turns whitespace runs into hyphens and collapses repeated
    hyphens. Titles written entirely in another script (e.g. Hebrew) yield
    no slug, so None is returned rather than an empty string.

    Examples:
        >>> make_slug("Family Pool in Haifa")
        'family-pool-in-haifa'
        >>> make_slug("  Spa -- & Deck  ")
        'spa-deck'
    """
    slug = _STRIP_PATTERN.sub("", title.lower().strip())
    slug = _SPACE_PATTERN.sub("-", slug)
    slug = _DASH_PATTERN.sub("-", slug).strip("-")
    if not slug:
        return None
    return slug[:MAX_SLUG_LENGTH].rstrip("-")


def validate_slug_format(slug: str) -> str:
    """Validate a hand-written slug (content pages, categories, tags).

    This validates **format only**. Length is enforced by Field(max_length=...).
    """
    if not _SLUG_PATTERN.match(slug):
        raise ValueError(
            "Slug must contain only lowercase letters, numbers, and single hyphens as separators"
        )
    return slug
