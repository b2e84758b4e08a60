"""SEO-friendly property slugs.

There is no slug column: a slug is the slugified title followed by the
property id, e.g. ``"luxury-villa-123"``. The id is always the last segment.
"""

import re

_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")


def to_property_slug(title: str | None, property_id: int) -> str:
    """Build the canonical slug for a property."""
    if not title or not title.strip():
        return str(property_id)
    slug = _INVALID_CHARS.sub("", title.lower())
    slug = _WHITESPACE.sub("-", slug)
    slug = _DASHES.sub("-", slug).strip("-")
    return f"{slug}-{property_id}" if slug else str(property_id)


def parse_property_id_from_slug(slug: str | None) -> int | None:
    """Extract the property id from a slug ("123" or "luxury-villa-123")."""
    trimmed = (slug or "").strip()
    if not trimmed:
        return None
    last = trimmed.rsplit("-", 1)[-1]
    try:
        return int(last)
    except ValueError:
        return None
