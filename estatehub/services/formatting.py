"""Display helpers for prices, addresses and images."""

from collections.abc import Sequence
from typing import Protocol

DEFAULT_IMAGE = "https://images.unsplash.com/photo-1613490493576-7fde63acd811?w=800&q=80"

CRORE = 1_00_00_000
LAKH = 1_00_000


class _Location(Protocol):
    streetaddress: str
    city: str
    state: str
    zip_code: str


class _Media(Protocol):
    file_url: str


def format_price(price: float | None) -> str:
    """Format a price in Indian notation (Cr+, Lakh, K).

    Prices may be stored as full amounts (26000000 -> "2.6 Cr+") or already
    in crores (2.6 -> "2.6 Cr+", 0.17 -> "17.0 Lakh").
    """
    if price is None:
        return "—"
    if price >= CRORE:
        return f"{price / CRORE:.1f} Cr+"
    if price >= LAKH:
        return f"{price / LAKH:.1f} Lakh"
    if price >= 1_000:
        return f"{price / 1_000:.1f} K"
    # Stored in crores
    if price >= 1:
        crores = str(round(price)) if price % 1 == 0 else f"{price:.1f}"
        return f"{crores} Cr+"
    # Fraction of a crore is lakh
    if price >= 0.01:
        return f"{price * 100:.1f} Lakh"
    return str(price)


def format_location(location: _Location | None) -> str:
    """Join the non-empty address parts with commas."""
    if location is None:
        return ""
    parts = [location.streetaddress, location.city, location.state, location.zip_code]
    return ", ".join(part for part in parts if part)


def get_first_image(media: Sequence[_Media]) -> str:
    """Return the first media URL, or a placeholder image."""
    return media[0].file_url if media else DEFAULT_IMAGE
