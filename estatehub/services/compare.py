"""Compare list: a capped selection of properties kept in the browser session."""

from typing import Any

from estatehub.core.config import settings
from estatehub.models.enums import ListingType
from estatehub.models.property import Property
from estatehub.schemas.compare import CompareProperty
from estatehub.services.formatting import format_location, format_price, get_first_image
from estatehub.services.listing import resolve_listing_type

SESSION_KEY = "compare_properties"
MAX_PROPERTIES = settings.COMPARE_MAX_PROPERTIES
CAPACITY_MESSAGE = f"You can compare maximum {MAX_PROPERTIES} properties"


def _optional_str(value: Any) -> str | None:
    return str(value) if value is not None else None


def _coerce_listing_type(value: Any) -> ListingType:
    try:
        return ListingType(value)
    except ValueError:
        return ListingType.RESALE


def _coerce_entry(raw: Any) -> CompareProperty | None:
    """Build an entry from loosely typed stored data, or None if unusable."""
    if not isinstance(raw, dict):
        return None
    entry_id = _optional_str(raw.get("id")) or ""
    if not entry_id:
        return None
    return CompareProperty(
        id=entry_id,
        title=str(raw.get("title") or ""),
        price="" if raw.get("price") is None else str(raw["price"]),
        image=str(raw.get("image") or ""),
        location=_optional_str(raw.get("location")),
        beds=_optional_str(raw.get("beds")),
        baths=_optional_str(raw.get("baths")),
        sqft=_optional_str(raw.get("sqft")),
        listing_type=_coerce_listing_type(raw.get("listing_type", raw.get("listingType"))),
    )


class CompareList:
    """Ordered, de-duplicated selection of at most ``MAX_PROPERTIES`` entries."""

    def __init__(self, properties: list[CompareProperty] | None = None) -> None:
        self.properties: list[CompareProperty] = list(properties or [])[:MAX_PROPERTIES]
        self.toast: str | None = None

    @classmethod
    def load(cls, raw: Any) -> "CompareList":
        """Restore a list from stored data, dropping anything malformed."""
        if not isinstance(raw, list):
            return cls()
        entries = (_coerce_entry(item) for item in raw[:MAX_PROPERTIES])
        return cls([entry for entry in entries if entry is not None])

    @classmethod
    def from_session(cls, session: dict) -> "CompareList":
        return cls.load(session.get(SESSION_KEY))

    def save(self, session: dict) -> None:
        session[SESSION_KEY] = self.dump()

    def dump(self) -> list[dict]:
        return [entry.model_dump(mode="json") for entry in self.properties]

    def contains(self, property_id: str) -> bool:
        return any(entry.id == property_id for entry in self.properties)

    def add(self, entry: CompareProperty) -> bool:
        """Add an entry; returns False when it was already present or the list is full."""
        if self.contains(entry.id):
            return False
        if len(self.properties) >= MAX_PROPERTIES:
            self.toast = CAPACITY_MESSAGE
            return False
        self.properties.append(entry)
        return True

    def remove(self, property_id: str) -> None:
        self.properties = [entry for entry in self.properties if entry.id != property_id]

    def set(self, entries: list[CompareProperty]) -> None:
        self.properties = list(entries)[:MAX_PROPERTIES]

    def clear(self) -> None:
        self.properties = []

    def dismiss_toast(self) -> None:
        self.toast = None

    def __len__(self) -> int:
        return len(self.properties)


def compare_property_from_listing(prop: Property) -> CompareProperty:
    """Build a compare entry from a loaded property.

    Projects show their unit ranges (bedrooms, area) and starting price.
    """
    listing_type = resolve_listing_type(prop) or ListingType.RESALE
    beds = _optional_str(prop.bedrooms)
    sqft = _optional_str(prop.square_feet)
    price = prop.price

    if listing_type == ListingType.PROJECT and prop.units:
        unit_prices = [u.price for u in prop.units if u.price is not None]
        unit_beds = sorted({u.bedrooms for u in prop.units if u.bedrooms is not None})
        unit_areas = [u.square_feet for u in prop.units if u.square_feet is not None]
        if unit_prices:
            price = min(unit_prices)
        if unit_beds:
            beds = _span(unit_beds[0], unit_beds[-1], suffix=" BHK")
        if unit_areas:
            sqft = _span(min(unit_areas), max(unit_areas))

    return CompareProperty(
        id=str(prop.id),
        title=prop.title or "",
        price=format_price(price),
        image=get_first_image(prop.media),
        location=format_location(prop.location) or None,
        beds=beds,
        baths=_optional_str(prop.bathrooms),
        sqft=sqft,
        listing_type=listing_type,
    )


def _span(low: float, high: float, suffix: str = "") -> str:
    low_text, high_text = f"{low:g}", f"{high:g}"
    if low_text == high_text:
        return f"{low_text}{suffix}"
    return f"{low_text} - {high_text}{suffix}"
