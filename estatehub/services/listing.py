"""Listing queries for the public site.

Listings are resolved through property types: each listing type (Project,
Rent, Resale) maps onto one or more ``PropertyType`` names, matched without
regard to case. Related rows (media, location, units, amenities) are loaded
in follow-up ``IN`` queries rather than wide joins.
"""

import math
from collections.abc import Sequence
from typing import TypeVar

from sqlalchemy import func, or_
from sqlalchemy.orm import Query, Session, joinedload, selectinload
from structlog import get_logger

from estatehub.core.config import settings
from estatehub.models.enums import ListingType, MediaType
from estatehub.models.property import (
    Property,
    PropertyLocation,
    PropertyMedia,
    PropertyType,
    PropertyUnit,
)
from estatehub.schemas.listing import (
    PriceRange,
    PriceRanges,
    ProjectFilters,
    PropertyTypeOption,
    RentResaleFilters,
    SearchMeta,
)

logger = get_logger(__name__)

T = TypeVar("T")

# Property type names (lowercase) that belong to each listing type
LISTING_TYPE_NAMES: dict[ListingType, tuple[str, ...]] = {
    ListingType.PROJECT: ("project",),
    ListingType.RENT: ("rent", "rental", "renter"),
    ListingType.RESALE: ("resale",),
}

LIKE_ESCAPE = "\\"


def _card_options(with_details: bool = False) -> list:
    options = [selectinload(Property.media), joinedload(Property.location)]
    if with_details:
        options += [selectinload(Property.units), selectinload(Property.amenities)]
    return options


def _is_set(value: float | None) -> bool:
    """Filter values that are missing or not positive are ignored."""
    return value is not None and value > 0


def resolve_listing_type_ids(db: Session, listing_type: ListingType | str) -> list[int]:
    """Get the ids of property types that belong to a listing type."""
    names = LISTING_TYPE_NAMES[ListingType(listing_type)]
    rows = (
        db.query(PropertyType.id)
        .filter(func.lower(PropertyType.name).in_(names))
        .order_by(PropertyType.id)
        .all()
    )
    return [row.id for row in rows]


def resolve_listing_type(prop: Property) -> ListingType | None:
    """Work out the listing type of a property.

    The ``listing_type`` column wins when it holds a known value; otherwise
    the property type name is matched against the listing type aliases.
    """
    if prop.listing_type:
        for listing_type in ListingType:
            if prop.listing_type.strip().lower() == listing_type.value.lower():
                return listing_type
    if prop.property_type is not None:
        type_name = prop.property_type.name.strip().lower()
        for listing_type, names in LISTING_TYPE_NAMES.items():
            if type_name in names:
                return listing_type
    return None


def fetch_properties_by_listing_type(
    db: Session,
    listing_type: ListingType | str,
) -> list[Property]:
    """Get all properties of a listing type, newest first."""
    type_ids = resolve_listing_type_ids(db, listing_type)
    if not type_ids:
        return []
    return (
        db.query(Property)
        .options(*_card_options())
        .filter(Property.property_type_id.in_(type_ids))
        .order_by(Property.id.desc())
        .all()
    )


def fetch_projects_with_units(db: Session) -> list[Property]:
    """Get all projects with their units and amenities."""
    type_ids = resolve_listing_type_ids(db, ListingType.PROJECT)
    if not type_ids:
        return []
    return (
        db.query(Property)
        .options(*_card_options(with_details=True))
        .filter(Property.property_type_id.in_(type_ids))
        .order_by(Property.id.desc())
        .all()
    )


def fetch_property_by_id(db: Session, property_id: int) -> Property | None:
    """Get a single property with media, location, units and amenities."""
    return (
        db.query(Property)
        .options(*_card_options(with_details=True), joinedload(Property.property_type))
        .filter(Property.id == property_id)
        .first()
    )


def fetch_similar_properties(
    db: Session,
    listing_type: str,
    exclude_id: int,
    limit: int | None = None,
) -> list[Property]:
    """Get other properties with the same listing type, newest first."""
    return (
        db.query(Property)
        .options(*_card_options())
        .filter(Property.listing_type == listing_type, Property.id != exclude_id)
        .order_by(Property.id.desc())
        .limit(limit or settings.SIMILAR_PROPERTIES_LIMIT)
        .all()
    )


def _project_ids_matching_units(
    db: Session,
    type_ids: list[int],
    filters: ProjectFilters,
) -> list[int]:
    """Ids of projects having at least one unit that matches the filters."""
    query = (
        db.query(PropertyUnit.property_id)
        .join(Property, PropertyUnit.property_id == Property.id)
        .filter(Property.property_type_id.in_(type_ids))
    )
    if filters.project_status:
        query = query.filter(PropertyUnit.status == filters.project_status.value)
    if _is_set(filters.min_price):
        query = query.filter(PropertyUnit.price >= filters.min_price)
    if _is_set(filters.max_price):
        query = query.filter(PropertyUnit.price <= filters.max_price)
    return [row.property_id for row in query.distinct().all()]


def fetch_filtered_projects(db: Session, filters: ProjectFilters) -> list[Property]:
    """Get projects filtered by unit status and unit price.

    Matching projects are returned with all of their units, not only the
    matching ones.
    """
    type_ids = resolve_listing_type_ids(db, ListingType.PROJECT)
    if not type_ids:
        return []

    property_ids = _project_ids_matching_units(db, type_ids, filters)
    if not property_ids:
        return []

    return (
        db.query(Property)
        .options(*_card_options(with_details=True))
        .filter(Property.id.in_(property_ids), Property.property_type_id.in_(type_ids))
        .order_by(Property.id.desc())
        .all()
    )


def has_project_filters(filters: ProjectFilters) -> bool:
    """Whether any project filter is set; prices at or below zero do not count."""
    return filters.project_status is not None or _is_set(filters.min_price) or _is_set(filters.max_price)


def fetch_projects(db: Session, filters: ProjectFilters) -> list[Property]:
    """Get projects, filtered on their units only when a filter is set."""
    if has_project_filters(filters):
        return fetch_filtered_projects(db, filters)
    return fetch_projects_with_units(db)


def _fetch_filtered_by_listing_type(
    db: Session,
    listing_type: ListingType,
    filters: RentResaleFilters,
) -> list[Property]:
    type_ids = resolve_listing_type_ids(db, listing_type)
    if not type_ids:
        return []

    query = (
        db.query(Property)
        .options(*_card_options())
        .filter(Property.property_type_id.in_(type_ids))
    )
    if _is_set(filters.min_price):
        query = query.filter(Property.price >= filters.min_price)
    if _is_set(filters.max_price):
        query = query.filter(Property.price <= filters.max_price)
    if _is_set(filters.bedrooms):
        query = query.filter(Property.bedrooms == filters.bedrooms)

    return query.order_by(Property.id.desc()).all()


def fetch_filtered_rent(db: Session, filters: RentResaleFilters) -> list[Property]:
    """Get rentals filtered by price range and bedroom count."""
    return _fetch_filtered_by_listing_type(db, ListingType.RENT, filters)


def fetch_filtered_resale(db: Session, filters: RentResaleFilters) -> list[Property]:
    """Get resale properties filtered by price range and bedroom count."""
    return _fetch_filtered_by_listing_type(db, ListingType.RESALE, filters)


def _to_price_range(query: Query) -> PriceRange:
    low, high = query.one()
    if low is None or high is None:
        return PriceRange()
    return PriceRange(min=low, max=high)


def fetch_project_price_range(db: Session) -> PriceRange:
    """Min and max unit price across all projects."""
    type_ids = resolve_listing_type_ids(db, ListingType.PROJECT)
    if not type_ids:
        return PriceRange()
    query = (
        db.query(func.min(PropertyUnit.price), func.max(PropertyUnit.price))
        .join(Property, PropertyUnit.property_id == Property.id)
        .filter(Property.property_type_id.in_(type_ids), PropertyUnit.price.is_not(None))
    )
    return _to_price_range(query)


def _property_price_range(db: Session, listing_type: ListingType) -> PriceRange:
    type_ids = resolve_listing_type_ids(db, listing_type)
    if not type_ids:
        return PriceRange()
    query = db.query(func.min(Property.price), func.max(Property.price)).filter(
        Property.property_type_id.in_(type_ids),
        Property.price.is_not(None),
    )
    return _to_price_range(query)


def fetch_rent_price_range(db: Session) -> PriceRange:
    """Min and max asking price across rentals."""
    return _property_price_range(db, ListingType.RENT)


def fetch_resale_price_range(db: Session) -> PriceRange:
    """Min and max asking price across resale listings."""
    return _property_price_range(db, ListingType.RESALE)


def fetch_price_ranges(db: Session) -> PriceRanges:
    return PriceRanges(
        Project=fetch_project_price_range(db),
        Rent=fetch_rent_price_range(db),
        Resale=fetch_resale_price_range(db),
    )


def fetch_search_meta(db: Session) -> SearchMeta:
    """Distinct cities, price ranges per listing type and property types."""
    city_rows = db.query(PropertyLocation.city).filter(PropertyLocation.city.is_not(None)).distinct()
    cities = {row.city.strip() for row in city_rows if row.city and row.city.strip()}

    property_types = db.query(PropertyType).order_by(PropertyType.name).all()

    return SearchMeta(
        cities=sorted(cities, key=str.casefold),
        price_ranges=fetch_price_ranges(db),
        property_types=[PropertyTypeOption.model_validate(t) for t in property_types],
    )


def escape_like_pattern(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_properties(db: Session, search_term: str, limit: int | None = None) -> list[Property]:
    """Search properties by title and by location fields.

    Title matches and matches on street, city, state or zip are merged
    without duplicates, sorted newest first and capped at ``limit``.
    """
    trimmed = search_term.strip()
    if not trimmed:
        return []

    pattern = f"%{escape_like_pattern(trimmed)}%"
    cap = limit or settings.SEARCH_DEFAULT_LIMIT

    title_ids = [
        row.id
        for row in db.query(Property.id)
        .filter(Property.title.ilike(pattern, escape=LIKE_ESCAPE))
        .order_by(Property.id.desc())
        .limit(cap)
    ]

    location_ids = [
        row.id
        for row in db.query(PropertyLocation.id)
        .filter(
            or_(
                PropertyLocation.streetaddress.ilike(pattern, escape=LIKE_ESCAPE),
                PropertyLocation.city.ilike(pattern, escape=LIKE_ESCAPE),
                PropertyLocation.state.ilike(pattern, escape=LIKE_ESCAPE),
                PropertyLocation.zip_code.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )
        .limit(settings.SEARCH_LOCATION_LIMIT)
    ]

    location_property_ids: list[int] = []
    if location_ids:
        location_property_ids = [
            row.id
            for row in db.query(Property.id)
            .filter(Property.property_location_id.in_(location_ids))
            .order_by(Property.id.desc())
            .limit(cap)
        ]

    merged = sorted(dict.fromkeys(title_ids + location_property_ids), reverse=True)
    if limit:
        merged = merged[:limit]

    logger.debug("Property search", term=trimmed, results=len(merged))
    if not merged:
        return []

    return (
        db.query(Property)
        .options(*_card_options())
        .filter(Property.id.in_(merged))
        .order_by(Property.id.desc())
        .all()
    )


def search_properties_by_city(db: Session, city: str) -> list[Property]:
    """Fallback search: exact city match, ignoring case."""
    city_trimmed = city.strip()
    if not city_trimmed:
        return []

    location_ids = [
        row.id
        for row in db.query(PropertyLocation.id).filter(
            func.lower(PropertyLocation.city) == city_trimmed.lower()
        )
    ]
    if not location_ids:
        return []

    return (
        db.query(Property)
        .options(*_card_options())
        .filter(Property.property_location_id.in_(location_ids))
        .order_by(Property.id.desc())
        .all()
    )


def search_with_city_fallback(db: Session, search_term: str, limit: int | None = None) -> list[Property]:
    """Text search, falling back to an exact city match when nothing is found."""
    results = search_properties(db, search_term, limit)
    if results:
        return results
    return search_properties_by_city(db, search_term)


def fetch_featured_videos(db: Session, limit: int | None = None) -> list[PropertyMedia]:
    """Featured property videos, newest first."""
    return (
        db.query(PropertyMedia)
        .filter(
            PropertyMedia.media_type == MediaType.VIDEO.value,
            PropertyMedia.is_featured.is_(True),
        )
        .order_by(PropertyMedia.created_at.desc(), PropertyMedia.id.desc())
        .limit(limit or settings.FEATURED_VIDEOS_LIMIT)
        .all()
    )


def fetch_all_property_slugs(db: Session) -> list[tuple[int, str | None]]:
    """Id and title of every property, newest first (for the sitemap)."""
    rows = db.query(Property.id, Property.title).order_by(Property.id.desc()).all()
    return [(row.id, row.title) for row in rows]


def paginate(items: Sequence[T], page: int, page_size: int | None = None) -> tuple[list[T], int, int]:
    """Slice a result list for display; returns (items, page, total_pages)."""
    size = page_size or settings.PAGE_SIZE
    total_pages = max(1, math.ceil(len(items) / size))
    page = min(max(1, page), total_pages)
    start = (page - 1) * size
    return list(items[start : start + size]), page, total_pages


def suggest_properties(db: Session, search_term: str) -> list[Property]:
    """Top matches for the search box as the user types."""
    return search_properties(db, search_term, settings.SEARCH_SUGGESTIONS_LIMIT)
