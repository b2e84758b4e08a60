"""Public listing API routes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.core.errors import not_found
from estatehub.models.enums import ListingType, UnitStatus
from estatehub.schemas.listing import (
    FeaturedVideo,
    PriceRanges,
    ProjectCard,
    ProjectFilters,
    PropertyCard,
    PropertyDetail,
    PropertySlugEntry,
    RentResaleFilters,
    SearchMeta,
)
from estatehub.services import listing

router = APIRouter(prefix="/listings", tags=["listings"])


@router.get("/projects", response_model=list[ProjectCard])
def list_projects(
    project_status: UnitStatus | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    db: Session = Depends(get_db),
) -> list[ProjectCard]:
    """List projects; filters apply to the project's units."""
    filters = ProjectFilters(project_status=project_status, min_price=min_price, max_price=max_price)
    projects = listing.fetch_projects(db, filters)
    return [ProjectCard.model_validate(p) for p in projects]


@router.get("/rent", response_model=list[PropertyCard])
def list_rent(
    min_price: float | None = None,
    max_price: float | None = None,
    bedrooms: int | None = None,
    db: Session = Depends(get_db),
) -> list[PropertyCard]:
    """List rentals."""
    filters = RentResaleFilters(min_price=min_price, max_price=max_price, bedrooms=bedrooms)
    return [PropertyCard.model_validate(p) for p in listing.fetch_filtered_rent(db, filters)]


@router.get("/resale", response_model=list[PropertyCard])
def list_resale(
    min_price: float | None = None,
    max_price: float | None = None,
    bedrooms: int | None = None,
    db: Session = Depends(get_db),
) -> list[PropertyCard]:
    """List resale properties."""
    filters = RentResaleFilters(min_price=min_price, max_price=max_price, bedrooms=bedrooms)
    return [PropertyCard.model_validate(p) for p in listing.fetch_filtered_resale(db, filters)]


@router.get("/price-ranges", response_model=PriceRanges)
def price_ranges(db: Session = Depends(get_db)) -> PriceRanges:
    """Min and max price per listing type."""
    return listing.fetch_price_ranges(db)


@router.get("/search-meta", response_model=SearchMeta)
def search_meta(db: Session = Depends(get_db)) -> SearchMeta:
    """Cities, price ranges and property types for the search bar."""
    return listing.fetch_search_meta(db)


@router.get("/search", response_model=list[PropertyCard])
def search(
    q: str = "",
    limit: int | None = Query(None, ge=1, le=500),
    db: Session = Depends(get_db),
) -> list[PropertyCard]:
    """Search by title and location, falling back to an exact city match."""
    results = listing.search_with_city_fallback(db, q, limit)
    return [PropertyCard.model_validate(p) for p in results]


@router.get("/suggestions", response_model=list[PropertySlugEntry])
def suggestions(q: str = "", db: Session = Depends(get_db)) -> list[PropertySlugEntry]:
    """A few title or location matches for search-as-you-type."""
    return [PropertySlugEntry.model_validate(p) for p in listing.suggest_properties(db, q)]


@router.get("/featured-videos", response_model=list[FeaturedVideo])
def featured_videos(
    limit: int | None = Query(None, ge=1, le=50),
    db: Session = Depends(get_db),
) -> list[FeaturedVideo]:
    """Featured property videos for the home page."""
    return [FeaturedVideo.model_validate(v) for v in listing.fetch_featured_videos(db, limit)]


@router.get("/type/{listing_type}", response_model=list[PropertyCard])
def list_by_listing_type(listing_type: ListingType, db: Session = Depends(get_db)) -> list[PropertyCard]:
    """All properties of one listing type."""
    return [PropertyCard.model_validate(p) for p in listing.fetch_properties_by_listing_type(db, listing_type)]


@router.get("/{property_id}", response_model=PropertyDetail)
def get_listing(property_id: int, db: Session = Depends(get_db)) -> PropertyDetail:
    """Get a property with units, amenities and media."""
    prop = listing.fetch_property_by_id(db, property_id)
    if not prop:
        raise not_found("Property")
    return PropertyDetail.model_validate(prop)


@router.get("/{property_id}/similar", response_model=list[PropertyCard])
def similar_listings(property_id: int, db: Session = Depends(get_db)) -> list[PropertyCard]:
    """Other properties with the same listing type."""
    prop = listing.fetch_property_by_id(db, property_id)
    if not prop:
        raise not_found("Property")
    if not prop.listing_type:
        return []
    similar = listing.fetch_similar_properties(db, prop.listing_type, prop.id)
    return [PropertyCard.model_validate(p) for p in similar]
