"""Public listing schemas: cards, details, filters and search metadata."""

from pydantic import BaseModel

from estatehub.models.enums import UnitStatus
from estatehub.schemas.property import (
    AmenityResponse,
    LocationResponse,
    MediaResponse,
    UnitResponse,
)


class PropertyCard(BaseModel):
    """A property with its media and location, as shown in listing grids."""

    id: int
    title: str | None
    price: float | None
    bedrooms: int | None
    bathrooms: int | None
    square_feet: float | None
    year_built: int | None = None
    about_property: str | None = None
    listing_type: str | None = None
    status: str | None = None
    property_type_id: int | None = None
    property_location_id: int | None
    media: list[MediaResponse] = []
    location: LocationResponse | None = None

    model_config = {"from_attributes": True}


class ProjectCard(PropertyCard):
    """A project listing with its units and amenities."""

    units: list[UnitResponse] = []
    amenities: list[AmenityResponse] = []


class PropertyDetail(ProjectCard):
    """Full detail of a single property."""


class ProjectFilters(BaseModel):
    """Filters for new projects; applied to the project's units."""

    project_status: UnitStatus | None = None
    min_price: float | None = None
    max_price: float | None = None


class RentResaleFilters(BaseModel):
    """Filters for rent and resale listings; applied to the property itself."""

    min_price: float | None = None
    max_price: float | None = None
    bedrooms: int | None = None


class PriceRange(BaseModel):
    """Minimum and maximum price; both zero when there is no data."""

    min: float = 0
    max: float = 0


class PriceRanges(BaseModel):
    """Price range per listing type."""

    Project: PriceRange
    Rent: PriceRange
    Resale: PriceRange


class PropertyTypeOption(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class SearchMeta(BaseModel):
    """Data for the hero search bar."""

    cities: list[str]
    price_ranges: PriceRanges
    property_types: list[PropertyTypeOption]


class FeaturedVideo(BaseModel):
    id: int
    property_id: int
    file_url: str
    thumbnail_url: str | None

    model_config = {"from_attributes": True}


class PropertySlugEntry(BaseModel):
    id: int
    title: str | None

    model_config = {"from_attributes": True}
