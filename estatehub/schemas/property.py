"""Property Pydantic schemas for the admin back office."""

from datetime import datetime

from pydantic import BaseModel

from estatehub.models.enums import ListingType, MediaType, UnitStatus


class LocationResponse(BaseModel):
    """Schema for a property location."""

    id: int
    streetaddress: str
    city: str
    state: str
    zip_code: str

    model_config = {"from_attributes": True}


class MediaResponse(BaseModel):
    """Schema for a property image or video."""

    id: int
    property_id: int
    file_url: str
    thumbnail_url: str | None = None
    media_type: str
    is_featured: bool

    model_config = {"from_attributes": True}


class MediaCreate(BaseModel):
    """Schema for attaching an already-hosted file to a property."""

    file_url: str
    media_type: MediaType = MediaType.IMAGE
    thumbnail_url: str | None = None
    is_featured: bool = False


class VideoResponse(MediaResponse):
    """Schema for a property video with its property title."""

    created_at: datetime | None = None
    property_title: str | None = None


class FeaturedToggle(BaseModel):
    """Schema for toggling a video's featured flag."""

    is_featured: bool


class UnitBase(BaseModel):
    """Shared unit fields."""

    unit_number: str | None = None
    floor: int | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    square_feet: float | None = None
    price: float | None = None


class UnitCreate(UnitBase):
    """Schema for adding a unit to a project."""

    status: UnitStatus = UnitStatus.UNDER_CONSTRUCTION


class UnitUpdate(UnitBase):
    """Schema for updating a unit."""

    status: UnitStatus | None = None


class UnitResponse(UnitBase):
    """Schema for unit response."""

    id: int
    property_id: int
    status: str | None = None

    model_config = {"from_attributes": True}


class AmenityCreate(BaseModel):
    """Schema for creating or renaming an amenity."""

    name: str


class AmenityResponse(BaseModel):
    """Schema for amenity response."""

    id: int
    name: str

    model_config = {"from_attributes": True}


class PropertyTypeCreate(BaseModel):
    """Schema for creating or updating a property type."""

    name: str
    description: str


class PropertyTypeResponse(BaseModel):
    """Schema for property type response."""

    id: int
    name: str
    description: str

    model_config = {"from_attributes": True}


class PropertyCreate(BaseModel):
    """Schema for the admin "add property" form.

    Most fields are optional here so that the service can report
    missing values with form-friendly messages.
    """

    title: str = ""
    description: str | None = None
    property_type_id: int | None = None
    listing_type: ListingType | None = None
    price: float | None = None
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    bedrooms: int | None = 0
    bathrooms: int | None = 0
    square_feet: float | None = None
    year_built: int | None = 2023
    amenity_ids: list[int] = []
    is_project: bool = False


class PropertyUpdate(BaseModel):
    """Schema for updating a property; unset fields are left untouched."""

    title: str | None = None
    about_property: str | None = None
    property_type_id: int | None = None
    listing_type: ListingType | None = None
    status: str | None = None
    price: float | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    square_feet: float | None = None
    year_built: int | None = None
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    amenity_ids: list[int] | None = None


class PropertyAdminResponse(BaseModel):
    """Schema for a property row in the admin list."""

    id: int
    title: str | None
    price: float | None
    listing_type: str | None
    status: str | None
    property_type_id: int | None
    property_location_id: int | None
    created_at: datetime

    model_config = {"from_attributes": True}


class PropertyCreated(BaseModel):
    """Schema returned after creating a property."""

    success: bool = True
    property_id: int
