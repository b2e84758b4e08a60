"""Compare list schemas."""

from datetime import datetime

from pydantic import BaseModel

from estatehub.models.enums import ListingType


class CompareProperty(BaseModel):
    """A property selected for side-by-side comparison."""

    id: str
    title: str = ""
    price: str = ""
    image: str = ""
    location: str | None = None
    beds: str | None = None
    baths: str | None = None
    sqft: str | None = None
    listing_type: ListingType = ListingType.RESALE


class CompareState(BaseModel):
    """Current compare list plus any pending notice for the user."""

    properties: list[CompareProperty]
    toast: str | None = None


class ComparisonPropertyRef(BaseModel):
    id: int
    title: str | None

    model_config = {"from_attributes": True}


class ComparisonResponse(BaseModel):
    """Saved comparison with client and property details."""

    id: int
    created_at: datetime
    user_id: int | None
    listing_type: int | None
    property_one_id: int | None
    property_two_id: int | None
    property_three_id: int | None
    client_name: str | None = None
    client_phone: str | None = None
    property_one: ComparisonPropertyRef | None = None
    property_two: ComparisonPropertyRef | None = None
    property_three: ComparisonPropertyRef | None = None
