"""Enum definitions for listings, units and appointments."""

from enum import Enum


class ListingType(str, Enum):
    """Listing-type category of a property record."""

    PROJECT = "Project"
    RENT = "Rent"
    RESALE = "Resale"


class UserRole(str, Enum):
    """Profile role."""

    ADMIN = "admin"
    USER = "user"


class MediaType(str, Enum):
    """Kind of file attached to a property."""

    IMAGE = "image"
    VIDEO = "video"


class UnitStatus(str, Enum):
    """Construction/sale status of a project unit."""

    UNDER_CONSTRUCTION = "under_construction"
    READY_TO_MOVE = "ready_to_move"
    AVAILABLE = "available"
    SOLD = "sold"


class AppointmentStatus(str, Enum):
    """Lifecycle of a scheduled tour."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Numeric codes stored on saved comparisons
LISTING_TYPE_CODES: dict[ListingType, int] = {
    ListingType.PROJECT: 1,
    ListingType.RENT: 2,
    ListingType.RESALE: 3,
}
