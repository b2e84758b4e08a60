"""Database models; importing the package registers every mapper."""

from estatehub.models.amenity import Amenity
from estatehub.models.appointment import Appointment
from estatehub.models.associations import property_amenities
from estatehub.models.cms import (
    CompanyInfo,
    CompanyStat,
    ContactInquiry,
    Faq,
    HeroSection,
    LegalPage,
    Service,
    SiteSection,
    TeamMember,
    Testimonial,
)
from estatehub.models.comparison import Comparison
from estatehub.models.property import (
    Property,
    PropertyLocation,
    PropertyMedia,
    PropertyType,
    PropertyUnit,
)
from estatehub.models.user import User

__all__ = [
    "Amenity",
    "Appointment",
    "CompanyInfo",
    "CompanyStat",
    "Comparison",
    "ContactInquiry",
    "Faq",
    "HeroSection",
    "LegalPage",
    "Property",
    "PropertyLocation",
    "PropertyMedia",
    "PropertyType",
    "PropertyUnit",
    "Service",
    "SiteSection",
    "TeamMember",
    "Testimonial",
    "User",
    "property_amenities",
]
