"""Association tables for many-to-many relationships."""

from sqlalchemy import Column, ForeignKey, Table

from estatehub.core.database import Base

# Many-to-many: Property <-> Amenity
property_amenities = Table(
    "property_amenities",
    Base.metadata,
    Column("property_id", ForeignKey("properties.id", ondelete="CASCADE"), primary_key=True),
    Column("amenity_id", ForeignKey("amenities.id", ondelete="CASCADE"), primary_key=True),
)
