"""Property listing database models."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from estatehub.core.database import Base
from estatehub.models.enums import MediaType

if TYPE_CHECKING:
    from estatehub.models.amenity import Amenity
    from estatehub.models.appointment import Appointment


class PropertyType(Base):
    """Category a property belongs to; names map onto listing types."""

    __tablename__ = "property_types"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    description: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    properties: Mapped[list["Property"]] = relationship(back_populates="property_type")


class PropertyLocation(Base):
    """Postal address of a property."""

    __tablename__ = "property_locations"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    streetaddress: Mapped[str] = mapped_column(String(255))
    city: Mapped[str] = mapped_column(String(100), index=True)
    state: Mapped[str] = mapped_column(String(100))
    zip_code: Mapped[str] = mapped_column(String(20))
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))


class Property(Base):
    """A listed property: a project, a rental or a resale unit."""

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str | None] = mapped_column(String(200), index=True, nullable=True)
    about_property: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[float | None] = mapped_column(nullable=True, index=True)
    bedrooms: Mapped[int | None] = mapped_column(nullable=True)
    bathrooms: Mapped[int | None] = mapped_column(nullable=True)
    square_feet: Mapped[float | None] = mapped_column(nullable=True)
    year_built: Mapped[int | None] = mapped_column(nullable=True)
    listing_type: Mapped[str | None] = mapped_column(String(20), nullable=True, index=True)
    status: Mapped[str | None] = mapped_column(String(30), nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    # Foreign keys
    property_type_id: Mapped[int | None] = mapped_column(
        ForeignKey("property_types.id"),
        nullable=True,
        index=True,
    )
    property_location_id: Mapped[int | None] = mapped_column(
        ForeignKey("property_locations.id"),
        nullable=True,
        index=True,
    )

    # Relationships
    property_type: Mapped["PropertyType | None"] = relationship(back_populates="properties")
    location: Mapped["PropertyLocation | None"] = relationship()
    media: Mapped[list["PropertyMedia"]] = relationship(
        back_populates="parent_property",
        cascade="all, delete-orphan",
        order_by="PropertyMedia.id",
    )
    units: Mapped[list["PropertyUnit"]] = relationship(
        back_populates="parent_property",
        cascade="all, delete-orphan",
        order_by="PropertyUnit.id",
    )
    amenities: Mapped[list["Amenity"]] = relationship(
        secondary="property_amenities",
        back_populates="properties",
        order_by="Amenity.name",
    )
    appointments: Mapped[list["Appointment"]] = relationship(
        back_populates="parent_property",
        cascade="all, delete-orphan",
    )


class PropertyMedia(Base):
    """Image or video attached to a property."""

    __tablename__ = "property_media"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    property_id: Mapped[int] = mapped_column(ForeignKey("properties.id"), index=True)
    file_url: Mapped[str] = mapped_column(String(500))
    thumbnail_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    media_type: Mapped[MediaType] = mapped_column(String(10), default=MediaType.IMAGE)
    is_featured: Mapped[bool] = mapped_column(default=False)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    parent_property: Mapped["Property"] = relationship(back_populates="media")


class PropertyUnit(Base):
    """Individual unit inside a project."""

    __tablename__ = "property_units"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    property_id: Mapped[int] = mapped_column(ForeignKey("properties.id"), index=True)
    unit_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    floor: Mapped[int | None] = mapped_column(nullable=True)
    bedrooms: Mapped[int | None] = mapped_column(nullable=True)
    bathrooms: Mapped[int | None] = mapped_column(nullable=True)
    square_feet: Mapped[float | None] = mapped_column(nullable=True)
    price: Mapped[float | None] = mapped_column(nullable=True, index=True)
    status: Mapped[str | None] = mapped_column(String(30), nullable=True, index=True)

    parent_property: Mapped["Property"] = relationship(back_populates="units")
