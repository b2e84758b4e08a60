"""Amenity database model."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from estatehub.core.database import Base

if TYPE_CHECKING:
    from estatehub.models.property import Property


class Amenity(Base):
    """Feature offered by a property (pool, gym, parking...)."""

    __tablename__ = "amenities"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True)

    properties: Mapped[list["Property"]] = relationship(
        secondary="property_amenities",
        back_populates="amenities",
    )
