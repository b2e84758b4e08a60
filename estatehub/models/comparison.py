"""Saved property comparison database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from estatehub.core.database import Base

if TYPE_CHECKING:
    from estatehub.models.property import Property
    from estatehub.models.user import User


class Comparison(Base):
    """Up to three properties a signed-in user compared side by side."""

    __tablename__ = "comparisons"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int | None] = mapped_column(ForeignKey("profiles.id"), nullable=True, index=True)
    property_one_id: Mapped[int | None] = mapped_column(
        ForeignKey("properties.id", ondelete="SET NULL"),
        nullable=True,
    )
    property_two_id: Mapped[int | None] = mapped_column(
        ForeignKey("properties.id", ondelete="SET NULL"),
        nullable=True,
    )
    property_three_id: Mapped[int | None] = mapped_column(
        ForeignKey("properties.id", ondelete="SET NULL"),
        nullable=True,
    )
    listing_type: Mapped[int | None] = mapped_column(nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    user: Mapped["User | None"] = relationship()
    property_one: Mapped["Property | None"] = relationship(foreign_keys=[property_one_id])
    property_two: Mapped["Property | None"] = relationship(foreign_keys=[property_two_id])
    property_three: Mapped["Property | None"] = relationship(foreign_keys=[property_three_id])
