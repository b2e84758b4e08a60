"""Appointment (scheduled tour) database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from estatehub.core.database import Base
from estatehub.models.enums import AppointmentStatus

if TYPE_CHECKING:
    from estatehub.models.property import Property
    from estatehub.models.user import User


class Appointment(Base):
    """A user's request to view a property on a given date."""

    __tablename__ = "appointments"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    property_id: Mapped[int] = mapped_column(ForeignKey("properties.id"), index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("profiles.id"), index=True)
    appointment_date: Mapped[datetime] = mapped_column(index=True)
    status: Mapped[str | None] = mapped_column(
        String(20),
        default=AppointmentStatus.PENDING,
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    parent_property: Mapped["Property"] = relationship(back_populates="appointments")
    user: Mapped["User"] = relationship(back_populates="appointments")
