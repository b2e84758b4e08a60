"""User profile database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from estatehub.core.database import Base
from estatehub.models.enums import UserRole

if TYPE_CHECKING:
    from estatehub.models.appointment import Appointment


class User(Base):
    """User profile used for authentication, appointments and saved comparisons."""

    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    email: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))
    full_name: Mapped[str | None] = mapped_column(String(120), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    role: Mapped[UserRole] = mapped_column(String(10), default=UserRole.USER)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    is_active: Mapped[bool] = mapped_column(default=True)

    # Relationships
    appointments: Mapped[list["Appointment"]] = relationship(back_populates="user")

    def get_is_admin(self) -> bool:
        """Check if this profile has the admin role."""
        return self.role == UserRole.ADMIN
