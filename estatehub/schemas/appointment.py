"""Appointment Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel

from estatehub.models.enums import AppointmentStatus


class AppointmentCreate(BaseModel):
    """Schema for booking a property viewing."""

    property_id: int
    appointment_date: datetime
    full_name: str | None = None
    phone: str | None = None
    email: str | None = None


class AppointmentCreated(BaseModel):
    id: int


class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus


class AppointmentWithDetails(BaseModel):
    """Appointment joined with property and client details."""

    id: int
    property_id: int
    user_id: int
    appointment_date: datetime
    status: str = AppointmentStatus.PENDING.value
    created_at: datetime | None = None
    property_title: str | None = None
    property_image: str | None = None
    property_location: str | None = None
    client_name: str | None = None
    client_email: str | None = None
    client_phone: str | None = None
