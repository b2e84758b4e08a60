"""Admin appointment (scheduled tour) routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.core.errors import not_found
from estatehub.models.enums import AppointmentStatus
from estatehub.schemas.appointment import AppointmentStatusUpdate, AppointmentWithDetails
from estatehub.services import appointment as appointment_service

router = APIRouter(prefix="/appointments")


@router.get("", response_model=list[AppointmentWithDetails])
def list_appointments(
    status: AppointmentStatus | None = None,
    db: Session = Depends(get_db),
) -> list[AppointmentWithDetails]:
    """List appointments, latest appointment date first."""
    return appointment_service.fetch_appointments(db, status)


@router.get("/{appointment_id}", response_model=AppointmentWithDetails)
def get_appointment(appointment_id: int, db: Session = Depends(get_db)) -> AppointmentWithDetails:
    """Get an appointment with property and client details."""
    appointment = appointment_service.fetch_appointment_by_id(db, appointment_id)
    if not appointment:
        raise not_found("Appointment")
    return appointment


@router.patch("/{appointment_id}", response_model=AppointmentWithDetails)
def update_status(
    appointment_id: int,
    data: AppointmentStatusUpdate,
    db: Session = Depends(get_db),
) -> AppointmentWithDetails:
    """Change the status of an appointment."""
    return appointment_service.update_appointment_status(db, appointment_id, data.status)
