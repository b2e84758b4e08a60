"""Appointment booking API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estatehub.api.dependencies import get_request_user
from estatehub.core.database import get_db
from estatehub.models.user import User
from estatehub.schemas.appointment import AppointmentCreate, AppointmentCreated, AppointmentWithDetails
from estatehub.services.appointment import create_appointment, fetch_user_appointments

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.post("", response_model=AppointmentCreated, status_code=status.HTTP_201_CREATED)
def book_appointment(
    appointment_data: AppointmentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_request_user),
) -> AppointmentCreated:
    """Book a viewing for the signed-in user."""
    appointment = create_appointment(db, current_user, appointment_data)
    return AppointmentCreated(id=appointment.id)


@router.get("/mine", response_model=list[AppointmentWithDetails])
def my_appointments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_request_user),
) -> list[AppointmentWithDetails]:
    """Appointments booked by the signed-in user."""
    return fetch_user_appointments(db, current_user.id)
