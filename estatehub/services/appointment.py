"""Appointment service: booking property viewings and managing them."""

from sqlalchemy.orm import Session, joinedload, selectinload
from structlog import get_logger

from estatehub.core.errors import bad_request, not_found
from estatehub.models.appointment import Appointment
from estatehub.models.enums import AppointmentStatus
from estatehub.models.property import Property
from estatehub.models.user import User
from estatehub.schemas.appointment import AppointmentCreate, AppointmentWithDetails
from estatehub.services.formatting import format_location, get_first_image

logger = get_logger(__name__)


def _display_name(full_name: str | None, email: str | None, current: str | None) -> str:
    """Given name, else the local part of the email, else the current name, else "Guest"."""
    if full_name and full_name.strip():
        return full_name.strip()
    if email and "@" in email:
        local = email.split("@", 1)[0].strip()
        if local:
            return local
    if current and current.strip():
        return current.strip()
    return "Guest"


def create_appointment(db: Session, user: User, data: AppointmentCreate) -> Appointment:
    """Book a viewing for the signed-in user.

    The profile's name and phone are updated from the booking form so the
    sales team can reach the client.
    """
    exists = db.query(Property.id).filter(Property.id == data.property_id).first()
    if not exists:
        raise not_found("Property")

    user.full_name = _display_name(data.full_name, data.email, user.full_name)
    if data.phone and data.phone.strip():
        user.phone = data.phone.strip()

    appointment = Appointment(
        property_id=data.property_id,
        user_id=user.id,
        appointment_date=data.appointment_date,
        status=AppointmentStatus.PENDING.value,
    )
    db.add(appointment)
    db.commit()
    db.refresh(appointment)
    logger.info(
        "Appointment booked",
        appointment_id=appointment.id,
        property_id=data.property_id,
        user_id=user.id,
    )
    return appointment


def _with_details(appointment: Appointment) -> AppointmentWithDetails:
    prop = appointment.parent_property
    client = appointment.user
    return AppointmentWithDetails(
        id=appointment.id,
        property_id=appointment.property_id,
        user_id=appointment.user_id,
        appointment_date=appointment.appointment_date,
        status=appointment.status or AppointmentStatus.PENDING.value,
        created_at=appointment.created_at,
        property_title=prop.title if prop else None,
        property_image=get_first_image(prop.media) if prop else None,
        property_location=format_location(prop.location) if prop else None,
        client_name=client.full_name if client else None,
        client_email=client.email if client else None,
        client_phone=client.phone if client else None,
    )


def _details_query(db: Session):
    return db.query(Appointment).options(
        joinedload(Appointment.user),
        joinedload(Appointment.parent_property).joinedload(Property.location),
        joinedload(Appointment.parent_property).selectinload(Property.media),
    )


def fetch_appointments(db: Session, status: AppointmentStatus | None = None) -> list[AppointmentWithDetails]:
    """All appointments, latest appointment date first."""
    query = _details_query(db)
    if status is not None:
        query = query.filter(Appointment.status == status.value)
    rows = query.order_by(Appointment.appointment_date.desc(), Appointment.id.desc()).all()
    return [_with_details(row) for row in rows]


def fetch_user_appointments(db: Session, user_id: int) -> list[AppointmentWithDetails]:
    """Appointments booked by one user, latest first."""
    rows = (
        _details_query(db)
        .filter(Appointment.user_id == user_id)
        .order_by(Appointment.appointment_date.desc(), Appointment.id.desc())
        .all()
    )
    return [_with_details(row) for row in rows]


def fetch_appointment_by_id(db: Session, appointment_id: int) -> AppointmentWithDetails | None:
    """Get one appointment with its details, or None."""
    appointment = _details_query(db).filter(Appointment.id == appointment_id).first()
    return _with_details(appointment) if appointment else None


def update_appointment_status(
    db: Session,
    appointment_id: int,
    new_status: AppointmentStatus | str,
) -> AppointmentWithDetails:
    """Move an appointment to another status."""
    try:
        status_value = AppointmentStatus(new_status).value
    except ValueError as exc:
        raise bad_request(f"Invalid appointment status: {new_status}") from exc

    appointment = db.query(Appointment).filter(Appointment.id == appointment_id).first()
    if not appointment:
        raise not_found("Appointment")
    appointment.status = status_value
    db.commit()
    logger.info("Appointment status changed", appointment_id=appointment_id, status=status_value)
    db.refresh(appointment)
    return _with_details(appointment)
