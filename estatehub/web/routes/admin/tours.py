"""Admin scheduled tour (appointment) pages."""

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.models.enums import AppointmentStatus
from estatehub.services import appointment as appointment_service
from estatehub.web.dependencies import add_flash_message, admin_login_redirect, get_admin_from_session
from estatehub.web.template_config import templates

router = APIRouter()


@router.get("", response_class=HTMLResponse, response_model=None)
async def tours_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse | RedirectResponse:
    """List appointments, optionally filtered by status."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    status_filter = None
    status_value = request.query_params.get("status")
    if status_value:
        try:
            status_filter = AppointmentStatus(status_value)
        except ValueError:
            add_flash_message(request, f"Unknown status '{status_value}'.", "error")

    return templates.TemplateResponse(
        request,
        "admin/tours/list.html",
        {
            "user": admin,
            "appointments": appointment_service.fetch_appointments(db, status_filter),
            "statuses": list(AppointmentStatus),
            "status_filter": status_filter,
        },
    )


@router.get("/{appointment_id}", response_class=HTMLResponse, response_model=None)
async def tour_detail(
    request: Request,
    appointment_id: int,
    db: Session = Depends(get_db),
) -> HTMLResponse | RedirectResponse:
    """Display one appointment with the status form."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    appointment = appointment_service.fetch_appointment_by_id(db, appointment_id)
    if not appointment:
        add_flash_message(request, "Appointment not found.", "error")
        return RedirectResponse("/admin/scheduled-tours", status_code=303)

    return templates.TemplateResponse(
        request,
        "admin/tours/detail.html",
        {"user": admin, "appointment": appointment, "statuses": list(AppointmentStatus)},
    )


@router.post("/{appointment_id}/status", response_model=None)
async def update_status(
    request: Request,
    appointment_id: int,
    status: str = Form(...),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Change the status of an appointment."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        appointment_service.update_appointment_status(db, appointment_id, status)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Status updated.", "success")
    return RedirectResponse(f"/admin/scheduled-tours/{appointment_id}", status_code=303)
