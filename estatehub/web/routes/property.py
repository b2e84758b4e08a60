"""Property detail and appointment booking pages."""

from datetime import datetime

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.models.property import Property
from estatehub.schemas.appointment import AppointmentCreate
from estatehub.services import listing
from estatehub.services.appointment import create_appointment
from estatehub.services.compare import CompareList
from estatehub.services.slug import parse_property_id_from_slug, to_property_slug
from estatehub.web.dependencies import add_flash_message, get_current_user_from_session
from estatehub.web.template_config import templates

router = APIRouter()


def _not_found(request: Request, user) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"user": user, "message": "This property could not be found."},
        status_code=404,
    )


def _load(db: Session, slug: str) -> Property | None:
    property_id = parse_property_id_from_slug(slug)
    if property_id is None:
        return None
    return listing.fetch_property_by_id(db, property_id)


@router.get("/{slug}", response_class=HTMLResponse, response_model=None)
async def property_detail(
    request: Request,
    slug: str,
    db: Session = Depends(get_db),
) -> HTMLResponse | RedirectResponse:
    """Display a property; non-canonical slugs redirect to the canonical URL."""
    user = get_current_user_from_session(request, db)
    prop = _load(db, slug)
    if not prop:
        return _not_found(request, user)

    canonical = to_property_slug(prop.title, prop.id)
    if slug != canonical:
        return RedirectResponse(f"/property/{canonical}", status_code=301)

    similar = []
    if prop.listing_type:
        similar = listing.fetch_similar_properties(db, prop.listing_type, prop.id)

    return templates.TemplateResponse(
        request,
        "property/detail.html",
        {
            "user": user,
            "property": prop,
            "listing_type": listing.resolve_listing_type(prop),
            "similar": similar,
            "in_compare": CompareList.from_session(request.session).contains(str(prop.id)),
        },
    )


@router.get("/{slug}/appointment", response_class=HTMLResponse, response_model=None)
async def appointment_page(
    request: Request,
    slug: str,
    db: Session = Depends(get_db),
) -> HTMLResponse | RedirectResponse:
    """Display the viewing request form."""
    user = get_current_user_from_session(request, db)
    if not user:
        return RedirectResponse(f"/login?next={request.url.path}", status_code=303)
    prop = _load(db, slug)
    if not prop:
        return _not_found(request, user)

    return templates.TemplateResponse(
        request,
        "property/appointment.html",
        {"user": user, "property": prop},
    )


@router.post("/{slug}/appointment", response_class=HTMLResponse, response_model=None)
async def appointment_submit(
    request: Request,
    slug: str,
    appointment_date: str = Form(...),
    full_name: str = Form(""),
    phone: str = Form(""),
    email: str = Form(""),
    db: Session = Depends(get_db),
) -> HTMLResponse | RedirectResponse:
    """Book a viewing."""
    user = get_current_user_from_session(request, db)
    if not user:
        return RedirectResponse(f"/login?next={request.url.path}", status_code=303)
    prop = _load(db, slug)
    if not prop:
        return _not_found(request, user)

    try:
        when = datetime.fromisoformat(appointment_date)
    except ValueError:
        return templates.TemplateResponse(
            request,
            "property/appointment.html",
            {"user": user, "property": prop, "error": "Choose a valid date and time."},
            status_code=400,
        )

    data = AppointmentCreate(
        property_id=prop.id,
        appointment_date=when,
        full_name=full_name or None,
        phone=phone or None,
        email=email or None,
    )
    try:
        create_appointment(db, user, data)
    except HTTPException as exc:
        return templates.TemplateResponse(
            request,
            "property/appointment.html",
            {"user": user, "property": prop, "error": exc.detail},
            status_code=exc.status_code,
        )

    add_flash_message(request, "Your visit has been scheduled. We will contact you shortly.", "success")
    return RedirectResponse(f"/property/{to_property_slug(prop.title, prop.id)}", status_code=303)
