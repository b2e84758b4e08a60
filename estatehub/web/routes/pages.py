"""Content pages: about, contact, legal and the user's profile."""

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.schemas.cms import ContactInquiryCreate
from estatehub.services import cms
from estatehub.services.appointment import fetch_user_appointments
from estatehub.web.dependencies import add_flash_message, get_current_user_from_session
from estatehub.web.template_config import templates

router = APIRouter()


@router.get("/about", response_class=HTMLResponse)
async def about_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse:
    """Display company story, team, stats and FAQs."""
    return templates.TemplateResponse(
        request,
        "pages/about.html",
        {
            "user": get_current_user_from_session(request, db),
            "section": cms.fetch_site_section(db, "about"),
            "team": cms.fetch_team_members(db, active_only=True),
            "stats": cms.fetch_company_stats(db),
            "faqs": cms.fetch_faqs(db, active_only=True),
        },
    )


@router.get("/contact", response_class=HTMLResponse)
async def contact_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse:
    """Display the contact form and company details."""
    return templates.TemplateResponse(
        request,
        "pages/contact.html",
        {
            "user": get_current_user_from_session(request, db),
            "company": cms.fetch_company_info(db),
        },
    )


@router.post("/contact", response_class=HTMLResponse, response_model=None)
async def contact_submit(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    subject: str = Form(""),
    message: str = Form(""),
    db: Session = Depends(get_db),
) -> HTMLResponse | RedirectResponse:
    """Store a contact inquiry."""
    data = ContactInquiryCreate(
        name=name,
        email=email or None,
        phone=phone or None,
        subject=subject or None,
        message=message,
    )
    try:
        cms.create_contact_inquiry(db, data)
    except HTTPException as exc:
        return templates.TemplateResponse(
            request,
            "pages/contact.html",
            {
                "user": get_current_user_from_session(request, db),
                "company": cms.fetch_company_info(db),
                "error": exc.detail,
                "form": data,
            },
            status_code=exc.status_code,
        )

    add_flash_message(request, "Thanks for reaching out! We will get back to you soon.", "success")
    return RedirectResponse("/contact", status_code=303)


@router.get("/legal/{page_key}", response_class=HTMLResponse)
async def legal_page(request: Request, page_key: str, db: Session = Depends(get_db)) -> HTMLResponse:
    """Display a legal page (privacy policy, terms...)."""
    user = get_current_user_from_session(request, db)
    page = cms.fetch_legal_page(db, page_key)
    if not page:
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"user": user, "message": "This page does not exist."},
            status_code=404,
        )
    return templates.TemplateResponse(request, "pages/legal.html", {"user": user, "page": page})


@router.get("/profile", response_class=HTMLResponse, response_model=None)
async def profile_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse | RedirectResponse:
    """Display the user's profile and booked visits."""
    user = get_current_user_from_session(request, db)
    if not user:
        return RedirectResponse("/login?next=/profile", status_code=303)

    return templates.TemplateResponse(
        request,
        "pages/profile.html",
        {"user": user, "appointments": fetch_user_appointments(db, user.id)},
    )


@router.post("/profile", response_model=None)
async def profile_update(
    request: Request,
    full_name: str = Form(""),
    phone: str = Form(""),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Update contact details."""
    user = get_current_user_from_session(request, db)
    if not user:
        return RedirectResponse("/login?next=/profile", status_code=303)

    user.full_name = full_name.strip() or None
    user.phone = phone.strip() or None
    db.commit()

    add_flash_message(request, "Profile updated successfully!", "success")
    return RedirectResponse("/profile", status_code=303)
