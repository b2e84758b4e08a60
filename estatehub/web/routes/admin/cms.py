"""Admin CMS page: one screen for all editable site content."""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.schemas import cms as schemas
from estatehub.services import cms as cms_service
from estatehub.web.dependencies import add_flash_message, admin_login_redirect, get_admin_from_session
from estatehub.web.template_config import templates

router = APIRouter()

# resource -> (payload schema, create or upsert, delete)
RESOURCES = {
    "site-sections": (schemas.SiteSectionIn, cms_service.upsert_site_section, cms_service.delete_site_section),
    "services": (schemas.ServiceIn, cms_service.create_service, cms_service.delete_service),
    "team-members": (schemas.TeamMemberIn, cms_service.create_team_member, cms_service.delete_team_member),
    "testimonials": (schemas.TestimonialIn, cms_service.create_testimonial, cms_service.delete_testimonial),
    "faqs": (schemas.FaqIn, cms_service.create_faq, cms_service.delete_faq),
    "company-stats": (schemas.CompanyStatIn, cms_service.create_company_stat, cms_service.delete_company_stat),
    "legal-pages": (schemas.LegalPageIn, cms_service.upsert_legal_page, cms_service.delete_legal_page),
    "hero-sections": (schemas.HeroSectionIn, cms_service.create_hero_section, cms_service.delete_hero_section),
}


def _redirect(resource: str | None = None) -> RedirectResponse:
    anchor = f"#{resource}" if resource else ""
    return RedirectResponse(f"/admin/cms{anchor}", status_code=303)


@router.get("", response_class=HTMLResponse, response_model=None)
async def cms_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse | RedirectResponse:
    """Display every CMS table with its forms."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    return templates.TemplateResponse(
        request,
        "admin/cms.html",
        {
            "user": admin,
            "site_sections": cms_service.fetch_site_sections(db),
            "services": cms_service.fetch_services(db),
            "team_members": cms_service.fetch_team_members(db),
            "testimonials": cms_service.fetch_testimonials(db),
            "faqs": cms_service.fetch_faqs(db),
            "company_stats": cms_service.fetch_company_stats(db),
            "company_info": cms_service.fetch_company_info(db),
            "legal_pages": cms_service.fetch_legal_pages(db),
            "hero_sections": cms_service.fetch_hero_sections(db),
            "inquiries": cms_service.fetch_contact_inquiries(db),
        },
    )


@router.post("/company-info", response_model=None)
async def save_company_info(request: Request, db: Session = Depends(get_db)) -> RedirectResponse:
    """Create the company info record, or update the current one."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    form = await request.form()
    data = schemas.CompanyInfoIn.model_validate({key: value for key, value in form.items() if value != ""})
    current = cms_service.fetch_company_info(db)
    if current:
        cms_service.update_company_info(db, current.id, data)
    else:
        cms_service.create_company_info(db, data)
    add_flash_message(request, "Company info saved.", "success")
    return _redirect("company-info")


@router.post("/testimonials/{item_id}/toggle", response_model=None)
async def toggle_testimonial(request: Request, item_id: int, db: Session = Depends(get_db)) -> RedirectResponse:
    """Publish or hide a testimonial."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        testimonial = cms_service.get_testimonial(db, item_id)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        cms_service.update_testimonial(db, item_id, schemas.TestimonialIn(is_active=not testimonial.is_active))
    return _redirect("testimonials")


@router.post("/{resource}", response_model=None)
async def create_item(request: Request, resource: str, db: Session = Depends(get_db)) -> RedirectResponse:
    """Create (or upsert) an item of a CMS table from its form."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)
    if resource not in RESOURCES:
        add_flash_message(request, "Unknown content type.", "error")
        return _redirect()

    schema_in, create, _ = RESOURCES[resource]
    form = await request.form()
    try:
        data = schema_in.model_validate({key: value for key, value in form.items() if value != ""})
        create(db, data)
    except ValidationError as exc:
        add_flash_message(request, f"Invalid input: {exc.errors()[0]['msg']}", "error")
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Saved.", "success")
    return _redirect(resource)


@router.post("/{resource}/{item_id}/delete", response_model=None)
async def delete_item(
    request: Request,
    resource: str,
    item_id: int,
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Delete an item of a CMS table."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)
    if resource not in RESOURCES:
        add_flash_message(request, "Unknown content type.", "error")
        return _redirect()

    _, _, delete = RESOURCES[resource]
    try:
        delete(db, item_id)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Deleted.", "success")
    return _redirect(resource)
