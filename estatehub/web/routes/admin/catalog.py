"""Admin pages for amenities and property types."""

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.services import property as property_service
from estatehub.web.dependencies import add_flash_message, admin_login_redirect, get_admin_from_session
from estatehub.web.template_config import templates

router = APIRouter()


@router.get("/amenities", response_class=HTMLResponse, response_model=None)
async def amenities_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse | RedirectResponse:
    """List amenities with add, rename and delete forms."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    return templates.TemplateResponse(
        request,
        "admin/amenities.html",
        {"user": admin, "amenities": property_service.get_amenities(db)},
    )


@router.post("/amenities", response_model=None)
async def create_amenity(
    request: Request,
    name: str = Form(""),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        amenity = property_service.create_amenity(db, name)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, f"Amenity '{amenity.name}' added.", "success")
    return RedirectResponse("/admin/amenities", status_code=303)


@router.post("/amenities/{amenity_id}/edit", response_model=None)
async def update_amenity(
    request: Request,
    amenity_id: int,
    name: str = Form(""),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        property_service.update_amenity(db, amenity_id, name)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Amenity updated.", "success")
    return RedirectResponse("/admin/amenities", status_code=303)


@router.post("/amenities/{amenity_id}/delete", response_model=None)
async def delete_amenity(request: Request, amenity_id: int, db: Session = Depends(get_db)) -> RedirectResponse:
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        property_service.delete_amenity(db, amenity_id)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Amenity deleted.", "success")
    return RedirectResponse("/admin/amenities", status_code=303)


@router.get("/property-types", response_class=HTMLResponse, response_model=None)
async def property_types_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse | RedirectResponse:
    """List property types with add, edit and delete forms."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    return templates.TemplateResponse(
        request,
        "admin/property_types.html",
        {"user": admin, "property_types": property_service.get_property_types(db)},
    )


@router.post("/property-types", response_model=None)
async def create_property_type(
    request: Request,
    name: str = Form(""),
    description: str = Form(""),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        created = property_service.create_property_type(db, name, description)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, f"Property type '{created.name}' added.", "success")
    return RedirectResponse("/admin/property-types", status_code=303)


@router.post("/property-types/{type_id}/edit", response_model=None)
async def update_property_type(
    request: Request,
    type_id: int,
    name: str = Form(""),
    description: str = Form(""),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        property_service.update_property_type(db, type_id, name, description)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Property type updated.", "success")
    return RedirectResponse("/admin/property-types", status_code=303)


@router.post("/property-types/{type_id}/delete", response_model=None)
async def delete_property_type(request: Request, type_id: int, db: Session = Depends(get_db)) -> RedirectResponse:
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        property_service.delete_property_type(db, type_id)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Property type deleted.", "success")
    return RedirectResponse("/admin/property-types", status_code=303)
