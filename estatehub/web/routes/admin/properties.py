"""Admin property pages: list, add, edit, delete, units and media."""

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.models.enums import ListingType, UnitStatus
from estatehub.schemas.property import PropertyCreate, PropertyUpdate, UnitCreate
from estatehub.services import media as media_service
from estatehub.services import property as property_service
from estatehub.web.dependencies import add_flash_message, admin_login_redirect, get_admin_from_session
from estatehub.web.routes.admin.forms import (
    checkbox,
    int_list,
    optional_float,
    optional_int,
    optional_str,
    parse_float,
)
from estatehub.web.template_config import templates

router = APIRouter()

UNIT_ROW_FIELDS = ("unit_number", "floor", "bedrooms", "bathrooms", "square_feet", "price", "status")


def _form_context(db: Session) -> dict:
    return {
        "property_types": property_service.get_property_types(db),
        "amenities": property_service.get_amenities(db),
        "listing_types": list(ListingType),
        "unit_statuses": list(UnitStatus),
    }


def _listing_type(value: str | None) -> ListingType | None:
    try:
        return ListingType(value) if value else None
    except ValueError:
        return None


@router.get("", response_class=HTMLResponse, response_model=None)
async def list_properties(
    request: Request,
    db: Session = Depends(get_db),
) -> HTMLResponse | RedirectResponse:
    """List all properties."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    search = request.query_params.get("q")
    return templates.TemplateResponse(
        request,
        "admin/properties/list.html",
        {
            "user": admin,
            "properties": property_service.list_properties(db, limit=500, search=search),
            "search": search or "",
        },
    )


@router.get("/new", response_class=HTMLResponse, response_model=None)
async def new_property_page(
    request: Request,
    db: Session = Depends(get_db),
) -> HTMLResponse | RedirectResponse:
    """Display the add-property form."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    return templates.TemplateResponse(
        request,
        "admin/properties/new.html",
        {"user": admin, "form": {}, **_form_context(db)},
    )


@router.post("/new", response_class=HTMLResponse, response_model=None)
async def new_property_submit(
    request: Request,
    db: Session = Depends(get_db),
) -> HTMLResponse | RedirectResponse:
    """Create a property from the add-property form."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    form = await request.form()
    property_data = PropertyCreate(
        title=str(form.get("title") or ""),
        description=optional_str(form, "description"),
        property_type_id=optional_int(form, "property_type_id"),
        listing_type=_listing_type(optional_str(form, "listing_type")),
        price=optional_float(form, "price"),
        street=str(form.get("street") or ""),
        city=str(form.get("city") or ""),
        state=str(form.get("state") or ""),
        zip_code=str(form.get("zip_code") or ""),
        bedrooms=optional_int(form, "bedrooms") or 0,
        bathrooms=optional_int(form, "bathrooms") or 0,
        square_feet=optional_float(form, "square_feet"),
        year_built=optional_int(form, "year_built") or 2023,
        amenity_ids=int_list(form, "amenity_ids"),
        is_project=checkbox(form, "is_project"),
    )
    try:
        prop = property_service.create_property(db, property_data)
    except HTTPException as exc:
        return templates.TemplateResponse(
            request,
            "admin/properties/new.html",
            {"user": admin, "error": exc.detail, "form": property_data, **_form_context(db)},
            status_code=exc.status_code,
        )

    add_flash_message(request, f"Property '{prop.title}' created successfully!", "success")
    return RedirectResponse(f"/admin/properties/{prop.id}", status_code=303)


@router.get("/{property_id}", response_class=HTMLResponse, response_model=None)
async def property_detail(
    request: Request,
    property_id: int,
    db: Session = Depends(get_db),
) -> HTMLResponse | RedirectResponse:
    """Display a property with its edit form, units and media."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        prop = property_service.get_property(db, property_id)
    except HTTPException:
        add_flash_message(request, "Property not found.", "error")
        return RedirectResponse("/admin/properties", status_code=303)

    return templates.TemplateResponse(
        request,
        "admin/properties/detail.html",
        {"user": admin, "property": prop, **_form_context(db)},
    )


@router.post("/{property_id}/edit", response_model=None)
async def edit_property_submit(
    request: Request,
    property_id: int,
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Update a property from the edit form."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    form = await request.form()
    property_data = PropertyUpdate(
        title=str(form.get("title") or ""),
        about_property=optional_str(form, "description"),
        property_type_id=optional_int(form, "property_type_id"),
        listing_type=_listing_type(optional_str(form, "listing_type")),
        price=optional_float(form, "price"),
        bedrooms=optional_int(form, "bedrooms"),
        bathrooms=optional_int(form, "bathrooms"),
        square_feet=optional_float(form, "square_feet"),
        year_built=optional_int(form, "year_built"),
        street=str(form.get("street") or ""),
        city=str(form.get("city") or ""),
        state=str(form.get("state") or ""),
        zip_code=str(form.get("zip_code") or ""),
        amenity_ids=int_list(form, "amenity_ids"),
    )
    try:
        property_service.update_property(db, property_id, property_data)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Property updated successfully!", "success")
    return RedirectResponse(f"/admin/properties/{property_id}", status_code=303)


@router.post("/{property_id}/delete", response_model=None)
async def delete_property(
    request: Request,
    property_id: int,
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Delete a property."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        property_service.delete_property(db, property_id)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Property deleted successfully!", "success")
    return RedirectResponse("/admin/properties", status_code=303)


@router.post("/{property_id}/units", response_model=None)
async def add_units(
    request: Request,
    property_id: int,
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Add unit rows from the units table; blank rows are skipped."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    form = await request.form()
    columns = {field: form.getlist(field) for field in UNIT_ROW_FIELDS}
    row_count = max((len(values) for values in columns.values()), default=0)
    rows = []
    for index in range(row_count):
        row = {field: str(values[index]).strip() if index < len(values) else "" for field, values in columns.items()}
        rows.append(
            UnitCreate(
                unit_number=row["unit_number"] or None,
                floor=int(row["floor"]) if row["floor"].lstrip("-").isdigit() else None,
                bedrooms=int(row["bedrooms"]) if row["bedrooms"].isdigit() else None,
                bathrooms=int(row["bathrooms"]) if row["bathrooms"].isdigit() else None,
                square_feet=parse_float(row["square_feet"]),
                price=parse_float(row["price"]),
                status=_unit_status(row["status"]),
            )
        )

    try:
        units = property_service.add_units_bulk(db, property_id, rows)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, f"{len(units)} unit(s) added.", "success")
    return RedirectResponse(f"/admin/properties/{property_id}", status_code=303)


def _unit_status(value: str) -> UnitStatus:
    try:
        return UnitStatus(value)
    except ValueError:
        return UnitStatus.UNDER_CONSTRUCTION


@router.post("/{property_id}/units/{unit_id}/delete", response_model=None)
async def delete_unit(
    request: Request,
    property_id: int,
    unit_id: int,
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Delete a unit."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        property_service.delete_unit(db, unit_id)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Unit deleted.", "success")
    return RedirectResponse(f"/admin/properties/{property_id}", status_code=303)


@router.post("/{property_id}/media", response_model=None)
async def upload_media(
    request: Request,
    property_id: int,
    files: list[UploadFile] = File(...),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Upload images for a property."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        created = media_service.upload_media(db, property_id, files)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, f"{len(created)} file(s) uploaded.", "success")
    return RedirectResponse(f"/admin/properties/{property_id}", status_code=303)


@router.post("/{property_id}/media/{media_id}/delete", response_model=None)
async def delete_media(
    request: Request,
    property_id: int,
    media_id: int,
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Delete an image or video."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        media_service.delete_media(db, media_id)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Media deleted.", "success")
    return RedirectResponse(f"/admin/properties/{property_id}", status_code=303)
