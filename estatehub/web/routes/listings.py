"""Listing pages: projects, rentals, resale and search results."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.models.enums import ListingType, UnitStatus
from estatehub.schemas.listing import ProjectFilters, RentResaleFilters
from estatehub.services import listing
from estatehub.web.dependencies import get_current_user_from_session
from estatehub.web.template_config import templates

router = APIRouter()

UNIT_STATUS_LABELS = {
    UnitStatus.UNDER_CONSTRUCTION: "Under construction",
    UnitStatus.READY_TO_MOVE: "Ready to move",
    UnitStatus.AVAILABLE: "Available",
    UnitStatus.SOLD: "Sold",
}


def _number(value: str | None, label: str, errors: list[str], integer: bool = False) -> float | None:
    """Parse an optional numeric query value, recording a message if it is invalid."""
    if value is None or not value.strip():
        return None
    try:
        return int(value) if integer else float(value)
    except ValueError:
        errors.append(f"{label} must be a number.")
        return None


def _page(request: Request) -> int:
    try:
        return int(request.query_params.get("page", "1"))
    except ValueError:
        return 1


def _render(request: Request, db: Session, listing_type: ListingType | None, context: dict) -> HTMLResponse:
    items, page, total_pages = listing.paginate(context.pop("items"), _page(request))
    return templates.TemplateResponse(
        request,
        "listings/grid.html",
        {
            "user": get_current_user_from_session(request, db),
            "listing_type": listing_type,
            "properties": items,
            "page": page,
            "total_pages": total_pages,
            "price_ranges": listing.fetch_price_ranges(db),
            "unit_statuses": UNIT_STATUS_LABELS,
            **context,
        },
    )


@router.get("/projects", response_class=HTMLResponse)
async def projects_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse:
    """Display new projects, optionally filtered by unit status and price."""
    params = request.query_params
    errors: list[str] = []
    status_value = params.get("project_status") or None
    project_status = None
    if status_value:
        try:
            project_status = UnitStatus(status_value)
        except ValueError:
            errors.append("Unknown project status.")

    filters = ProjectFilters(
        project_status=project_status,
        min_price=_number(params.get("min_price"), "Minimum price", errors),
        max_price=_number(params.get("max_price"), "Maximum price", errors),
    )
    items = listing.fetch_projects(db, filters)

    return _render(
        request,
        db,
        ListingType.PROJECT,
        {"items": items, "filters": filters, "errors": errors, "title": "New Projects"},
    )


def _rent_resale_filters(request: Request, errors: list[str]) -> RentResaleFilters:
    params = request.query_params
    return RentResaleFilters(
        min_price=_number(params.get("min_price"), "Minimum price", errors),
        max_price=_number(params.get("max_price"), "Maximum price", errors),
        bedrooms=_number(params.get("bedrooms"), "Bedrooms", errors, integer=True),
    )


@router.get("/rent", response_class=HTMLResponse)
async def rent_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse:
    """Display rentals."""
    errors: list[str] = []
    filters = _rent_resale_filters(request, errors)
    items = listing.fetch_filtered_rent(db, filters)
    return _render(
        request,
        db,
        ListingType.RENT,
        {"items": items, "filters": filters, "errors": errors, "title": "Properties for Rent"},
    )


@router.get("/resale", response_class=HTMLResponse)
async def resale_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse:
    """Display resale properties."""
    errors: list[str] = []
    filters = _rent_resale_filters(request, errors)
    items = listing.fetch_filtered_resale(db, filters)
    return _render(
        request,
        db,
        ListingType.RESALE,
        {"items": items, "filters": filters, "errors": errors, "title": "Resale Properties"},
    )


@router.get("/search", response_class=HTMLResponse)
async def search_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse:
    """Display search results for a free-text query."""
    query = request.query_params.get("q", "").strip()
    items = listing.search_with_city_fallback(db, query) if query else []
    return _render(
        request,
        db,
        None,
        {"items": items, "query": query, "errors": [], "title": f'Results for "{query}"' if query else "Search"},
    )
