"""Compare page: side-by-side view of up to three properties."""

from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.services import listing
from estatehub.services.compare import CompareList, compare_property_from_listing
from estatehub.services.comparison import save_comparison
from estatehub.web.dependencies import add_flash_message, get_current_user_from_session, safe_next
from estatehub.web.template_config import templates

router = APIRouter()


def _back(request: Request, fallback: str = "/compare") -> RedirectResponse:
    """Return to the referring page of this site, or to the fallback."""
    referer = urlsplit(request.headers.get("referer") or "")
    target = fallback
    if referer.netloc in ("", request.url.netloc):
        path = f"{referer.path}?{referer.query}" if referer.query else referer.path
        target = safe_next(path, fallback)
    return RedirectResponse(target, status_code=303)


@router.get("", response_class=HTMLResponse)
async def compare_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse:
    """Display the compare table."""
    compare_list = CompareList.from_session(request.session)
    toast = request.session.pop("compare_toast", None)
    return templates.TemplateResponse(
        request,
        "compare.html",
        {
            "user": get_current_user_from_session(request, db),
            "properties": compare_list.properties,
            "toast": toast,
        },
    )


@router.post("/add", response_model=None)
async def add_to_compare(
    request: Request,
    property_id: int = Form(...),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Add a property to the compare list."""
    prop = listing.fetch_property_by_id(db, property_id)
    if not prop:
        add_flash_message(request, "Property not found.", "error")
        return _back(request)

    compare_list = CompareList.from_session(request.session)
    if compare_list.add(compare_property_from_listing(prop)):
        add_flash_message(request, f"Added '{prop.title}' to compare.", "success")
    elif compare_list.toast:
        request.session["compare_toast"] = compare_list.toast
        add_flash_message(request, compare_list.toast, "error")
    compare_list.save(request.session)
    return _back(request)


@router.post("/remove", response_model=None)
async def remove_from_compare(request: Request, property_id: str = Form(...)) -> RedirectResponse:
    """Remove a property from the compare list."""
    compare_list = CompareList.from_session(request.session)
    compare_list.remove(property_id)
    compare_list.save(request.session)
    return _back(request)


@router.post("/clear", response_model=None)
async def clear_compare(request: Request) -> RedirectResponse:
    """Empty the compare list."""
    CompareList().save(request.session)
    return RedirectResponse("/compare", status_code=303)


@router.post("/save", response_model=None)
async def save_compare(request: Request, db: Session = Depends(get_db)) -> RedirectResponse:
    """Save the compare list so the sales team can follow up."""
    user = get_current_user_from_session(request, db)
    if not user:
        add_flash_message(request, "Please log in to save your comparison.", "error")
        return RedirectResponse("/login?next=/compare", status_code=303)

    compare_list = CompareList.from_session(request.session)
    try:
        save_comparison(db, user, compare_list.properties)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
        return RedirectResponse("/compare", status_code=303)

    add_flash_message(request, "Comparison saved. Our team will reach out to you.", "success")
    return RedirectResponse("/compare", status_code=303)
