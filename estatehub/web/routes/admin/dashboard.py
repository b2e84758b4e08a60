"""Admin dashboard and saved comparisons."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.services.comparison import list_comparisons
from estatehub.services.property import get_dashboard_stats
from estatehub.web.dependencies import admin_login_redirect, get_admin_from_session
from estatehub.web.template_config import templates

router = APIRouter()


@router.get("", response_class=HTMLResponse, response_model=None)
async def dashboard(request: Request, db: Session = Depends(get_db)) -> HTMLResponse | RedirectResponse:
    """Display counts and the latest properties."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    return templates.TemplateResponse(
        request,
        "admin/dashboard.html",
        {"user": admin, "stats": get_dashboard_stats(db)},
    )


@router.get("/comparisons", response_class=HTMLResponse, response_model=None)
async def comparisons(request: Request, db: Session = Depends(get_db)) -> HTMLResponse | RedirectResponse:
    """Display saved comparisons, newest first."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    return templates.TemplateResponse(
        request,
        "admin/comparisons.html",
        {"user": admin, "comparisons": list_comparisons(db)},
    )
