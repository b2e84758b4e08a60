"""Home page route."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.services import cms, listing
from estatehub.web.dependencies import get_current_user_from_session
from estatehub.web.template_config import templates

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    db: Session = Depends(get_db),
) -> HTMLResponse:
    """Display the landing page: hero search, featured videos and company highlights."""
    user = get_current_user_from_session(request, db)
    projects = listing.fetch_projects_with_units(db)[:6]

    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "user": user,
            "hero": cms.fetch_latest_hero(db),
            "search_meta": listing.fetch_search_meta(db),
            "featured_videos": listing.fetch_featured_videos(db),
            "projects": projects,
            "services": cms.fetch_services(db, active_only=True),
            "testimonials": cms.fetch_testimonials(db, active_only=True),
            "stats": cms.fetch_company_stats(db),
        },
    )
