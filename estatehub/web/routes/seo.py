"""Sitemap and robots.txt."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from sqlalchemy.orm import Session

from estatehub.core.config import settings
from estatehub.core.database import get_db
from estatehub.services.listing import fetch_all_property_slugs
from estatehub.services.slug import to_property_slug
from estatehub.web.template_config import templates

router = APIRouter()

STATIC_PAGES = ("/", "/projects", "/rent", "/resale", "/search", "/compare")
DISALLOWED_PATHS = ("/admin/", "/api/", "/login", "/admin/login")


@router.get("/sitemap.xml")
async def sitemap(request: Request, db: Session = Depends(get_db)) -> Response:
    """List the static pages and every property page."""
    base_url = settings.SITE_URL.rstrip("/")
    urls = [f"{base_url}{path}" for path in STATIC_PAGES]
    urls += [
        f"{base_url}/property/{to_property_slug(title, property_id)}"
        for property_id, title in fetch_all_property_slugs(db)
    ]
    return templates.TemplateResponse(
        request,
        "seo/sitemap.xml",
        {"urls": urls},
        media_type="application/xml",
    )


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots() -> str:
    """Keep crawlers out of the admin, API and login pages."""
    lines = ["User-agent: *", "Allow: /"]
    lines += [f"Disallow: {path}" for path in DISALLOWED_PATHS]
    lines.append(f"Sitemap: {settings.SITE_URL.rstrip('/')}/sitemap.xml")
    return "\n".join(lines) + "\n"
