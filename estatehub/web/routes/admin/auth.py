"""Admin login and logout."""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session
from structlog import get_logger

from estatehub.core.database import get_db
from estatehub.services.auth import authenticate_user
from estatehub.web.dependencies import add_flash_message, get_admin_from_session
from estatehub.web.template_config import templates

logger = get_logger(__name__)

router = APIRouter()


def _admin_next(next_url: str | None) -> str:
    if next_url and next_url.startswith("/admin") and not next_url.startswith("/admin/login"):
        return next_url
    return "/admin"


@router.get("/login", response_class=HTMLResponse, response_model=None)
async def admin_login_page(
    request: Request,
    db: Session = Depends(get_db),
) -> HTMLResponse | RedirectResponse:
    """Display admin login form."""
    if get_admin_from_session(request, db):
        return RedirectResponse("/admin", status_code=303)
    return templates.TemplateResponse(
        request,
        "admin/login.html",
        {"next": _admin_next(request.query_params.get("next"))},
    )


@router.post("/login", response_class=HTMLResponse, response_model=None)
async def admin_login(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
    next_url: str = Form("/admin"),
    db: Session = Depends(get_db),
) -> HTMLResponse | RedirectResponse:
    """Process admin login; only admin profiles are let in."""
    user = authenticate_user(db, username, password)
    if not user or not user.get_is_admin():
        logger.warning("Admin login rejected", username=username)
        return templates.TemplateResponse(
            request,
            "admin/login.html",
            {
                "error": "Invalid credentials or insufficient permissions",
                "next": _admin_next(next_url),
                "username": username,
            },
            status_code=400,
        )

    request.session["user_id"] = user.id
    add_flash_message(request, "Signed in to the admin panel.", "success")
    return RedirectResponse(_admin_next(next_url), status_code=303)


@router.get("/logout")
async def admin_logout(request: Request) -> RedirectResponse:
    """Log out of the admin panel."""
    request.session.clear()
    return RedirectResponse("/admin/login", status_code=303)
