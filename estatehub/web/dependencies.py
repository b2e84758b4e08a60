"""Web-specific dependencies for session authentication."""

from fastapi import Depends, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.models.user import User


def get_current_user_from_session(
    request: Request,
    db: Session = Depends(get_db),
) -> User | None:
    """Get current user from session cookie."""
    user_id = request.session.get("user_id")
    if not user_id:
        return None
    user = db.query(User).filter(User.id == user_id).first()
    if user is None or not user.is_active:
        return None
    return user


def get_admin_from_session(
    request: Request,
    db: Session = Depends(get_db),
) -> User | None:
    """Get the session user if it has the admin role."""
    user = get_current_user_from_session(request, db)
    if user is None or not user.get_is_admin():
        return None
    return user


def get_flash_messages(request: Request) -> list[dict]:
    """Get and clear flash messages from session."""
    messages = request.session.pop("flash_messages", [])
    return messages


def add_flash_message(request: Request, message: str, category: str = "info") -> None:
    """Add a flash message to the session."""
    if "flash_messages" not in request.session:
        request.session["flash_messages"] = []
    request.session["flash_messages"].append({"message": message, "category": category})


def admin_login_redirect(request: Request) -> RedirectResponse:
    """Send an anonymous or non-admin visitor to the admin login page."""
    return RedirectResponse(f"/admin/login?next={request.url.path}", status_code=303)


def safe_next(next_url: str | None, fallback: str = "/") -> str:
    """Only allow redirects to local paths."""
    if next_url and next_url.startswith("/") and not next_url.startswith("//"):
        return next_url
    return fallback
