"""Admin property video pages."""

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.services import media as media_service
from estatehub.web.dependencies import add_flash_message, admin_login_redirect, get_admin_from_session
from estatehub.web.template_config import templates

router = APIRouter()


@router.get("", response_class=HTMLResponse, response_model=None)
async def videos_page(request: Request, db: Session = Depends(get_db)) -> HTMLResponse | RedirectResponse:
    """List videos with the upload form."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    return templates.TemplateResponse(
        request,
        "admin/videos.html",
        {
            "user": admin,
            "videos": media_service.list_property_videos(db),
            "property_options": media_service.list_properties_for_dropdown(db),
        },
    )


@router.post("", response_model=None)
async def upload_video(
    request: Request,
    property_id: int = Form(...),
    is_featured: bool = Form(False),
    video: UploadFile = File(...),
    thumbnail: UploadFile | None = File(None),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Upload a video for a property."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        media_service.upload_video(db, property_id, video, thumbnail, is_featured)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Video uploaded.", "success")
    return RedirectResponse("/admin/property-videos", status_code=303)


@router.post("/{media_id}/featured", response_model=None)
async def toggle_featured(
    request: Request,
    media_id: int,
    is_featured: bool = Form(False),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Feature or unfeature a video."""
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        media_service.toggle_video_featured(db, media_id, is_featured)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    return RedirectResponse("/admin/property-videos", status_code=303)


@router.post("/{media_id}/delete", response_model=None)
async def delete_video(request: Request, media_id: int, db: Session = Depends(get_db)) -> RedirectResponse:
    admin = get_admin_from_session(request, db)
    if not admin:
        return admin_login_redirect(request)

    try:
        media_service.delete_media(db, media_id)
    except HTTPException as exc:
        add_flash_message(request, exc.detail, "error")
    else:
        add_flash_message(request, "Video deleted.", "success")
    return RedirectResponse("/admin/property-videos", status_code=303)
