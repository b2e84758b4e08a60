"""Property media service: uploads, image galleries and featured videos."""

import re
import time
from pathlib import Path

from fastapi import UploadFile
from sqlalchemy.orm import Session, joinedload
from structlog import get_logger

from estatehub.core.config import settings
from estatehub.core.errors import bad_request, not_found
from estatehub.models.enums import MediaType
from estatehub.models.property import Property, PropertyMedia
from estatehub.schemas.property import MediaCreate
from estatehub.services.property import get_property

logger = get_logger(__name__)


def storage_name(filename: str, prefix: str) -> str:
    """Build the stored path ``{prefix}/{millis}-{name}`` with whitespace dashed."""
    name = re.sub(r"\s+", "-", Path(filename or "upload").name)
    return f"{prefix}/{int(time.time() * 1000)}-{name}"


def store_upload(upload: UploadFile, prefix: str) -> str:
    """Write an uploaded file under the media directory and return its public URL."""
    relative = storage_name(upload.filename or "upload", prefix)
    target = Path(settings.MEDIA_DIR) / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("wb") as buffer:
        while chunk := upload.file.read(1024 * 1024):
            buffer.write(chunk)
    logger.info("Media stored", path=str(target))
    return f"{settings.MEDIA_URL_PREFIX.rstrip('/')}/{relative}"


def _media_type_from_upload(upload: UploadFile) -> MediaType:
    content_type = upload.content_type or ""
    return MediaType.VIDEO if content_type.startswith("video/") else MediaType.IMAGE


def get_media(db: Session, property_id: int) -> list[PropertyMedia]:
    """Get all media of a property."""
    get_property(db, property_id)
    return (
        db.query(PropertyMedia)
        .filter(PropertyMedia.property_id == property_id)
        .order_by(PropertyMedia.id)
        .all()
    )


def add_media(db: Session, property_id: int, media_data: MediaCreate) -> PropertyMedia:
    """Attach an already-hosted file to a property."""
    get_property(db, property_id)
    if not media_data.file_url.strip():
        raise bad_request("File URL is required.")
    media = PropertyMedia(
        property_id=property_id,
        file_url=media_data.file_url.strip(),
        thumbnail_url=media_data.thumbnail_url,
        media_type=media_data.media_type.value,
        is_featured=media_data.is_featured,
    )
    db.add(media)
    db.commit()
    db.refresh(media)
    return media


def upload_media(
    db: Session,
    property_id: int,
    uploads: list[UploadFile],
    prefix: str = "properties",
) -> list[PropertyMedia]:
    """Store uploaded files and attach them to a property."""
    get_property(db, property_id)
    files = [upload for upload in uploads if upload.filename]
    if not files:
        raise bad_request("Select at least one file to upload.")

    created = []
    for upload in files:
        media = PropertyMedia(
            property_id=property_id,
            file_url=store_upload(upload, prefix),
            media_type=_media_type_from_upload(upload).value,
        )
        db.add(media)
        created.append(media)
    db.commit()
    for media in created:
        db.refresh(media)
    return created


def upload_video(
    db: Session,
    property_id: int,
    video: UploadFile,
    thumbnail: UploadFile | None = None,
    is_featured: bool = False,
) -> PropertyMedia:
    """Store a video with an optional thumbnail image."""
    get_property(db, property_id)
    if not video.filename:
        raise bad_request("Select a video file to upload.")
    media = PropertyMedia(
        property_id=property_id,
        file_url=store_upload(video, "videos"),
        thumbnail_url=store_upload(thumbnail, "thumbnails") if thumbnail and thumbnail.filename else None,
        media_type=MediaType.VIDEO.value,
        is_featured=is_featured,
    )
    db.add(media)
    db.commit()
    db.refresh(media)
    return media


def delete_media(db: Session, media_id: int) -> None:
    """Delete a media record."""
    media = db.query(PropertyMedia).filter(PropertyMedia.id == media_id).first()
    if not media:
        raise not_found("Media")
    db.delete(media)
    db.commit()


def list_property_videos(db: Session) -> list[PropertyMedia]:
    """All videos, newest first, with their property loaded."""
    return (
        db.query(PropertyMedia)
        .options(joinedload(PropertyMedia.parent_property))
        .filter(PropertyMedia.media_type == MediaType.VIDEO.value)
        .order_by(PropertyMedia.created_at.desc(), PropertyMedia.id.desc())
        .all()
    )


def toggle_video_featured(db: Session, media_id: int, is_featured: bool) -> PropertyMedia:
    """Set the featured flag on a video."""
    media = (
        db.query(PropertyMedia)
        .filter(PropertyMedia.id == media_id, PropertyMedia.media_type == MediaType.VIDEO.value)
        .first()
    )
    if not media:
        raise not_found("Video")
    media.is_featured = is_featured
    db.commit()
    db.refresh(media)
    logger.info("Video featured flag changed", media_id=media_id, is_featured=is_featured)
    return media


def list_properties_for_dropdown(db: Session) -> list[tuple[int, str]]:
    """(id, title) pairs for admin select boxes, ordered by title."""
    rows = db.query(Property.id, Property.title).order_by(Property.title).all()
    return [(row.id, row.title or f"Property #{row.id}") for row in rows]
