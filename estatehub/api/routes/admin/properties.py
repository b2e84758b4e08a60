"""Admin property routes: properties, units and media."""

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.schemas.listing import PropertyDetail
from estatehub.schemas.property import (
    FeaturedToggle,
    MediaCreate,
    MediaResponse,
    PropertyAdminResponse,
    PropertyCreate,
    PropertyCreated,
    PropertyUpdate,
    UnitCreate,
    UnitResponse,
    UnitUpdate,
    VideoResponse,
)
from estatehub.services import media as media_service
from estatehub.services import property as property_service

router = APIRouter()


@router.post("/properties", response_model=PropertyCreated, status_code=status.HTTP_201_CREATED)
def create_property(property_data: PropertyCreate, db: Session = Depends(get_db)) -> PropertyCreated:
    """Create a property with its location and amenities."""
    prop = property_service.create_property(db, property_data)
    return PropertyCreated(property_id=prop.id)


@router.get("/properties", response_model=list[PropertyAdminResponse])
def list_properties(
    skip: int = 0,
    limit: int = 100,
    search: str | None = None,
    db: Session = Depends(get_db),
) -> list[PropertyAdminResponse]:
    """List properties, newest first."""
    properties = property_service.list_properties(db, skip, limit, search)
    return [PropertyAdminResponse.model_validate(p) for p in properties]


@router.get("/properties/{property_id}", response_model=PropertyDetail)
def get_property(property_id: int, db: Session = Depends(get_db)) -> PropertyDetail:
    """Get a property by ID."""
    return PropertyDetail.model_validate(property_service.get_property(db, property_id))


@router.patch("/properties/{property_id}", response_model=PropertyDetail)
def update_property(
    property_id: int,
    property_data: PropertyUpdate,
    db: Session = Depends(get_db),
) -> PropertyDetail:
    """Update a property."""
    return PropertyDetail.model_validate(property_service.update_property(db, property_id, property_data))


@router.delete("/properties/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property(property_id: int, db: Session = Depends(get_db)) -> None:
    """Delete a property and everything attached to it."""
    property_service.delete_property(db, property_id)


@router.get("/properties/{property_id}/units", response_model=list[UnitResponse])
def list_units(property_id: int, db: Session = Depends(get_db)) -> list[UnitResponse]:
    """List the units of a project."""
    return [UnitResponse.model_validate(u) for u in property_service.list_units(db, property_id)]


@router.post("/properties/{property_id}/units", response_model=UnitResponse, status_code=status.HTTP_201_CREATED)
def add_unit(property_id: int, unit_data: UnitCreate, db: Session = Depends(get_db)) -> UnitResponse:
    """Add a unit to a project."""
    return UnitResponse.model_validate(property_service.add_unit(db, property_id, unit_data))


@router.post(
    "/properties/{property_id}/units/bulk",
    response_model=list[UnitResponse],
    status_code=status.HTTP_201_CREATED,
)
def add_units_bulk(
    property_id: int,
    rows: list[UnitCreate],
    db: Session = Depends(get_db),
) -> list[UnitResponse]:
    """Add several units; blank rows are skipped."""
    return [UnitResponse.model_validate(u) for u in property_service.add_units_bulk(db, property_id, rows)]


@router.patch("/units/{unit_id}", response_model=UnitResponse)
def update_unit(unit_id: int, unit_data: UnitUpdate, db: Session = Depends(get_db)) -> UnitResponse:
    """Update a unit."""
    return UnitResponse.model_validate(property_service.update_unit(db, unit_id, unit_data))


@router.delete("/units/{unit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_unit(unit_id: int, db: Session = Depends(get_db)) -> None:
    """Delete a unit."""
    property_service.delete_unit(db, unit_id)


@router.get("/properties/{property_id}/media", response_model=list[MediaResponse])
def list_media(property_id: int, db: Session = Depends(get_db)) -> list[MediaResponse]:
    """List images and videos of a property."""
    return [MediaResponse.model_validate(m) for m in media_service.get_media(db, property_id)]


@router.post("/properties/{property_id}/media", response_model=MediaResponse, status_code=status.HTTP_201_CREATED)
def add_media(property_id: int, media_data: MediaCreate, db: Session = Depends(get_db)) -> MediaResponse:
    """Attach an already-hosted file."""
    return MediaResponse.model_validate(media_service.add_media(db, property_id, media_data))


@router.post(
    "/properties/{property_id}/media/upload",
    response_model=list[MediaResponse],
    status_code=status.HTTP_201_CREATED,
)
def upload_media(
    property_id: int,
    files: list[UploadFile] = File(...),
    db: Session = Depends(get_db),
) -> list[MediaResponse]:
    """Upload images or videos for a property."""
    return [MediaResponse.model_validate(m) for m in media_service.upload_media(db, property_id, files)]


@router.delete("/media/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_media(media_id: int, db: Session = Depends(get_db)) -> None:
    """Delete a media record."""
    media_service.delete_media(db, media_id)


def _video_response(video) -> VideoResponse:
    response = VideoResponse.model_validate(video)
    response.property_title = video.parent_property.title if video.parent_property else None
    return response


@router.get("/videos", response_model=list[VideoResponse])
def list_videos(db: Session = Depends(get_db)) -> list[VideoResponse]:
    """List all property videos."""
    return [_video_response(v) for v in media_service.list_property_videos(db)]


@router.post("/videos", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
def upload_video(
    property_id: int = Form(...),
    is_featured: bool = Form(False),
    video: UploadFile = File(...),
    thumbnail: UploadFile | None = File(None),
    db: Session = Depends(get_db),
) -> VideoResponse:
    """Upload a property video with an optional thumbnail."""
    created = media_service.upload_video(db, property_id, video, thumbnail, is_featured)
    return _video_response(created)


@router.patch("/videos/{media_id}/featured", response_model=VideoResponse)
def toggle_video_featured(
    media_id: int,
    toggle: FeaturedToggle,
    db: Session = Depends(get_db),
) -> VideoResponse:
    """Feature or unfeature a video on the home page."""
    return _video_response(media_service.toggle_video_featured(db, media_id, toggle.is_featured))


@router.get("/property-options")
def property_options(db: Session = Depends(get_db)) -> list[dict]:
    """(id, title) pairs for select boxes."""
    return [{"id": pid, "title": title} for pid, title in media_service.list_properties_for_dropdown(db)]
