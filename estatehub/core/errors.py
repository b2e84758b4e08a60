"""Shared error helpers for the service layer."""

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from structlog import get_logger

logger = get_logger(__name__)


def not_found(entity: str) -> HTTPException:
    """Build a 404 error for a missing entity."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity} not found",
    )


def bad_request(detail: str) -> HTTPException:
    """Build a 400 error with the given message."""
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def commit_or_400(db: Session, detail: str) -> None:
    """Commit the session, turning integrity violations into a 400 error."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Integrity error on commit", detail=detail, error=str(exc.orig))
        raise bad_request(detail) from exc
