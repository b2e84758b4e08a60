"""Health check route."""

from fastapi import APIRouter

from estatehub.core.config import settings

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Report that the service is up."""
    return {"status": "healthy", "version": settings.VERSION}
