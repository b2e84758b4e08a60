"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware
from structlog import get_logger

from estatehub.api.routes import api_router
from estatehub.core.config import settings
from estatehub.core.database import Base, engine
from estatehub.core.logging import setup_logging

# Import models for Base.metadata.create_all - order matters for foreign keys
from estatehub.models import (
    amenity,  # noqa: F401
    appointment,  # noqa: F401
    associations,  # noqa: F401
    cms,  # noqa: F401
    comparison,  # noqa: F401
    property,  # noqa: F401
    user,  # noqa: F401
)
from estatehub.web.routes import web_router

# Static files directory
BASE_DIR = Path(__file__).resolve().parent

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    setup_logging()
    # Startup: Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("Application started", version=settings.VERSION, debug=settings.DEBUG)
    yield
    logger.info("Application stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Real-estate marketplace: listings, comparisons, site visits and back office",
    lifespan=lifespan,
)

# Session middleware for web authentication and the compare list
app.add_middleware(
    SessionMiddleware,  # type: ignore[arg-type]
    secret_key=settings.SECRET_KEY,
    session_cookie="estatehub_session",
    max_age=86400 * 7,  # 7 days
    same_site="lax",
    https_only=not settings.DEBUG,
)

# Mount static files and uploaded media
media_dir = Path(settings.MEDIA_DIR)
media_dir.mkdir(parents=True, exist_ok=True)
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
app.mount(settings.MEDIA_URL_PREFIX, StaticFiles(directory=str(media_dir)), name="media")

# Include API routers
app.include_router(api_router)

# Include web routes (Jinja2 frontend)
app.include_router(web_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "estatehub.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
