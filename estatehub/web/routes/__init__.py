"""Web routes package."""

from fastapi import APIRouter

from estatehub.web.routes import auth, compare, home, listings, pages, property, seo
from estatehub.web.routes.admin import admin_web_router

web_router = APIRouter()

web_router.include_router(home.router, tags=["web-home"])
web_router.include_router(auth.router, tags=["web-auth"])
web_router.include_router(listings.router, tags=["web-listings"])
web_router.include_router(property.router, prefix="/property", tags=["web-property"])
web_router.include_router(compare.router, prefix="/compare", tags=["web-compare"])
web_router.include_router(pages.router, tags=["web-pages"])
web_router.include_router(seo.router, tags=["web-seo"])
web_router.include_router(admin_web_router)
