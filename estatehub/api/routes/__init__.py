"""API routes package."""

from fastapi import APIRouter

from estatehub.api.routes import appointments, auth, compare, health, listings
from estatehub.api.routes.admin import admin_router

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router)
api_router.include_router(listings.router)
api_router.include_router(compare.router)
api_router.include_router(appointments.router)
api_router.include_router(admin_router)
