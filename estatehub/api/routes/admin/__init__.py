"""Admin API routes; every route requires an admin bearer token."""

from fastapi import APIRouter, Depends

from estatehub.api.dependencies import require_admin
from estatehub.api.routes.admin import appointments, catalog, cms, dashboard, properties

admin_router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])

admin_router.include_router(dashboard.router, tags=["admin-dashboard"])
admin_router.include_router(properties.router, tags=["admin-properties"])
admin_router.include_router(catalog.router, tags=["admin-catalog"])
admin_router.include_router(appointments.router, tags=["admin-appointments"])
admin_router.include_router(cms.router, prefix="/cms", tags=["admin-cms"])
