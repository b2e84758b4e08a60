"""Admin back-office web routes, all under /admin."""

from fastapi import APIRouter

from estatehub.web.routes.admin import auth, catalog, cms, dashboard, properties, tours, videos

admin_web_router = APIRouter()

admin_web_router.include_router(auth.router, prefix="/admin", tags=["web-admin-auth"])
admin_web_router.include_router(dashboard.router, prefix="/admin", tags=["web-admin-dashboard"])
admin_web_router.include_router(properties.router, prefix="/admin/properties", tags=["web-admin-properties"])
admin_web_router.include_router(catalog.router, prefix="/admin", tags=["web-admin-catalog"])
admin_web_router.include_router(videos.router, prefix="/admin/property-videos", tags=["web-admin-videos"])
admin_web_router.include_router(tours.router, prefix="/admin/scheduled-tours", tags=["web-admin-tours"])
admin_web_router.include_router(cms.router, prefix="/admin/cms", tags=["web-admin-cms"])
