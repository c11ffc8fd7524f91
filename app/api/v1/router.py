"""
API v1 router setup
Organized into: public forms and catalog, admin (JWT) routes
"""
from fastapi import APIRouter

from app.api.v1 import appointments, orders, catalog
from app.api.v1.admin import auth, dashboard
from app.config.settings import settings

api_v1_router = APIRouter()

# ============================================================================
# FORM ROUTES (POST public; listing and status updates need an admin token)
# ============================================================================
api_v1_router.include_router(appointments.router)
api_v1_router.include_router(orders.router)

# ============================================================================
# PUBLIC ROUTES (No authentication required)
# ============================================================================
api_v1_router.include_router(catalog.router)

# ============================================================================
# ADMIN ROUTES (login is public, everything else requires the admin token)
# ============================================================================
api_v1_router.include_router(auth.router)
api_v1_router.include_router(dashboard.router)


# ============================================================================
# ROOT ENDPOINT - API Info
# ============================================================================
@api_v1_router.get("/", tags=["Info"])
async def api_info():
    """
    API information and available endpoints.
    """
    return {
        "version": "1.0",
        "service": settings.APP_NAME,
        "authentication": {
            "public": "Booking, checkout, availability and catalog",
            "admin": "JWT Bearer token from /api/v1/admin/login"
        }
    }
