# ============================================================================
# FILE: app/api/v1/catalog.py
# Public catalog - wash packages and coconut-oil products
# ============================================================================
from fastapi import APIRouter, HTTPException, Path

from app.config.settings import settings
from app.services.catalog.catalog_service import CatalogService

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/wash-packages")
async def list_wash_packages():
    """All wash packages across vehicle categories."""
    return CatalogService.list_packages()


@router.get("/wash-packages/{vehicle_type}")
async def list_wash_packages_for_vehicle(
        vehicle_type: str = Path(..., description="bike, car, bus or lorry")
):
    try:
        return CatalogService.list_packages(vehicle_type)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/products")
async def list_products():
    """Products on sale plus the flat delivery charge."""
    return {
        "products": CatalogService.list_products(),
        "deliveryCharge": float(settings.DELIVERY_CHARGE),
        "currency": settings.CURRENCY_SYMBOL,
    }
