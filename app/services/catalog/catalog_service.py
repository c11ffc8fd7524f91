# app/services/catalog/catalog_service.py
"""Wash packages and coconut-oil products offered by the business"""
from typing import Dict, List, Optional, Iterable, Mapping, Any

from app.config.settings import settings


VEHICLE_TYPES = ("bike", "car", "bus", "lorry")

PACKAGE_NAMES = {
    "basic": "Basic Wash",
    "premium": "Premium Wash",
    "deluxe": "Deluxe Wash",
}

# (price in rupees, duration in minutes) per vehicle category and package tier
WASH_PACKAGES: Dict[str, Dict[str, Dict[str, int]]] = {
    "bike": {
        "basic": {"price": 150, "duration": 15},
        "premium": {"price": 300, "duration": 30},
    },
    "car": {
        "basic": {"price": 299, "duration": 25},
        "premium": {"price": 499, "duration": 45},
        "deluxe": {"price": 999, "duration": 60},
    },
    "bus": {
        "basic": {"price": 1200, "duration": 45},
        "premium": {"price": 2000, "duration": 80},
    },
    "lorry": {
        "basic": {"price": 1500, "duration": 45},
        "premium": {"price": 2500, "duration": 80},
    },
}

PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "half-liter",
        "name": "Coconut Oil",
        "size": "500ml",
        "price": 150,
        "description": "Cold-pressed coconut oil, 500ml bottle",
    },
    {
        "id": "one-liter",
        "name": "Coconut Oil",
        "size": "1 Liter",
        "price": 280,
        "description": "Cold-pressed coconut oil, 1 liter bottle",
    },
]


class CatalogService:
    """Lookups over the fixed wash-package and product catalog"""

    @staticmethod
    def list_packages(vehicle_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List wash packages, optionally for one vehicle category.

        Raises:
            ValueError: if vehicle_type is not a known category
        """
        if vehicle_type is not None and vehicle_type not in WASH_PACKAGES:
            raise ValueError(f"Invalid vehicle category: {vehicle_type}")

        categories = [vehicle_type] if vehicle_type else list(VEHICLE_TYPES)
        packages = []
        for category in categories:
            for package_type in WASH_PACKAGES[category]:
                packages.append(CatalogService.get_package(category, package_type))
        return packages

    @staticmethod
    def get_package(vehicle_type: str, package_type: str) -> Dict[str, Any]:
        """
        Get price and duration for a package.

        Raises:
            ValueError: if the category or the package tier for it is unknown
        """
        category_packages = WASH_PACKAGES.get(vehicle_type)
        if category_packages is None:
            raise ValueError(f"Invalid vehicle category: {vehicle_type}")

        package = category_packages.get(package_type)
        if package is None:
            raise ValueError(f"Invalid package type: {package_type} for category: {vehicle_type}")

        return {
            "vehicleType": vehicle_type,
            "servicePackage": package_type,
            "name": PACKAGE_NAMES[package_type],
            "price": package["price"],
            "duration": package["duration"],
        }

    @staticmethod
    def is_valid_package(vehicle_type: str, package_type: str) -> bool:
        return package_type in WASH_PACKAGES.get(vehicle_type, {})

    @staticmethod
    def list_products() -> List[Dict[str, Any]]:
        return [dict(product) for product in PRODUCTS]

    @staticmethod
    def get_product(product_id: str) -> Optional[Dict[str, Any]]:
        return next((dict(p) for p in PRODUCTS if p["id"] == product_id), None)

    @staticmethod
    def compute_subtotal(items: Iterable[Mapping[str, Any]]) -> float:
        """Sum of unit price x quantity over the line items"""
        return float(sum(float(item["price"]) * int(item["quantity"]) for item in items))

    @staticmethod
    def quote(items: Iterable[Mapping[str, Any]], delivery_charge: Optional[float] = None) -> Dict[str, float]:
        """Subtotal, delivery charge and total for a cart"""
        subtotal = CatalogService.compute_subtotal(items)
        charge = float(settings.DELIVERY_CHARGE if delivery_charge is None else delivery_charge)
        return {
            "subtotal": subtotal,
            "deliveryCharge": charge,
            "total": subtotal + charge,
        }
