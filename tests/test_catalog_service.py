import pytest

from app.services.catalog.catalog_service import CatalogService


def test_get_package():
    package = CatalogService.get_package("car", "deluxe")

    assert package == {
        "vehicleType": "car",
        "servicePackage": "deluxe",
        "name": "Deluxe Wash",
        "price": 999,
        "duration": 60,
    }


@pytest.mark.parametrize("vehicle_type, package_type", [("bike", "deluxe"), ("tractor", "basic")])
def test_get_package_unknown(vehicle_type, package_type):
    with pytest.raises(ValueError):
        CatalogService.get_package(vehicle_type, package_type)


def test_list_packages():
    assert len(CatalogService.list_packages()) == 9
    assert [p["servicePackage"] for p in CatalogService.list_packages("lorry")] == ["basic", "premium"]

    with pytest.raises(ValueError):
        CatalogService.list_packages("tractor")


def test_is_valid_package():
    assert CatalogService.is_valid_package("bus", "premium")
    assert not CatalogService.is_valid_package("bus", "deluxe")


def test_products():
    products = CatalogService.list_products()

    assert {p["id"] for p in products} == {"half-liter", "one-liter"}
    assert CatalogService.get_product("one-liter")["price"] == 280
    assert CatalogService.get_product("coconut-milk") is None


def test_quote_uses_flat_delivery_charge():
    items = [{"price": 150, "quantity": 2}, {"price": 280, "quantity": 1}]

    assert CatalogService.quote(items) == {"subtotal": 580.0, "deliveryCharge": 50.0, "total": 630.0}
    assert CatalogService.quote(items, delivery_charge=0)["total"] == 580.0
