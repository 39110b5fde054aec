import pytest

from nursery_pos.core.errors import ValidationError
from nursery_pos.services.catalog import CatalogService


def test_add_and_list_products_sorted_by_name(client):
    for name, price in [("Rose", 80), ("Aloe Vera", 150), ("Money Plant", 120)]:
        response = client.post("/products", json={"name": name, "price": price})
        assert response.status_code == 201
        assert "id" in response.json()

    response = client.get("/products")

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Aloe Vera", "Money Plant", "Rose"]


def test_product_fields_round_trip(client):
    client.post("/products", json={"name": "Terracotta Pot", "price": 45.5, "category": "Pots"})

    product = client.get("/products").json()[0]

    assert product["name"] == "Terracotta Pot"
    assert product["price"] == 45.5
    assert product["category"] == "Pots"


def test_search_matches_name_or_category(client):
    client.post("/products", json={"name": "Tulsi", "price": 60, "category": "Herbs"})
    client.post("/products", json={"name": "Clay Pot", "price": 40, "category": "Pots"})

    by_category = client.get("/products", params={"search": "herb"}).json()
    by_name = client.get("/products", params={"search": "CLAY"}).json()

    assert [p["name"] for p in by_category] == ["Tulsi"]
    assert [p["name"] for p in by_name] == ["Clay Pot"]


def test_search_wildcards_and_accents(client):
    client.post("/products", json={"name": "Rose", "price": 80})
    client.post("/products", json={"name": "Pot_Large", "price": 120})
    client.post("/products", json={"name": "ÉPINE Cactus", "price": 90})

    underscore = client.get("/products", params={"search": "_"}).json()
    percent = client.get("/products", params={"search": "%"}).json()
    accented = client.get("/products", params={"search": "épine"}).json()

    assert [p["name"] for p in underscore] == ["Pot_Large"]
    assert percent == []
    assert [p["name"] for p in accented] == ["ÉPINE Cactus"]


@pytest.mark.parametrize("payload", [
    {"name": "", "price": 10},
    {"name": "   ", "price": 10},
    {"name": "Fern", "price": -1},
    {"name": "Fern", "price": "cheap"},
])
def test_invalid_products_are_rejected(client, payload):
    response = client.post("/products", json=payload)

    assert response.status_code == 422
    assert client.get("/products").json() == []


def test_delete_product(client, aloe_vera):
    response = client.delete(f"/products/{aloe_vera}")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/products").json() == []


def test_delete_unknown_product_is_a_noop(client):
    response = client.delete("/products/999")

    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_service_validates_name_and_price(db):
    catalog = CatalogService(db)

    with pytest.raises(ValidationError):
        catalog.add_product("", 10)

    with pytest.raises(ValidationError):
        catalog.add_product("Fern", -5)

    with pytest.raises(ValidationError):
        catalog.add_product("Fern", "abc")

    product = catalog.add_product("  Fern ", "0", category="")
    assert product.name == "Fern"
    assert product.price == 0
    assert product.category is None
