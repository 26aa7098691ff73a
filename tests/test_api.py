import pytest
from fastapi.testclient import TestClient

from storefront.database.documents import InMemoryDocumentSource
from storefront.main import create_app
from storefront.state import build_state


@pytest.fixture
def source(make_product):
    source = InMemoryDocumentSource()
    source.seed([
        make_product("1", name="Wheat", category="seeds", price=450, retailerId="shop-1"),
        make_product("2", name="Compost", category="fertilizers", price=320, retailerId="shop-1"),
    ])
    return source


@pytest.fixture
def client(source):
    with TestClient(create_app(build_state(source))) as client:
        yield client


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_catalog_starts_empty(client):
    body = client.get("/api/catalog").json()
    assert body["products"] == []
    assert body["selectedCategory"] is None
    assert body["loading"] is False


def test_load_and_facets(client):
    body = client.post("/api/catalog/load").json()
    assert {p["id"] for p in body["filteredProducts"]} == {"1", "2"}

    client.put("/api/catalog/search", json={"query": "wheat"})
    body = client.put("/api/catalog/category", json={"category": "fertilizers"}).json()
    assert body["searchQuery"] == ""
    assert [p["id"] for p in body["filteredProducts"]] == ["2"]

    body = client.put("/api/catalog/search", json={"query": "wheat"}).json()
    assert body["filteredProducts"] == []

    body = client.delete("/api/catalog/search").json()
    assert [p["id"] for p in body["filteredProducts"]] == ["2"]


def test_invalid_category_is_rejected(client):
    assert client.put("/api/catalog/category", json={"category": "tools"}).status_code == 422


def test_product_detail_falls_back(client):
    assert client.get("/api/catalog/products/1").json()["name"] == "Wheat"
    assert client.get("/api/catalog/products/6").json()["name"] == "Insect Repellent Spray"
    assert client.get("/api/catalog/products/missing").status_code == 404


def test_cart_flow(client):
    client.post("/api/catalog/load")
    client.post("/api/cart/items", json={"product_id": "1"})
    body = client.post("/api/cart/items", json={"product_id": "1", "quantity": 2}).json()

    assert len(body["lines"]) == 1
    assert body["total_count"] == 3
    assert body["total_price"] == 1350

    body = client.put("/api/cart/items/1", json={"quantity": 0}).json()
    assert body["lines"] == []


def test_cart_add_unknown_product(client):
    assert client.post("/api/cart/items", json={"product_id": "missing"}).status_code == 404


def test_cart_add_non_positive_is_ignored(client):
    body = client.post("/api/cart/items", json={"product_id": "1", "quantity": 0}).json()
    assert body["lines"] == []


def test_clear_cart(client):
    client.post("/api/cart/items", json={"product_id": "2"})
    assert client.delete("/api/cart").json()["total_count"] == 0


def test_retailer_inventory(client, source):
    products = client.get("/api/retailer/shop-1/products").json()
    assert {p["id"] for p in products} == {"1", "2"}

    assert client.put("/api/retailer/products/1/stock", json={"inStock": False}).status_code == 204
    assert source.documents["1"]["inStock"] is False

    assert client.delete("/api/retailer/products/2").status_code == 204
    assert "2" not in source.documents

    assert client.delete("/api/retailer/products/2").status_code == 404


def test_retailer_add_product(client):
    response = client.post(
        "/api/retailer/shop-9/products",
        params={"owner_name": "Agro Mart"},
        json={"name": "Neem Oil", "price": 240, "category": "pesticides", "quantity": 12},
    )

    assert response.status_code == 201
    assert response.json()["retailerName"] == "Agro Mart"
    assert response.json()["inStock"] is True
    assert len(client.get("/api/retailer/shop-9/products").json()) == 1


def test_retailer_add_product_with_blank_name_is_rejected(client, source):
    stored_before = len(source.documents)
    response = client.post(
        "/api/retailer/shop-9/products",
        json={"name": "   ", "price": 240, "category": "pesticides"},
    )

    assert response.status_code == 422
    assert len(source.documents) == stored_before


def test_prices_are_json_numbers(client):
    client.post("/api/cart/items", json={"product_id": "1", "quantity": 2})
    body = client.get("/api/cart").json()

    assert body["total_price"] == 900
    assert body["lines"][0]["line_total"] == 900
    assert isinstance(body["lines"][0]["product"]["price"], float)
