import pytest

from pos_service.adapters.memory_adapter import InMemoryStoreAdapter
from pos_service.app import create_app


def _create(client, **fields):
    response = client.post("/api/products", json=fields)
    assert response.status_code == 201
    return response.get_json()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_list_products_empty(client):
    response = client.get("/api/products")

    assert response.status_code == 200
    assert response.get_json() == []


def test_create_product(client):
    product = _create(client, name="Tea", price=2.5, quantity=3)

    assert product["id"] == 1
    assert product["category"] == "Uncategorized"
    assert client.get("/api/products").get_json() == [product]


def test_create_product_without_json_body(client):
    response = client.post("/api/products", data="not json", content_type="text/plain")

    assert response.status_code == 201
    assert response.get_json()["name"] == "Untitled Product"


def test_update_product(client):
    _create(client, name="Tea", price=2.5, quantity=3)

    response = client.put("/api/products/1", json={"price": 9.99})

    assert response.status_code == 200
    body = response.get_json()
    assert body["price"] == 9.99
    assert body["name"] == "Tea"
    assert body["quantity"] == 0


def test_update_unknown_product(client):
    response = client.put("/api/products/8", json={"name": "x"})

    assert response.status_code == 404
    assert response.get_json() == {"error": "Product not found"}


def test_update_non_numeric_id_is_not_found(client):
    response = client.put("/api/products/abc", json={"name": "x"})

    assert response.status_code == 404
    assert "error" in response.get_json()


def test_delete_product(client):
    _create(client, name="Tea")

    response = client.delete("/api/products/1")

    assert response.status_code == 204
    assert response.data == b""
    assert client.get("/api/products").get_json() == []


def test_delete_unknown_product(client):
    assert client.delete("/api/products/5").status_code == 204


def test_record_sale(client):
    _create(client, name="Tea", price=10, quantity=5)

    response = client.post("/api/sales", json={"items": [{"productId": 1, "qty": 3, "unitPrice": 10}]})

    assert response.status_code == 200
    sale = response.get_json()
    assert sale["id"] == 1
    assert sale["items"] == [{"productId": 1, "qty": 3, "unitPrice": 10}]
    assert sale["timestamp"].endswith("Z")
    assert client.get("/api/products").get_json()[0]["quantity"] == 2
    assert client.get("/api/sales").get_json() == [sale]


def test_record_sale_without_items(client):
    response = client.post("/api/sales", json={"items": []})

    assert response.status_code == 400
    assert response.get_json() == {"error": "No items provided"}


def test_record_sale_insufficient_stock(client):
    _create(client, name="Tea", price=10, quantity=5)

    response = client.post("/api/sales", json={"items": [{"productId": 1, "qty": 10, "unitPrice": 10}]})

    assert response.status_code == 400
    assert response.get_json() == {"error": "Insufficient stock for product ID 1"}
    assert client.get("/api/sales").get_json() == []


def test_reports_summary(client):
    _create(client, name="Tea", price=5, quantity=10)
    client.post("/api/sales", json={"items": [{"productId": 1, "qty": 2, "unitPrice": 5}]})
    client.post("/api/sales", json={"items": [{"productId": 1, "qty": 3, "unitPrice": 5}]})

    response = client.get("/api/reports/summary")

    assert response.status_code == 200
    entry = {"productId": 1, "qty": 5, "revenue": 25, "name": "Tea"}
    assert response.get_json() == {"report": [entry], "totalRevenue": 25, "topSelling": [entry]}


def test_unexpected_error_returns_500(client, repository):
    def broken_load():
        raise RuntimeError("disk on fire")

    repository.load = broken_load

    response = client.get("/api/reports/summary")

    assert response.status_code == 500
    assert response.get_json() == {"error": "disk on fire"}


def test_cors_headers(client):
    response = client.get("/api/products")

    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert "PUT" in response.headers["Access-Control-Allow-Methods"]


def test_preflight(client):
    response = client.options("/api/sales")

    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Headers"] == "Content-Type,Authorization"


@pytest.fixture
def cached_client():
    app = create_app(
        repository=InMemoryStoreAdapter(),
        test_config={"TESTING": True, "CACHE_TYPE": "SimpleCache"},
    )
    return app.test_client()


def test_get_responses_are_cached(cached_client):
    first = cached_client.get("/api/products")
    second = cached_client.get("/api/products")

    assert first.headers["X-Cache"] == "MISS"
    assert second.headers["X-Cache"] == "HIT"
    assert second.get_json() == []


def test_mutation_clears_cache(cached_client):
    cached_client.get("/api/products")
    _create(cached_client, name="Tea")

    response = cached_client.get("/api/products")

    assert response.headers["X-Cache"] == "MISS"
    assert [p["name"] for p in response.get_json()] == ["Tea"]


def test_null_cache_always_misses(client):
    client.get("/api/products")

    assert client.get("/api/products").headers["X-Cache"] == "MISS"
