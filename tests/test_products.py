# tests/test_products.py
import json

import pytest

from shopapi.errors import NotFound, ValidationError
from shopapi.models import ProductIn
from shopapi.products import ProductStore
from shopapi.storage import JsonCollection


def test_list_is_empty_without_file(client):
    r = client.get("/api/products")
    assert r.status_code == 200
    assert r.json() == []


def test_create_returns_fields_with_defaults(client, product_payload):
    r = client.post("/api/products", json=product_payload)
    assert r.status_code == 201
    body = r.json()
    for key, value in product_payload.items():
        assert body[key] == value
    assert body["thumbnails"] == []
    assert body["status"] is True
    assert body["id"]

    # get returns an equal object
    r2 = client.get(f"/api/products/{body['id']}")
    assert r2.status_code == 200
    assert r2.json() == body


def test_create_assigns_unique_ids(client, product_payload):
    ids = {client.post("/api/products", json=product_payload).json()["id"] for _ in range(3)}
    assert len(ids) == 3
    assert len(client.get("/api/products").json()) == 3


def test_create_persists_whole_collection(client, settings, product):
    with open(settings.products_path, encoding="utf-8") as f:
        stored = json.load(f)
    assert stored == [product]


def test_create_keeps_thumbnails(client, product_payload):
    product_payload["thumbnails"] = ["a.png", "b.png"]
    body = client.post("/api/products", json=product_payload).json()
    assert body["thumbnails"] == ["a.png", "b.png"]


def test_create_accepts_available_false(client, product_payload):
    product_payload["available"] = False
    r = client.post("/api/products", json=product_payload)
    assert r.status_code == 201
    assert r.json()["available"] is False


@pytest.mark.parametrize("field", ["title", "description", "code", "price", "stock", "category", "available"])
def test_create_rejects_missing_field(client, product_payload, field):
    del product_payload[field]
    r = client.post("/api/products", json=product_payload)
    assert r.status_code == 400
    assert r.json() == {"error": "Todos los campos son obligatorios, excepto thumbnails"}


@pytest.mark.parametrize("field,value", [("price", 0), ("stock", 0), ("title", "")])
def test_create_rejects_falsy_required_field(client, product_payload, field, value):
    product_payload[field] = value
    r = client.post("/api/products", json=product_payload)
    assert r.status_code == 400
    assert client.get("/api/products").json() == []


def test_create_rejects_wrong_type_with_error_body(client, product_payload):
    product_payload["price"] = "cheap"
    r = client.post("/api/products", json=product_payload)
    assert r.status_code == 400
    assert "error" in r.json()


def test_get_missing_product(client):
    r = client.get("/api/products/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Producto no encontrado"}


def test_update_changes_only_given_fields(client, product):
    r = client.put(f"/api/products/{product['id']}", json={"title": "Mate imperial", "stock": 3})
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Mate imperial"
    assert body["stock"] == 3
    for key in ("id", "description", "code", "price", "available", "category", "thumbnails", "status"):
        assert body[key] == product[key]
    assert client.get(f"/api/products/{product['id']}").json() == body


def test_update_ignores_falsy_values(client, product):
    r = client.put(f"/api/products/{product['id']}",
                   json={"price": 0, "stock": 0, "title": "", "category": None})
    assert r.status_code == 200
    assert r.json() == product


def test_update_available_false_is_applied(client, product):
    body = client.put(f"/api/products/{product['id']}", json={"available": False}).json()
    assert body["available"] is False


def test_update_cannot_touch_status_or_id(client, product):
    body = client.put(f"/api/products/{product['id']}", json={"status": False, "id": "other"}).json()
    assert body["status"] is True
    assert body["id"] == product["id"]


def test_update_missing_product(client):
    r = client.put("/api/products/nope", json={"title": "x"})
    assert r.status_code == 404
    assert r.json() == {"error": "Producto no encontrado"}


def test_delete_product(client, product, product_payload):
    other = client.post("/api/products", json=product_payload).json()
    r = client.delete(f"/api/products/{product['id']}")
    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert client.get("/api/products").json() == [other]
    assert client.get(f"/api/products/{product['id']}").status_code == 404


def test_delete_missing_product(client, product):
    r = client.delete("/api/products/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Producto no encontrado"}
    assert client.get("/api/products").json() == [product]


# ---------------------------
# Store used directly
# ---------------------------

def test_store_raises_domain_errors(tmp_path):
    store = ProductStore(JsonCollection(tmp_path / "p.json"))
    with pytest.raises(NotFound):
        store.get("x")
    with pytest.raises(ValidationError):
        store.create(ProductIn(title="only a title"))
    with pytest.raises(NotFound):
        store.delete("x")


def test_store_write_failure_propagates(tmp_path, product_payload):
    store = ProductStore(JsonCollection(tmp_path / "missing-dir" / "p.json"))
    with pytest.raises(OSError):
        store.create(ProductIn(**product_payload))


# ---------------------------
# Requests without a body
# ---------------------------

def test_create_without_body(client):
    r = client.post("/api/products")
    assert r.status_code == 400
    assert r.json() == {"error": "Todos los campos son obligatorios, excepto thumbnails"}


def test_update_without_body_on_missing_product(client):
    r = client.put("/api/products/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Producto no encontrado"}


def test_update_without_body_keeps_product(client, product):
    r = client.put(f"/api/products/{product['id']}")
    assert r.status_code == 200
    assert r.json() == product


@pytest.mark.parametrize("value", [0, 1, "maybe", None])
def test_available_is_stored_as_sent(client, product_payload, value):
    product_payload["available"] = value
    r = client.post("/api/products", json=product_payload)
    assert r.status_code == 201
    assert r.json()["available"] == value
    assert type(r.json()["available"]) is type(value)
