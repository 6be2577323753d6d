# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from shopapi.config import Settings
from shopapi.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def product_payload():
    return {
        "title": "Mate",
        "description": "Mate de calabaza",
        "code": "MATE-01",
        "price": 2500,
        "available": True,
        "stock": 10,
        "category": "cocina",
    }


@pytest.fixture
def product(client, product_payload):
    r = client.post("/api/products", json=product_payload)
    assert r.status_code == 201
    return r.json()


@pytest.fixture
def cart(client):
    r = client.post("/api/carts")
    assert r.status_code == 201
    return r.json()
