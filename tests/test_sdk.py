# tests/test_sdk.py
import pytest
import requests

from sdk.shopclient import ShopClient


class FakeResponse:
    def __init__(self, status_code, body):
        self.status_code = status_code
        self._body = body

    def json(self):
        return self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}", response=self)


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def _record(self, method):
        def call(url, **kwargs):
            self.calls.append((method, url, kwargs))
            return self.response
        return call

    def __getattr__(self, name):
        if name in ("get", "post", "put", "delete"):
            return self._record(name)
        raise AttributeError(name)


def make_client(status_code, body):
    c = ShopClient(base_url="http://shop.test/")
    c.session = FakeSession(FakeResponse(status_code, body))
    return c


def test_add_to_cart_posts_quantity():
    c = make_client(200, {"id": "c1", "products": [{"product": "p1", "quantity": 2}]})
    cart = c.add_to_cart("c1", "p1", 2)
    assert cart["products"][0]["quantity"] == 2
    method, url, kwargs = c.session.calls[0]
    assert method == "post"
    assert url == "http://shop.test/api/carts/c1/product/p1"
    assert kwargs["json"] == {"quantity": 2}


def test_create_product_omits_thumbnails_when_not_given():
    c = make_client(201, {"id": "p1"})
    c.create_product("t", "d", "c", 10, 5, "cat")
    payload = c.session.calls[0][2]["json"]
    assert "thumbnails" not in payload
    assert payload["available"] is True


def test_update_product_sends_only_given_fields():
    c = make_client(200, {"id": "p1"})
    c.update_product("p1", stock=3)
    method, url, kwargs = c.session.calls[0]
    assert (method, url) == ("put", "http://shop.test/api/products/p1")
    assert kwargs["json"] == {"stock": 3}


def test_error_status_raises():
    c = make_client(404, {"error": "Producto no encontrado"})
    with pytest.raises(requests.HTTPError) as exc:
        c.get_product("nope")
    assert exc.value.response.json() == {"error": "Producto no encontrado"}
