# sdk/shopclient.py
from typing import Any, Dict, List, Optional

import httpx
import requests


class ShopClient:
    def __init__(self, base_url: str = "http://localhost:8080", timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api{path}"

    # Products
    def list_products(self) -> List[Dict[str, Any]]:
        r = self.session.get(self._url("/products"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(self._url(f"/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def create_product(self, title: str, description: str, code: str, price: float, stock: int,
                       category: str, available: bool = True, thumbnails: Optional[List[str]] = None):
        payload = {
            "title": title, "description": description, "code": code, "price": price,
            "available": available, "stock": stock, "category": category,
        }
        if thumbnails is not None:
            payload["thumbnails"] = thumbnails
        r = self.session.post(self._url("/products"), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: str, **fields):
        r = self.session.put(self._url(f"/products/{product_id}"), json=fields, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str):
        r = self.session.delete(self._url(f"/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Carts
    def create_cart(self) -> Dict[str, Any]:
        r = self.session.post(self._url("/carts"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_cart(self, cart_id: str) -> List[Dict[str, Any]]:
        r = self.session.get(self._url(f"/carts/{cart_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def add_to_cart(self, cart_id: str, product_id: str, quantity: int = 1) -> Dict[str, Any]:
        r = self.session.post(self._url(f"/carts/{cart_id}/product/{product_id}"),
                              json={"quantity": quantity}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Async add (used to fire concurrent requests)
    async def add_to_cart_async(self, cart_id: str, product_id: str, quantity: int = 1) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            # no raise_for_status: callers inspect the status themselves
            return await client.post(self._url(f"/carts/{cart_id}/product/{product_id}"),
                                     json={"quantity": quantity})
