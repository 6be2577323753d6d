# shopapi/carts.py
import logging
import uuid
from typing import Any, Dict, List, Optional

from .errors import CART_NOT_FOUND, INVALID_QUANTITY, PRODUCT_NOT_FOUND, NotFound, ValidationError
from .models import Cart
from .products import ProductStore
from .storage import JsonCollection

logger = logging.getLogger("shopapi.carts")


class CartStore:
    def __init__(self, collection: JsonCollection, products: ProductStore):
        self.collection = collection
        self.products = products

    def create(self) -> Dict[str, Any]:
        cart = Cart(id=str(uuid.uuid4())).model_dump()
        carts = self.collection.load()
        carts.append(cart)
        self.collection.save(carts)
        logger.info("cart %s created", cart["id"])
        return cart

    def get_items(self, cart_id: str) -> List[Dict[str, Any]]:
        for c in self.collection.load():
            if c.get("id") == cart_id:
                return c.get("products", [])
        logger.debug("cart %s not found", cart_id)
        raise NotFound(CART_NOT_FOUND)

    def add_product(self, cart_id: str, product_id: str, quantity: Optional[int]) -> Dict[str, Any]:
        if not quantity or quantity <= 0:
            raise ValidationError(INVALID_QUANTITY)

        # product is checked before the cart, and nothing is written on failure
        if not self.products.exists(product_id):
            raise NotFound(PRODUCT_NOT_FOUND)

        carts = self.collection.load()
        cart = next((c for c in carts if c.get("id") == cart_id), None)
        if cart is None:
            raise NotFound(CART_NOT_FOUND)

        items = cart.setdefault("products", [])
        line = next((it for it in items if it.get("product") == product_id), None)
        if line is not None:
            line["quantity"] += quantity
        else:
            line = {"product": product_id, "quantity": quantity}
            items.append(line)

        self.collection.save(carts)
        logger.info("cart %s: product %s now x%d", cart_id, product_id, line["quantity"])
        return cart
