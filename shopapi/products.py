# shopapi/products.py
import logging
import uuid
from typing import Any, Dict, List

from .errors import MISSING_PRODUCT_FIELDS, PRODUCT_NOT_FOUND, NotFound, ValidationError
from .models import Product, ProductIn, ProductUpdate
from .storage import JsonCollection

logger = logging.getLogger("shopapi.products")

REQUIRED_FIELDS = ("title", "description", "code", "price", "stock", "category")


def _pick(value: Any, current: Any) -> Any:
    # falsy incoming values (0, "", null) keep the stored one
    return value if value else current


class ProductStore:
    def __init__(self, collection: JsonCollection):
        self.collection = collection

    def list(self) -> List[Dict[str, Any]]:
        return self.collection.load()

    def get(self, product_id: str) -> Dict[str, Any]:
        for p in self.collection.load():
            if p.get("id") == product_id:
                return p
        logger.debug("product %s not found", product_id)
        raise NotFound(PRODUCT_NOT_FOUND)

    def exists(self, product_id: str) -> bool:
        return any(p.get("id") == product_id for p in self.collection.load())

    def create(self, payload: ProductIn) -> Dict[str, Any]:
        missing = [name for name in REQUIRED_FIELDS if not getattr(payload, name)]
        if missing or not payload.has_available():
            logger.debug("rejected product, missing: %s", missing or ["available"])
            raise ValidationError(MISSING_PRODUCT_FIELDS)

        product = Product(
            id=str(uuid.uuid4()),
            title=payload.title,
            description=payload.description,
            code=payload.code,
            price=payload.price,
            available=payload.available,
            stock=payload.stock,
            category=payload.category,
            thumbnails=payload.thumbnails or [],
            status=True,
        ).model_dump()

        products = self.collection.load()
        products.append(product)
        self.collection.save(products)
        logger.info("product %s created (code=%s)", product["id"], product["code"])
        return product

    def update(self, product_id: str, payload: ProductUpdate) -> Dict[str, Any]:
        products = self.collection.load()
        index = next((i for i, p in enumerate(products) if p.get("id") == product_id), -1)
        if index == -1:
            raise NotFound(PRODUCT_NOT_FOUND)

        # Price or stock can never be set to 0 through an update.
        current = products[index]
        updated = {
            "id": product_id,
            "title": _pick(payload.title, current.get("title")),
            "description": _pick(payload.description, current.get("description")),
            "code": _pick(payload.code, current.get("code")),
            "price": _pick(payload.price, current.get("price")),
            "available": payload.available if payload.has_available() else current.get("available"),
            "stock": _pick(payload.stock, current.get("stock")),
            "category": _pick(payload.category, current.get("category")),
            # any list, empty included, replaces the thumbnails
            "thumbnails": payload.thumbnails if payload.thumbnails is not None else current.get("thumbnails"),
            "status": current.get("status"),
        }

        products[index] = updated
        self.collection.save(products)
        logger.info("product %s updated", product_id)
        return updated

    def delete(self, product_id: str) -> Dict[str, bool]:
        products = self.collection.load()
        remaining = [p for p in products if p.get("id") != product_id]
        if len(remaining) == len(products):
            raise NotFound(PRODUCT_NOT_FOUND)
        self.collection.save(remaining)
        logger.info("product %s deleted", product_id)
        return {"success": True}
