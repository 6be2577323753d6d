# shopapi/models.py
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

Number = Union[int, float]

# ---------------------------
# Request bodies
# ---------------------------
# Every field is optional: presence is checked by the stores so that a
# missing field is reported with the store's own 400 message.

class ProductIn(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    code: Optional[str] = None
    price: Optional[Number] = None
    # stored as sent, no coercion to bool
    available: Any = None
    stock: Optional[Number] = None
    category: Optional[str] = None
    thumbnails: Optional[List[str]] = None

    def has_available(self) -> bool:
        # "available": false or null still counts as provided
        return "available" in self.model_fields_set


class ProductUpdate(ProductIn):
    pass


class AddToCartIn(BaseModel):
    quantity: Optional[int] = None

# ---------------------------
# Stored records
# ---------------------------

class Product(BaseModel):
    id: str
    title: str
    description: str
    code: str
    price: Number
    available: Any
    stock: Number
    category: str
    thumbnails: List[str] = Field(default_factory=list)
    status: bool = True


class LineItem(BaseModel):
    product: str
    quantity: int


class Cart(BaseModel):
    id: str
    products: List[LineItem] = Field(default_factory=list)
