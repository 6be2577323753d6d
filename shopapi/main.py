# shopapi/main.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .carts import CartStore
from .config import Settings
from .errors import register_error_handlers
from .logger import setup_logger
from .models import AddToCartIn, ProductIn, ProductUpdate
from .products import ProductStore
from .storage import JsonCollection

# ---------------------------
# Store lookups (one pair per app)
# ---------------------------
def get_product_store(request: Request) -> ProductStore:
    return request.app.state.products


def get_cart_store(request: Request) -> CartStore:
    return request.app.state.carts

# ---------------------------
# Product endpoints
# ---------------------------
products_router = APIRouter()


@products_router.get("")
async def list_products(store: ProductStore = Depends(get_product_store)):
    return store.list()


@products_router.get("/{pid}")
async def get_product(pid: str, store: ProductStore = Depends(get_product_store)):
    return store.get(pid)


@products_router.post("", status_code=201)
async def create_product(payload: Optional[ProductIn] = None, store: ProductStore = Depends(get_product_store)):
    # a missing body is read as {}
    return store.create(payload if payload is not None else ProductIn())


@products_router.put("/{pid}")
async def update_product(pid: str, payload: Optional[ProductUpdate] = None,
                         store: ProductStore = Depends(get_product_store)):
    return store.update(pid, payload if payload is not None else ProductUpdate())


@products_router.delete("/{pid}")
async def delete_product(pid: str, store: ProductStore = Depends(get_product_store)):
    return store.delete(pid)

# ---------------------------
# Cart endpoints
# ---------------------------
carts_router = APIRouter()


@carts_router.post("", status_code=201)
async def create_cart(store: CartStore = Depends(get_cart_store)):
    return store.create()


@carts_router.get("/{cid}")
async def get_cart_items(cid: str, store: CartStore = Depends(get_cart_store)):
    return store.get_items(cid)


@carts_router.post("/{cid}/product/{pid}")
async def add_product_to_cart(cid: str, pid: str, payload: Optional[AddToCartIn] = None,
                              store: CartStore = Depends(get_cart_store)):
    quantity = payload.quantity if payload is not None else None
    return store.add_product(cid, pid, quantity)

# ---------------------------
# App factory
# ---------------------------
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logger = setup_logger(settings.log_level, settings.log_file)

    app = FastAPI(title="shopapi (JSON file store)")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    products = ProductStore(JsonCollection(settings.products_path))
    app.state.settings = settings
    app.state.products = products
    app.state.carts = CartStore(JsonCollection(settings.carts_path), products)

    app.include_router(products_router, prefix="/api/products", tags=["products"])
    app.include_router(carts_router, prefix="/api/carts", tags=["carts"])

    logger.debug("products file: %s, carts file: %s", settings.products_path, settings.carts_path)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings: Settings = app.state.settings
    logging.getLogger("shopapi").info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
