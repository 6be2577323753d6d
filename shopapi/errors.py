# shopapi/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

PRODUCT_NOT_FOUND = "Producto no encontrado"
CART_NOT_FOUND = "Carrito no encontrado"
MISSING_PRODUCT_FIELDS = "Todos los campos son obligatorios, excepto thumbnails"
INVALID_QUANTITY = "La cantidad debe ser mayor que cero"


class StoreError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StoreError):
    status_code = 400


class NotFound(StoreError):
    status_code = 404


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies get the same {"error": ...} shape as every other failure
    errors = exc.errors()
    if errors:
        first = errors[0]
        where = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{where}: {first.get('msg')}" if where else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
