# catalog/main.py
"""
FastAPI application for the in-memory product catalog.

Usage:
    python -m catalog.main
    # or
    uvicorn catalog.main:app --port 3000
"""
from typing import Any, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import Settings
from .database import ProductStore
from .errors import ValidationError
from .logger import get_logger, set_level
from .logic import (
    list_products_logic, product_stats_logic, get_product_logic,
    create_product_logic, update_product_logic, delete_product_logic,
)
from .middleware import install_middleware

logger = get_logger("api")

WELCOME = "Welcome to the Product API! Go to /api/products to see all products."

router = APIRouter()


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def _is_json(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";")[0].strip().lower() == "application/json"


async def read_json_body(request: Request) -> Any:
    # bodies sent as anything but application/json are not parsed
    if not _is_json(request):
        return {}
    raw = await request.body()
    if not raw:
        return {}
    try:
        return await request.json()
    except ValueError:
        raise ValidationError()


# ---------------------------
# Root
# ---------------------------
@router.get("/", response_class=PlainTextResponse)
async def welcome():
    return WELCOME


# ---------------------------
# Product endpoints
# ---------------------------
@router.get("/api/products")
@router.get("/api/products/", include_in_schema=False)
async def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    return await list_products_logic(store, category, search, page, limit)


# Registered ahead of /api/products/{product_id} so "stats" is never read as an id.
@router.get("/api/products/stats")
@router.get("/api/products/stats/", include_in_schema=False)
async def product_stats(store: ProductStore = Depends(get_store)):
    return await product_stats_logic(store)


@router.get("/api/products/{product_id}")
@router.get("/api/products/{product_id}/", include_in_schema=False)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await get_product_logic(store, product_id)


@router.post("/api/products", status_code=201)
@router.post("/api/products/", status_code=201, include_in_schema=False)
async def create_product(request: Request, store: ProductStore = Depends(get_store)):
    payload = await read_json_body(request)
    return await create_product_logic(store, payload)


@router.put("/api/products/{product_id}")
@router.put("/api/products/{product_id}/", include_in_schema=False)
async def update_product(product_id: str, request: Request, store: ProductStore = Depends(get_store)):
    payload = await read_json_body(request)
    return await update_product_logic(store, product_id, payload)


@router.delete("/api/products/{product_id}")
@router.delete("/api/products/{product_id}/", include_in_schema=False)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await delete_product_logic(store, product_id)


def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    set_level(settings.log_level)
    if settings.api_key is None:
        logger.warning("API_KEY is not set; every /api request will be rejected")

    # trailing slashes are served by the routes themselves, never redirected
    app = FastAPI(title="product-catalog (in-memory)", redirect_slashes=False)
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore.seeded()

    install_middleware(app, settings)
    # added last so it wraps the interceptors and answers preflights itself
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app


app = create_app()


def main():
    import uvicorn

    settings = app.state.settings
    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
