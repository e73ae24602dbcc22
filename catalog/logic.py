import uuid
from typing import Any, Dict, Optional

from .core import validate_product, _make_product
from .database import ProductStore
from .errors import NotFound, ValidationError
from .query import ListQuery, run_query, category_stats

# This file contains the core logic for all product endpoints.


def _check_payload(payload: Any) -> None:
    errors = validate_product(payload)
    if errors:
        raise ValidationError(", ".join(errors))


async def list_products_logic(
    store: ProductStore,
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Dict[str, Any]:
    query = ListQuery.from_params(category, search, page, limit)
    return run_query(store.snapshot(), query)


async def product_stats_logic(store: ProductStore) -> Dict[str, Any]:
    return category_stats(store.snapshot())


async def get_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    p = store.find_by_id(product_id)
    if p is None:
        raise NotFound()
    return p.to_json()


async def create_product_logic(store: ProductStore, payload: Any) -> Dict[str, Any]:
    _check_payload(payload)
    product = _make_product(uuid.uuid4().hex, payload)
    store.append(product)
    return product.to_json()


async def update_product_logic(store: ProductStore, product_id: str, payload: Any) -> Dict[str, Any]:
    with store.lock:
        index = store.find_index_by_id(product_id)
        if index == -1:
            raise NotFound()
        _check_payload(payload)
        product = store.replace_at(index, _make_product(product_id, payload))
    return product.to_json()


async def delete_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    with store.lock:
        index = store.find_index_by_id(product_id)
        if index == -1:
            raise NotFound()
        deleted = store.remove_at(index)
    return {"message": "Product deleted", "deleted": [deleted.to_json()]}
