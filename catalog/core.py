import math
from typing import Any, Dict, List

from .models import Product

# Writable fields of a product, by their wire names.
PRODUCT_FIELDS = ("name", "description", "price", "category", "inStock")


def validate_product(candidate: Any) -> List[str]:
    """
    Check a candidate product body and return every violation found.

    An empty list means the candidate can be turned into a Product. Anything
    that is not a JSON object is checked as an empty object.
    """
    if not isinstance(candidate, dict):
        candidate = {}
    errors = []

    name = candidate.get("name")
    if not isinstance(name, str) or not name:
        errors.append("Invalid or missing name")

    if not isinstance(candidate.get("description"), str):
        errors.append("Invalid description")

    price = candidate.get("price")
    if (
        isinstance(price, bool)
        or not isinstance(price, (int, float))
        or (isinstance(price, float) and not math.isfinite(price))
    ):
        errors.append("Invalid price")

    category = candidate.get("category")
    if not isinstance(category, str) or not category:
        errors.append("Invalid or missing category")

    if not isinstance(candidate.get("inStock"), bool):
        errors.append("Invalid inStock value")

    return errors


def _make_product(product_id: str, candidate: Dict[str, Any]) -> Product:
    # unknown keys (a client-sent "id" included) are dropped
    fields = {key: candidate[key] for key in PRODUCT_FIELDS}
    return Product.model_validate({"id": product_id, **fields})
