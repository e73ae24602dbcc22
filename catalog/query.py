"""
Listing and statistics over a store snapshot.

These functions never touch the store itself; they take the list of products
returned by ``ProductStore.snapshot()``.
"""
import re
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .models import Product

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_param(raw: Optional[str], default: int) -> int:
    """
    Read a positive integer from a query string value.

    Only the leading digits count ("2abc" is 2). Missing, non-numeric, zero
    or negative values give ``default``.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    value = int(match.group(1))
    return value if value > 0 else default


@dataclass
class ListQuery:
    category: Optional[str] = None
    search: Optional[str] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(
        cls,
        category: Optional[str] = None,
        search: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> "ListQuery":
        return cls(
            category=category or None,
            search=search or None,
            page=parse_int_param(page, DEFAULT_PAGE),
            limit=parse_int_param(limit, DEFAULT_LIMIT),
        )


def filter_products(products: List[Product], query: ListQuery) -> List[Product]:
    out = products
    if query.category:
        wanted = query.category.lower()
        out = [p for p in out if p.category.lower() == wanted]
    if query.search:
        term = query.search.lower()
        out = [p for p in out if term in p.name.lower()]
    return out


def run_query(products: List[Product], query: ListQuery) -> Dict[str, Any]:
    matched = filter_products(products, query)
    start = (query.page - 1) * query.limit
    paged = matched[start:start + query.limit]
    return {
        "total": len(matched),
        "page": query.page,
        "limit": query.limit,
        "data": [p.to_json() for p in paged],
    }


def category_stats(products: List[Product]) -> Dict[str, Any]:
    by_category = Counter(p.category for p in products)
    return {"total": len(products), "byCategory": dict(by_category)}
