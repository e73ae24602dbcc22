# tests/test_query.py
import pytest

from catalog.database import seed_products
from catalog.query import ListQuery, category_stats, parse_int_param, run_query


@pytest.mark.parametrize("raw,expected", [
    (None, 7),
    ("3", 3),
    ("2abc", 2),
    (" 4", 4),
    ("abc", 7),
    ("0", 7),
    ("-2", 7),
    ("", 7),
])
def test_parse_int_param(raw, expected):
    assert parse_int_param(raw, 7) == expected


def test_empty_filters_are_ignored():
    query = ListQuery.from_params(category="", search="")
    assert query.category is None
    assert query.search is None
    assert run_query(seed_products(), query)["total"] == 3


def test_filters_combine():
    query = ListQuery.from_params(category="ELECTRONICS", search="lap")
    result = run_query(seed_products(), query)
    assert result["total"] == 1
    assert result["data"][0]["name"] == "Laptop"


def test_total_counts_before_paging():
    result = run_query(seed_products(), ListQuery(category="electronics", page=2, limit=1))
    assert result["total"] == 2
    assert [p["id"] for p in result["data"]] == ["2"]


def test_category_stats_keeps_stored_spelling():
    products = seed_products()
    products[0] = products[0].model_copy(update={"category": "Electronics"})
    assert category_stats(products) == {
        "total": 3,
        "byCategory": {"Electronics": 1, "electronics": 1, "kitchen": 1},
    }


def test_category_stats_empty():
    assert category_stats([]) == {"total": 0, "byCategory": {}}
