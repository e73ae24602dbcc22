# tests/test_store.py
import pytest

from catalog.core import _make_product
from catalog.database import ProductStore

MUG = {"name": "Mug", "description": "", "price": 10, "category": "kitchen", "inStock": True}


def test_seeded_store_order():
    store = ProductStore.seeded()
    assert [p.id for p in store.snapshot()] == ["1", "2", "3"]


def test_snapshot_is_a_copy():
    store = ProductStore.seeded()
    snap = store.snapshot()
    snap.clear()
    assert len(store) == 3


def test_append_find_replace_remove():
    store = ProductStore()
    store.append(_make_product("a", MUG))
    store.append(_make_product("b", MUG))
    assert store.find_index_by_id("b") == 1
    assert store.find_index_by_id("zzz") == -1
    assert store.find_by_id("zzz") is None

    store.replace_at(0, _make_product("a", {**MUG, "name": "Cup"}))
    assert store.find_by_id("a").name == "Cup"

    removed = store.remove_at(0)
    assert removed.id == "a"
    assert [p.id for p in store.snapshot()] == ["b"]


def test_duplicate_id_is_refused():
    store = ProductStore.seeded()
    with pytest.raises(ValueError):
        store.append(_make_product("1", MUG))


def test_reset_restores_seed():
    store = ProductStore.seeded()
    store.remove_at(0)
    store.reset()
    assert len(store) == 3
