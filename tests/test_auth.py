# tests/test_auth.py
import pytest
from fastapi.testclient import TestClient

from catalog.config import Settings
from catalog.main import create_app

UNAUTHORIZED = {"error": "Unauthorized - Invalid or missing API key"}
MUG = {"name": "Mug", "description": "", "price": 10, "category": "kitchen", "inStock": True}


@pytest.mark.parametrize("method,path", [
    ("GET", "/api/products"),
    ("GET", "/api/products/1"),
    ("GET", "/api/products/stats"),
    ("DELETE", "/api/products/1"),
    ("GET", "/api/anything"),
])
def test_missing_key_is_rejected(anon_client, method, path):
    r = anon_client.request(method, path)
    assert r.status_code == 401
    assert r.json() == UNAUTHORIZED


def test_wrong_key_is_rejected(anon_client):
    r = anon_client.get("/api/products", headers={"x-api-key": "test-key "})
    assert r.status_code == 401


def test_rejected_writes_do_not_mutate(anon_client, store):
    anon_client.post("/api/products", json=MUG)
    anon_client.put("/api/products/1", json=MUG, headers={"x-api-key": "wrong"})
    anon_client.delete("/api/products/2")
    assert [p.id for p in store.snapshot()] == ["1", "2", "3"]
    assert store.find_by_id("1").name == "Laptop"


def test_unknown_route_outside_api_skips_auth(anon_client):
    r = anon_client.get("/nowhere")
    assert r.status_code == 404
    assert r.json() == {"error": "Route not found"}


def test_unconfigured_key_rejects_everything():
    client = TestClient(create_app(Settings(api_key=None)))
    assert client.get("/api/products").status_code == 401
    assert client.get("/").status_code == 200
