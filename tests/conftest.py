# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from catalog.config import Settings
from catalog.database import ProductStore
from catalog.main import create_app
from sdk.pycatalog import CatalogClient

API_KEY = "test-key"
AUTH = {"x-api-key": API_KEY}


@pytest.fixture
def store():
    return ProductStore.seeded()


@pytest.fixture
def app(store):
    return create_app(Settings(api_key=API_KEY), store=store)


@pytest.fixture
def client(app):
    return TestClient(app, headers=AUTH)


@pytest.fixture
def anon_client(app):
    return TestClient(app)


@pytest.fixture
def sdk(app):
    # TestClient speaks the same get/post/put/delete interface as requests.Session
    return CatalogClient(base_url="http://testserver", api_key=API_KEY, session=TestClient(app))
