import pytest
from fastapi.testclient import TestClient

from itemapi.main import create_app
from itemapi.storage import ItemStore


@pytest.fixture
def store():
    return ItemStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def laptop():
    return {"name": "Laptop", "description": "Gaming laptop", "price": 1299.99}
