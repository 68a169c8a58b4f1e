import pytest
from fastapi.testclient import TestClient

from user_api.main import create_app
from user_api.storage.memory import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
