"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import adapters, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient

from main import app
from api.dependencies import get_mongo_adapter
from test_fixtures import make_mongo


@pytest.fixture
def mongo():
    """MongoAdapter over a mocked MongoClient that answered the startup ping."""
    return make_mongo(ready=True)


@pytest.fixture
def offline_mongo():
    """MongoAdapter whose pings always time out."""
    return make_mongo(ready=False)


@pytest.fixture
def users_collection(mongo):
    return mongo.users


@pytest.fixture
def meal_kits_collection(mongo):
    return mongo.meal_kits


def _client_for(adapter):
    app.dependency_overrides[get_mongo_adapter] = lambda: adapter
    return TestClient(app)


@pytest.fixture
def client(mongo):
    yield _client_for(mongo)
    app.dependency_overrides.clear()


@pytest.fixture
def offline_client(offline_mongo):
    yield _client_for(offline_mongo)
    app.dependency_overrides.clear()
