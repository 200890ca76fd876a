"""
Test configuration and fixtures for the AccessAudit API.

Every API test runs once per storage backend: the in-memory store and the
relational store on a throwaway SQLite file.
"""

import os
import random
from typing import Generator

from dotenv import load_dotenv

load_dotenv()

os.environ["LOG_TO_FILE"] = "false"
os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from accessaudit.main import create_app
from accessaudit.platform.config import Settings
from accessaudit.platform.db.session import build_engine
from accessaudit.platform.dependencies import get_random_source
from accessaudit.platform.storage.database import DatabaseStore
from accessaudit.platform.storage.memory import MemoryStore
from accessaudit.platform.storage.seed import seed_store

BACKENDS = ["memory", "database"]


class FixedRandom(random.Random):
    """Random source whose randint always returns the same value."""

    def __init__(self, value: int):
        super().__init__()
        self.value = value

    def randint(self, a, b):
        return self.value


def make_settings(backend: str, tmp_path) -> Settings:
    return Settings(
        STORAGE_BACKEND=backend,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'accessaudit_test.db'}",
        SEED_ON_STARTUP=True,
        LOG_TO_FILE=False,
    )


@pytest.fixture(params=BACKENDS)
def test_app(request, tmp_path):
    """Create a FastAPI application backed by each storage backend in turn."""
    return create_app(settings=make_settings(request.param, tmp_path))


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Create a test client for making HTTP requests.
    Entering the client runs the lifespan, which builds and seeds the store.
    """
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()


@pytest.fixture
def fixed_score(test_app):
    """Pin the scan score: call with the value the next scans should get."""

    def _pin(value: int):
        test_app.dependency_overrides[get_random_source] = lambda: FixedRandom(value)

    return _pin


@pytest.fixture
def store_call(client):
    """Run a store coroutine on the client's event loop."""

    def _call(method_name: str, *args):
        store = client.app.state.store
        return client.portal.call(getattr(store, method_name), *args)

    return _call


@pytest_asyncio.fixture(params=BACKENDS)
async def store(request, tmp_path):
    if request.param == "memory":
        instance = MemoryStore()
    else:
        instance = DatabaseStore(build_engine(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}"))
        await instance.init_schema()
    await seed_store(instance)
    yield instance
    await instance.close()
