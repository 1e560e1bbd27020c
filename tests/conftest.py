from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from core.memory import InMemoryStore
from main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(log_level="WARNING")


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def client(settings: Settings, store: InMemoryStore) -> Iterator[TestClient]:
    app = create_app(settings, store=store)
    with TestClient(app) as client:
        yield client
