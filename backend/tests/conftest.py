"""Root conftest: shared test configuration.

Invariants:
    - Every test gets a fresh, unseeded store (no sample record)
    - client fixture runs the app lifespan, so app.state.record_store exists
"""

import os

import pytest
from fastapi.testclient import TestClient

# Ensure the module-level app never seeds or emits JSON logs during tests
os.environ.setdefault("BOOKSHELF_SEED_SAMPLE_RECORD", "false")
os.environ.setdefault("BOOKSHELF_LOG_FORMAT", "text")

from bookshelf.config import Settings  # noqa: E402
from bookshelf.core.record_store import RecordStore  # noqa: E402
from bookshelf.main import create_app  # noqa: E402
from bookshelf.services.store_handle import RecordStoreHandle  # noqa: E402


@pytest.fixture
def settings():
    return Settings(
        _env_file=None, seed_sample_record=False, log_format="text",
    )


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def store_handle(store):
    return RecordStoreHandle(store)


@pytest.fixture
def client(settings):
    """TestClient with lifespan: fresh app, fresh store."""
    with TestClient(create_app(settings)) as c:
        yield c
