"""Bookshelf API: FastAPI application entry point.

Run with: uvicorn bookshelf.main:app  (or: python -m bookshelf)

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The record store handle is built in the lifespan and lives on app.state;
      every connection receives it through a dependency, never a global
    - Global error handlers map BookshelfError -> {"code", "message"} responses

Design Decisions:
    - create_app factory: each app (and each test) gets its own empty store
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from bookshelf.api.error_handlers import register_error_handlers
from bookshelf.api.routes import health, record_socket
from bookshelf.config import Settings, get_settings
from bookshelf.core.record_ids import get_id_generator
from bookshelf.core.record_store import RecordStore
from bookshelf.infrastructure.observability import setup_logging
from bookshelf.schemas.records import Book
from bookshelf.services.store_handle import RecordStoreHandle

logger = logging.getLogger(__name__)

SAMPLE_BOOK = Book(title="Test Book 1", author="I am", year=2024)


def build_store_handle(settings: Settings) -> RecordStoreHandle[Book]:
    """Create the process-wide store, optionally seeded with the sample book."""
    store: RecordStore[Book] = RecordStore(
        id_generator=get_id_generator(settings.id_strategy),
        label=settings.record_label,
    )
    if settings.seed_sample_record:
        seeded = store.add(SAMPLE_BOOK)
        logger.info("Seeded sample record", extra={"record_id": seeded.id})
    return RecordStoreHandle(store)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app with its own record store."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format.value)
        app.state.record_store = build_store_handle(settings)
        logger.info(f"Bookshelf API started, WebSocket at {settings.ws_path}")
        yield
        logger.info("Bookshelf API shutting down")

    app = FastAPI(title="Bookshelf API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    register_error_handlers(app)

    # Routes: explicit registration
    app.include_router(health.router)
    app.add_api_websocket_route(
        settings.ws_path, record_socket.record_socket, name="record_socket",
    )
    return app


app = create_app()
