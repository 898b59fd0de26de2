"""Error Handlers: global exception handler for the HTTP side of the API.

Invariants:
    - Exception (catch-all) -> 500 with the {"code", "message"} envelope the
      WebSocket replies use, never leaks internal details

Design Decisions:
    - Only the catch-all is registered: the HTTP routes are the health checks,
      which neither raise BookshelfError nor take validated parameters
    - Kept out of main.py so app construction stays short
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from bookshelf.core.errors import BookshelfError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the global error handler on the FastAPI app."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=BookshelfError("Internal server error").to_reply(),
        )
