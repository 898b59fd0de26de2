"""Process entry point: serve the Bookshelf API with uvicorn."""

import uvicorn

from bookshelf.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bookshelf.main:app",
        host=settings.host,
        port=settings.port,
        ws_max_size=settings.ws_max_size,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
