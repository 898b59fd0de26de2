"""Error Hierarchy: typed exceptions for every failure that becomes a reply frame.

Invariants:
    - Every error has a numeric code (ErrorCode) and a human-readable message
    - to_reply() produces the wire envelope {"code": int, "message": str}
    - Client errors (400/404) are recoverable; the connection stays open
    - No internal details leaked in reply messages

Design Decisions:
    - Single hierarchy with BookshelfError base: the WebSocket loop and the
      HTTP catch-all share one envelope (uniform error shape)
"""

from bookshelf.core.domain_types import ErrorCode, RecordId


class BookshelfError(Exception):
    """Base exception for all Bookshelf errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_reply(self) -> dict:
        """Convert to the error frame sent back on the socket."""
        return {"code": int(self.code), "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class BadRequestError(BookshelfError):
    """Inbound frame could not be turned into an action."""
    def __init__(self, message: str = "Incorrect action"):
        super().__init__(message, ErrorCode.BAD_REQUEST)


class RecordNotFoundError(BookshelfError):
    """No record is stored under the requested id."""
    def __init__(self, record_id: RecordId | str, label: str = "Book"):
        super().__init__(
            f"{label} with id: {record_id} not found", ErrorCode.NOT_FOUND,
        )
        self.record_id = record_id


# ─── Internal Errors (500-level) ────────────────────────────────

class ReplySerializationError(BookshelfError):
    """Reply payload could not be encoded as JSON."""
    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, ErrorCode.INTERNAL)
