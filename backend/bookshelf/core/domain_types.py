"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId wraps str; store keys are always RecordId
    - Error codes are a wire-compatibility surface: values never change
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - IntEnum for codes: json.dumps renders them as plain integers
"""

from enum import Enum, IntEnum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", str)
ConnectionId = NewType("ConnectionId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ErrorCode(IntEnum):
    """Numeric error codes carried in every error reply."""
    BAD_REQUEST = 400
    NOT_FOUND = 404
    INTERNAL = 500


class IdStrategy(str, Enum):
    """How the record store mints new identifiers."""
    TIMESTAMP = "timestamp"
    UUID = "uuid"


class LogFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
