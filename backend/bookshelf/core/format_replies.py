"""Reply Formatting: pure functions turning store results into text frames.

Invariants:
    - All functions are pure (no IO, no async)
    - Frames are compact JSON (no spaces), the same bytes clients already parse
    - encode_reply raises ReplySerializationError, never TypeError/ValueError

Design Decisions:
    - FALLBACK_REPLY is a hand-built literal so it cannot itself fail to encode
"""

import json
from collections.abc import Iterable

from bookshelf.core.errors import ReplySerializationError
from bookshelf.schemas.records import StoredRecord

ReplyPayload = dict | list

FALLBACK_REPLY = '{"code":500,"message":"Internal server error"}'


def record_to_reply(record: StoredRecord) -> dict:
    return record.model_dump(mode="json")


def records_to_reply(records: Iterable[StoredRecord]) -> list[dict]:
    return [record_to_reply(r) for r in records]


def encode_reply(payload: ReplyPayload) -> str:
    """Encode a reply payload as a compact JSON text frame."""
    try:
        return json.dumps(
            payload, ensure_ascii=False, allow_nan=False, separators=(",", ":"),
        )
    except (TypeError, ValueError) as e:
        raise ReplySerializationError() from e
