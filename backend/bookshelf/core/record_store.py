"""Record Store: in-memory mapping from record id to record.

Invariants:
    - Every key equals the id field of the record stored under it
    - A stored id never changes; update keeps the existing id
    - add never overwrites: a colliding id is logged and regenerated
    - Callers only ever receive copies; stored records are never shared

Design Decisions:
    - Plain dict, no ordering promise: find_all order is unspecified
    - No locking here. Atomicity comes from RecordStoreHandle, which is the
      only way the running server reaches a store
"""

import logging
from typing import Generic

from bookshelf.core.domain_types import RecordId
from bookshelf.core.errors import RecordNotFoundError
from bookshelf.core.record_ids import IdGenerator, timestamp_hash_id
from bookshelf.core.repository_protocols import RecordT

logger = logging.getLogger(__name__)


class RecordStore(Generic[RecordT]):
    """CRUD operations over an in-memory dict of records."""

    def __init__(
        self,
        id_generator: IdGenerator = timestamp_hash_id,
        label: str = "Book",
    ):
        self._records: dict[RecordId, RecordT] = {}
        self._generate_id = id_generator
        self._label = label

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def add(self, record: RecordT) -> RecordT:
        """Store a copy under a fresh id and return it. Any caller id is dropped."""
        record_id = self._next_id()
        stored = record.model_copy(update={"id": record_id}, deep=True)
        self._records[record_id] = stored
        return stored.model_copy(deep=True)

    def find_all(self) -> list[RecordT]:
        return [r.model_copy(deep=True) for r in self._records.values()]

    def find_by_id(self, record_id: str) -> RecordT:
        return self._get(record_id).model_copy(deep=True)

    def update(self, record_id: str, record: RecordT) -> RecordT:
        """Overwrite every field except id."""
        existing = self._get(record_id)
        updated = record.model_copy(update={"id": existing.id}, deep=True)
        self._records[RecordId(record_id)] = updated
        return updated.model_copy(deep=True)

    def delete(self, record_id: str) -> RecordT:
        """Remove and return the last stored value."""
        removed = self._records.pop(RecordId(record_id), None)
        if removed is None:
            raise RecordNotFoundError(record_id, self._label)
        return removed

    def _get(self, record_id: str) -> RecordT:
        record = self._records.get(RecordId(record_id))
        if record is None:
            raise RecordNotFoundError(record_id, self._label)
        return record

    def _next_id(self) -> RecordId:
        salt = 0
        while True:
            candidate = self._generate_id(salt)
            if candidate not in self._records:
                return candidate
            logger.warning(
                "Identifier collision on %s, regenerating", candidate,
                extra={"record_id": candidate, "attempt": salt + 1},
            )
            salt += 1
