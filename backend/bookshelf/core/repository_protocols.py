"""Boundary Protocols: contracts between the record store and its callers.

Invariants:
    - Dispatch code depends on RecordRepository, never on a concrete store
    - find_by_id/update/delete raise RecordNotFoundError on a miss; never KeyError

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: each call is O(1) and runs inside the shared lock,
      so there is nothing to await
"""

from typing import Protocol, TypeVar

from bookshelf.schemas.records import StoredRecord

RecordT = TypeVar("RecordT", bound=StoredRecord)


class RecordRepository(Protocol[RecordT]):
    """Contract for record storage, implemented by RecordStore."""
    def add(self, record: RecordT) -> RecordT: ...
    def find_all(self) -> list[RecordT]: ...
    def find_by_id(self, record_id: str) -> RecordT: ...
    def update(self, record_id: str, record: RecordT) -> RecordT: ...
    def delete(self, record_id: str) -> RecordT: ...
    def __len__(self) -> int: ...
