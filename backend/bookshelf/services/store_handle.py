"""Record Store Handle: the one shared, lockable way to reach the store.

Invariants:
    - A single asyncio.Lock guards the store for the whole process
    - Exactly one caller holds the store at a time, for exactly one store call
    - The handle is created in the app lifespan and injected per connection;
      nothing imports a module-level instance

Design Decisions:
    - asyncio.Lock over threading.Lock: all connection tasks share one event
      loop, and asyncio.Lock wakes waiters in FIFO order
    - Coarse lock kept deliberately: every critical section is an O(1) dict op
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Generic

from bookshelf.core.record_store import RecordStore
from bookshelf.core.repository_protocols import RecordT


class RecordStoreHandle(Generic[RecordT]):
    """Shared handle: wraps a RecordStore behind an asyncio.Lock."""

    def __init__(self, store: RecordStore[RecordT]):
        self._store = store
        self._lock = asyncio.Lock()

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    @asynccontextmanager
    async def exclusive(self) -> AsyncIterator[RecordStore[RecordT]]:
        """Hold the store exclusively for the duration of the block."""
        async with self._lock:
            yield self._store
