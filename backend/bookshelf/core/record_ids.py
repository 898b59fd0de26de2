"""Record Identifiers: id minting strategies for the record store.

Invariants:
    - Every generator accepts a salt and returns a non-empty str
    - Same timestamp + different salt -> different id (collision retry relies on it)

Design Decisions:
    - Timestamp hash is the default: ids stay decimal strings of an unsigned
      64-bit hash, the shape existing clients already see
    - Uniqueness is probabilistic; the store checks for collisions and retries
      with the next salt instead of trusting the clock
    - uuid4 strategy available for deployments that don't need that id shape
"""

import hashlib
import time
from collections.abc import Callable
from uuid import uuid4

from bookshelf.core.domain_types import IdStrategy, RecordId

IdGenerator = Callable[[int], RecordId]


def timestamp_hash_id(salt: int = 0) -> RecordId:
    """Hash the current nanosecond timestamp into a decimal string."""
    digest = hashlib.blake2b(digest_size=8)
    digest.update(time.time_ns().to_bytes(16, "little", signed=True))
    if salt:
        digest.update(salt.to_bytes(8, "little"))
    return RecordId(str(int.from_bytes(digest.digest(), "little")))


def uuid_id(salt: int = 0) -> RecordId:
    return RecordId(uuid4().hex)


_GENERATORS: dict[IdStrategy, IdGenerator] = {
    IdStrategy.TIMESTAMP: timestamp_hash_id,
    IdStrategy.UUID: uuid_id,
}


def get_id_generator(strategy: IdStrategy | str) -> IdGenerator:
    """Resolve a configured strategy name. Raises ValueError if unknown."""
    return _GENERATORS[IdStrategy(strategy)]
