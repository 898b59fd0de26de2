"""Record Schemas: the stored value types.

Invariants:
    - Every record carries an optional id: None before insertion, set after
    - The store treats every field other than id as opaque data
    - Strict validation: no coercion ("2024", 2024.0, true are not a year)

Design Decisions:
    - StoredRecord base so the store is generic over any pydantic record shape
    - Book is the sample domain record; swapping it does not touch the store
"""

from pydantic import BaseModel, ConfigDict, Field


class StoredRecord(BaseModel):
    """Base for anything the record store can hold."""
    model_config = ConfigDict(strict=True)

    id: str | None = None


class Book(StoredRecord):
    title: str
    author: str
    year: int = Field(ge=0, le=2 ** 32 - 1)
