"""Action Protocol: the closed set of inbound WebSocket commands.

Invariants:
    - decode_action is the only entry point from raw frame to Action
    - Any parse/shape failure raises BadRequestError; never a partial Action
    - The discriminator strings live only in the `action` literals below
    - Unknown extra keys are ignored
    - Strict mode: wrongly typed fields are rejected, never coerced

Design Decisions:
    - Pydantic discriminated union on "action": one validator, O(1) variant
      lookup, and an unknown tag fails the same way as a missing field
    - Dispatch routes on the model class, so renaming a wire tag is a
      one-line change here
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from bookshelf.core.errors import BadRequestError
from bookshelf.schemas.records import Book


class AddRecord(BaseModel):
    action: Literal["add_book"] = "add_book"
    book: Book


class UpdateRecord(BaseModel):
    action: Literal["update_book"] = "update_book"
    id: str
    book: Book


class GetRecord(BaseModel):
    action: Literal["get_book"] = "get_book"
    id: str


class DeleteRecord(BaseModel):
    action: Literal["delete_book"] = "delete_book"
    id: str


class ListRecords(BaseModel):
    action: Literal["get_books"] = "get_books"


Action = Annotated[
    AddRecord | UpdateRecord | GetRecord | DeleteRecord | ListRecords,
    Field(discriminator="action"),
]

_action_adapter: TypeAdapter[Action] = TypeAdapter(Action)


def decode_action(raw: str | bytes) -> Action:
    """Parse one inbound text frame into an Action."""
    try:
        return _action_adapter.validate_json(raw, strict=True)
    except ValidationError as e:
        raise BadRequestError() from e
