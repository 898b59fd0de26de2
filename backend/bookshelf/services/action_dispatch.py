"""Action Dispatch: explicit routing from a decoded Action to one store call.

Invariants:
    - Every action->handler mapping is visible in one dict; no getattr magic
    - Each action holds the store lock for exactly one store call, then releases
      it before the reply is sent
    - RecordNotFoundError becomes a 404 reply frame; it never escapes execute()
    - A reply that fails to encode is replaced by FALLBACK_REPLY and logged
    - A reply that fails to send is logged at warning and dropped

Design Decisions:
    - Handlers are plain sync functions taking the locked store: nothing inside
      the critical section awaits, so hold time stays bounded
    - Payload built while the lock is held, from copies the store hands out
"""

import logging
from collections.abc import Callable
from typing import Any, Protocol

from fastapi import WebSocketDisconnect

from bookshelf.core.errors import (
    BadRequestError, RecordNotFoundError, ReplySerializationError,
)
from bookshelf.core.format_replies import (
    FALLBACK_REPLY, ReplyPayload, encode_reply, record_to_reply,
    records_to_reply,
)
from bookshelf.core.repository_protocols import RecordRepository
from bookshelf.schemas.actions import (
    Action, AddRecord, DeleteRecord, GetRecord, ListRecords, UpdateRecord,
)
from bookshelf.services.store_handle import RecordStoreHandle

logger = logging.getLogger(__name__)

Handler = Callable[[RecordRepository, Any], ReplyPayload]


class ReplySink(Protocol):
    """Anything that accepts outbound text frames (starlette WebSocket, fakes)."""
    async def send_text(self, data: str) -> None: ...


def _add_record(store: RecordRepository, action: AddRecord) -> ReplyPayload:
    return record_to_reply(store.add(action.book))


def _update_record(store: RecordRepository, action: UpdateRecord) -> ReplyPayload:
    return record_to_reply(store.update(action.id, action.book))


def _get_record(store: RecordRepository, action: GetRecord) -> ReplyPayload:
    return record_to_reply(store.find_by_id(action.id))


def _delete_record(store: RecordRepository, action: DeleteRecord) -> ReplyPayload:
    return record_to_reply(store.delete(action.id))


def _list_records(store: RecordRepository, action: ListRecords) -> ReplyPayload:
    return records_to_reply(store.find_all())


class ActionDispatch:
    """Routes action -> store call. Explicit registration, no auto-discovery."""

    def __init__(
        self, store: RecordStoreHandle, connection_id: str | None = None,
    ):
        self._store = store
        self._connection_id = connection_id

        # every mapping explicit: adding an action requires editing this dict
        self._handlers: dict[type, Handler] = {
            AddRecord: _add_record,
            UpdateRecord: _update_record,
            GetRecord: _get_record,
            DeleteRecord: _delete_record,
            ListRecords: _list_records,
        }

    async def execute(self, action: Action) -> ReplyPayload:
        """Run the action against the store. Returns the reply payload."""
        handler = self._handlers.get(type(action))
        if not handler:
            logger.warning(
                f"No handler for {type(action).__name__}",
                extra={"connection_id": self._connection_id},
            )
            return BadRequestError().to_reply()
        try:
            async with self._store.exclusive() as store:
                return handler(store, action)
        except RecordNotFoundError as e:
            logger.info(
                e.message,
                extra={
                    "connection_id": self._connection_id,
                    "action": action.action,
                    "record_id": e.record_id,
                    "error_code": int(e.code),
                },
            )
            return e.to_reply()

    async def handle(self, action: Action, sink: ReplySink) -> None:
        """Execute the action and send its reply on the originating sink."""
        payload = await self.execute(action)
        logger.debug(
            f"Handled {action.action}",
            extra={"connection_id": self._connection_id, "action": action.action},
        )
        await send_reply(sink, payload, connection_id=self._connection_id)


async def send_reply(
    sink: ReplySink, payload: ReplyPayload, connection_id: str | None = None,
) -> None:
    """Encode and send one reply frame. Never raises on encode or send failure."""
    try:
        frame = encode_reply(payload)
    except ReplySerializationError as e:
        logger.error(
            "Reply serialization failed, sending fallback",
            exc_info=True,
            extra={"connection_id": connection_id, "error_code": int(e.code)},
        )
        frame = FALLBACK_REPLY
    try:
        await sink.send_text(frame)
    except (WebSocketDisconnect, RuntimeError, OSError) as e:
        logger.warning(
            f"Failed to send reply: {e!r}",
            extra={"connection_id": connection_id},
        )
