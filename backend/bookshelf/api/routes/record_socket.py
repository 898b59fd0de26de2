"""Record Socket: the WebSocket endpoint that carries the action protocol.

Invariants:
    - One receive loop per connection; each frame gets exactly one reply frame
    - Malformed text frames are answered with 400 "Incorrect action" and never
      reach ActionDispatch
    - Binary frames are answered with 400 "Bad message type"; the store is untouched
    - A close/disconnect ends the loop silently
    - The store handle comes from app.state via dependency injection

Design Decisions:
    - Path registered in main.py from settings (add_api_websocket_route), so the
      endpoint is a plain function rather than a prefixed router
    - Fragment aggregation and max frame size are the ASGI server's job
      (uvicorn ws_max_size)
"""

import logging
from uuid import uuid4

from fastapi import Depends, WebSocket

from bookshelf.core.domain_types import ConnectionId
from bookshelf.core.errors import BadRequestError
from bookshelf.schemas.actions import decode_action
from bookshelf.services.action_dispatch import ActionDispatch, send_reply
from bookshelf.services.store_handle import RecordStoreHandle

logger = logging.getLogger(__name__)

BAD_MESSAGE_TYPE = "Bad message type"


def get_record_store(websocket: WebSocket) -> RecordStoreHandle:
    """Dependency: the shared store handle built in the app lifespan."""
    return websocket.app.state.record_store


async def record_socket(
    websocket: WebSocket,
    store: RecordStoreHandle = Depends(get_record_store),
):
    """Accept the upgrade, then answer frames until the peer goes away."""
    connection_id = ConnectionId(uuid4().hex[:12])
    log_extra = {"connection_id": connection_id}
    try:
        await websocket.accept()
    except (RuntimeError, OSError) as e:
        logger.warning(f"WebSocket accept failed: {e!r}", extra=log_extra)
        return

    logger.info("Connection opened", extra=log_extra)
    dispatch = ActionDispatch(store, connection_id=connection_id)

    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            break
        await _handle_frame(message, websocket, dispatch, connection_id)

    logger.info("Connection closed", extra=log_extra)


async def _handle_frame(
    message: dict, websocket: WebSocket, dispatch: ActionDispatch,
    connection_id: str,
) -> None:
    """Classify one inbound frame and route it."""
    text = message.get("text")
    if text is None:
        await send_reply(
            websocket, BadRequestError(BAD_MESSAGE_TYPE).to_reply(),
            connection_id=connection_id,
        )
        return

    try:
        action = decode_action(text)
    except BadRequestError as e:
        logger.info(
            f"Rejected frame: {e.__cause__}",
            extra={"connection_id": connection_id, "error_code": int(e.code)},
        )
        await send_reply(websocket, e.to_reply(), connection_id=connection_id)
        return

    await dispatch.handle(action, websocket)
