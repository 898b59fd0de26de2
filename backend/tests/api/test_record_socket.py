"""Record Socket: end-to-end WebSocket behavior through the FastAPI app.

Invariants:
    - Every frame sent gets exactly one reply frame
    - Rejected frames (bad JSON, unknown action, binary) never touch the store
    - The connection stays open after an error reply
    - All connections of one app share one store
"""

from fastapi.testclient import TestClient

from bookshelf.config import Settings
from bookshelf.main import create_app

WS_PATH = "/api/v1/"


def _list(ws) -> list[dict]:
    ws.send_json({"action": "get_books"})
    return ws.receive_json()


def test_add_get_update_delete_scenario(client):
    with client.websocket_connect(WS_PATH) as ws:
        ws.send_json({
            "action": "add_book",
            "book": {"title": "T1", "author": "A", "year": 2024},
        })
        created = ws.receive_json()
        record_id = created["id"]
        assert created == {"id": record_id, "title": "T1", "author": "A", "year": 2024}

        ws.send_json({"action": "get_book", "id": record_id})
        assert ws.receive_json() == created

        ws.send_json({
            "action": "update_book",
            "id": record_id,
            "book": {"title": "T2", "author": "A", "year": 2024},
        })
        updated = ws.receive_json()
        assert updated["id"] == record_id
        assert updated["title"] == "T2"

        ws.send_json({"action": "delete_book", "id": record_id})
        assert ws.receive_json() == updated

        ws.send_json({"action": "get_book", "id": record_id})
        assert ws.receive_json() == {
            "code": 404, "message": f"Book with id: {record_id} not found",
        }


def test_unknown_action_rejected_and_store_unchanged(client):
    with client.websocket_connect(WS_PATH) as ws:
        ws.send_text('{"action":"nonsense"}')
        assert ws.receive_json() == {"code": 400, "message": "Incorrect action"}
        assert _list(ws) == []


def test_invalid_json_rejected(client):
    with client.websocket_connect(WS_PATH) as ws:
        ws.send_text("{not json")
        assert ws.receive_json() == {"code": 400, "message": "Incorrect action"}


def test_binary_frame_rejected_and_store_unchanged(client):
    with client.websocket_connect(WS_PATH) as ws:
        ws.send_bytes(b'{"action":"add_book","book":{"title":"T","author":"A","year":1}}')
        assert ws.receive_json() == {"code": 400, "message": "Bad message type"}
        assert _list(ws) == []


def test_connection_survives_error_replies(client):
    with client.websocket_connect(WS_PATH) as ws:
        ws.send_text("garbage")
        ws.receive_json()
        ws.send_json({"action": "get_book", "id": "missing"})
        assert ws.receive_json()["code"] == 404
        ws.send_json({"action": "add_book", "book": {"title": "T", "author": "A", "year": 1}})
        assert "id" in ws.receive_json()


def test_reply_frames_are_text(client):
    with client.websocket_connect(WS_PATH) as ws:
        ws.send_json({"action": "get_books"})
        assert ws.receive_text() == "[]"


def test_connections_share_one_store(client):
    with client.websocket_connect(WS_PATH) as writer:
        writer.send_json({"action": "add_book", "book": {"title": "T", "author": "A", "year": 1}})
        record_id = writer.receive_json()["id"]

    with client.websocket_connect(WS_PATH) as reader:
        reader.send_json({"action": "get_book", "id": record_id})
        assert reader.receive_json()["id"] == record_id


def test_each_app_gets_its_own_store(settings):
    with TestClient(create_app(settings)) as first:
        with first.websocket_connect(WS_PATH) as ws:
            ws.send_json({"action": "add_book", "book": {"title": "T", "author": "A", "year": 1}})
            ws.receive_json()
    with TestClient(create_app(settings)) as second:
        with second.websocket_connect(WS_PATH) as ws:
            assert _list(ws) == []


def test_seeded_app_starts_with_sample_book():
    settings = Settings(_env_file=None, seed_sample_record=True, log_format="text")
    with TestClient(create_app(settings)) as client:
        with client.websocket_connect(WS_PATH) as ws:
            books = _list(ws)
    assert len(books) == 1
    assert books[0]["title"] == "Test Book 1"
    assert books[0]["author"] == "I am"
    assert books[0]["year"] == 2024
    assert books[0]["id"]


def test_custom_socket_path_and_uuid_ids():
    settings = Settings(
        _env_file=None, seed_sample_record=False, log_format="text",
        ws_path="books/ws", id_strategy="uuid",
    )
    with TestClient(create_app(settings)) as client:
        with client.websocket_connect("/books/ws") as ws:
            ws.send_json({"action": "add_book", "book": {"title": "T", "author": "A", "year": 1}})
            record = ws.receive_json()
    assert len(record["id"]) == 32


def test_coercible_fields_rejected_and_not_stored(client):
    with client.websocket_connect(WS_PATH) as ws:
        ws.send_text('{"action":"add_book","book":{"title":"T","author":"A","year":true}}')
        assert ws.receive_json() == {"code": 400, "message": "Incorrect action"}
        assert _list(ws) == []


def test_close_is_silent_and_server_keeps_serving(client):
    with client.websocket_connect(WS_PATH) as ws:
        ws.send_json({"action": "add_book", "book": {"title": "T", "author": "A", "year": 1}})
        created = ws.receive_json()
        ws.close()

    assert client.get("/api/v1/health/ready").json()["checks"]["records"] == 1

    with client.websocket_connect(WS_PATH) as ws:
        assert _list(ws) == [created]
        ws.send_json({"action": "get_book", "id": created["id"]})
        assert ws.receive_json() == created
