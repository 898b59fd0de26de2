"""Record Identifiers: timestamp hash shape, salt behavior, strategy lookup."""

import re

import pytest

from bookshelf.core import record_ids
from bookshelf.core.domain_types import IdStrategy
from bookshelf.core.record_ids import get_id_generator, timestamp_hash_id, uuid_id


def test_timestamp_id_is_unsigned_64_bit_decimal():
    rid = timestamp_hash_id()
    assert rid.isdigit()
    assert 0 <= int(rid) < 2 ** 64


def test_same_timestamp_same_salt_is_deterministic(monkeypatch):
    monkeypatch.setattr(record_ids.time, "time_ns", lambda: 1_700_000_000_000_000_000)
    assert timestamp_hash_id() == timestamp_hash_id()
    assert timestamp_hash_id(3) == timestamp_hash_id(3)


def test_salt_changes_id_for_frozen_clock(monkeypatch):
    monkeypatch.setattr(record_ids.time, "time_ns", lambda: 42)
    ids = {timestamp_hash_id(salt) for salt in range(20)}
    assert len(ids) == 20


def test_uuid_id_is_hex():
    assert re.fullmatch(r"[0-9a-f]{32}", uuid_id())
    assert uuid_id() != uuid_id()


def test_get_id_generator_resolves_strategies():
    assert get_id_generator("timestamp") is timestamp_hash_id
    assert get_id_generator(IdStrategy.UUID) is uuid_id


def test_get_id_generator_rejects_unknown():
    with pytest.raises(ValueError):
        get_id_generator("sequential")
