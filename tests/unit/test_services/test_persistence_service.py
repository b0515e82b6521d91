"""Tests for PersistenceService."""

import json
from pathlib import Path

from clipstack.models.snapshot import Snapshot
from clipstack.services.history_store import HistoryStore
from clipstack.services.persistence_service import PersistenceService


def make_store() -> HistoryStore:
    return HistoryStore(
        capacity=5,
        entries=[Snapshot(display_text="hello", is_file=False, content={"text/plain": b"hello"})],
    )


def test_persist_creates_parent_directories(tmp_path: Path):
    path = tmp_path / "nested" / "dir" / "history.json"
    service = PersistenceService(path)

    assert service.persist(make_store()) is True

    data = json.loads(path.read_text())
    assert data[0]["displayText"] == "hello"
    assert not path.with_name("history.json.tmp").exists()


def test_persist_then_load(history_path: Path):
    service = PersistenceService(history_path)
    store = make_store()

    service.persist(store)

    assert service.load() == list(store.entries)


def test_persist_overwrites_previous_file(history_path: Path):
    service = PersistenceService(history_path)
    store = make_store()
    service.persist(store)

    store.clear()
    service.persist(store)

    assert json.loads(history_path.read_text()) == []


def test_persist_failure_is_swallowed(tmp_path: Path):
    target = tmp_path / "history.json"
    target.mkdir()
    service = PersistenceService(target)

    assert service.persist(make_store()) is False
    assert not (tmp_path / "history.json.tmp").exists()


def test_load_missing_file(tmp_path: Path):
    assert PersistenceService(tmp_path / "missing.json").load() == []


def test_load_corrupt_file(history_path: Path):
    history_path.parent.mkdir(parents=True)
    history_path.write_text("[{\"displayText\": ")

    assert PersistenceService(history_path).load() == []


def test_load_non_utf8_file(history_path: Path):
    history_path.parent.mkdir(parents=True)
    history_path.write_bytes(b"\xff\xfe\x00garbage")

    assert PersistenceService(history_path).load() == []


def test_load_keeps_readable_records(history_path: Path):
    history_path.parent.mkdir(parents=True)
    history_path.write_text(json.dumps([
        {"displayText": "kept", "isFile": False, "content": {}},
        {"displayText": ["broken"]},
    ]))

    snapshots = PersistenceService(history_path).load()

    assert [s.display_text for s in snapshots] == ["kept"]


def test_unserializable_history_keeps_existing_file(history_path: Path, monkeypatch):
    service = PersistenceService(history_path)
    service.persist(make_store())
    before = history_path.read_text()
    store = make_store()
    monkeypatch.setattr(store, "serialize", lambda: "")

    assert service.persist(store) is False
    assert history_path.read_text() == before
