import json
import logging
from datetime import date

import pytest

from stockroom.core.errors import MalformedSnapshot, StorageIOError
from stockroom.core.types import ElectronicItem, GroceryItem, InventoryItem
from stockroom.io.persistence import LoadStatus, SnapshotAdapter
from stockroom.state.store import EntityStore
from stockroom.app.main import sample_groceries, sample_inventory


def _electronics():
    return EntityStore(
        [
            ElectronicItem(1, "Laptop", 5, "Dell", 24),
            ElectronicItem(2, "Chair", 15, "Ikea", 0),
        ]
    )


def _write(path, doc):
    path.write_text(json.dumps(doc), encoding="utf-8")


def test_round_trip_into_fresh_store(tmp_path):
    path = tmp_path / "inv.snap"
    store = _electronics()
    adapter = SnapshotAdapter(ElectronicItem)
    assert adapter.save(store, path) == 2

    fresh = EntityStore()
    assert adapter.load(fresh, path) is LoadStatus.LOADED
    assert set(fresh.get_all()) == set(store.get_all())
    assert [i.id for i in fresh.get_all()] == [1, 2]


@pytest.mark.parametrize(
    "kind, items",
    [(InventoryItem, sample_inventory()), (GroceryItem, sample_groceries())],
)
def test_round_trip_with_dates(tmp_path, kind, items):
    path = tmp_path / "snap.json"
    adapter = SnapshotAdapter(kind)
    adapter.save(EntityStore(items), path)
    fresh = EntityStore()
    adapter.load(fresh, path)
    assert fresh.get_all() == items


def test_save_overwrites_and_creates_dirs(tmp_path):
    path = tmp_path / "nested" / "dir" / "inv.json"
    adapter = SnapshotAdapter(ElectronicItem)
    adapter.save(_electronics(), path)
    adapter.save(EntityStore(), path)
    assert json.loads(path.read_text(encoding="utf-8")) == []
    assert not (path.parent / "inv.json.tmp").exists()


def test_save_failure_reports_io_error_and_keeps_store(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = _electronics()
    with pytest.raises(StorageIOError) as exc:
        SnapshotAdapter(ElectronicItem).save(store, blocker / "inv.json")
    assert exc.value.operation == "save"
    assert len(store) == 2


def test_failed_save_keeps_previous_file(tmp_path, monkeypatch):
    path = tmp_path / "inv.json"
    adapter = SnapshotAdapter(ElectronicItem)
    adapter.save(_electronics(), path)
    before = path.read_text(encoding="utf-8")

    def _boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("stockroom.io.persistence.os.replace", _boom)
    with pytest.raises(StorageIOError):
        adapter.save(EntityStore(), path)
    assert path.read_text(encoding="utf-8") == before
    assert not (tmp_path / "inv.json.tmp").exists()


def test_missing_file_empties_store(tmp_path, caplog):
    store = _electronics()
    with caplog.at_level(logging.INFO, logger="stockroom.io.persistence"):
        status = SnapshotAdapter(ElectronicItem).load(store, tmp_path / "missing.snap")
    assert status is LoadStatus.NO_DATA
    assert store.get_all() == []
    assert "No data file found" in caplog.text


def test_missing_file_is_idempotent(tmp_path):
    adapter = SnapshotAdapter(ElectronicItem)
    store = EntityStore()
    for _ in range(2):
        assert adapter.load(store, tmp_path / "missing.snap") is LoadStatus.NO_DATA
        assert len(store) == 0


def test_directory_path_is_load_io_error(tmp_path):
    store = _electronics()
    with pytest.raises(StorageIOError) as exc:
        SnapshotAdapter(ElectronicItem).load(store, tmp_path)
    assert exc.value.operation == "load"
    assert len(store) == 2


GOOD = {"id": 1, "name": "Laptop", "quantity": 5, "brand": "Dell", "warranty_months": 24}


@pytest.mark.parametrize(
    "doc",
    [
        {"items": [GOOD]},
        [GOOD, "oops"],
        [GOOD, dict(GOOD, colour="red")],
        [GOOD, dict(GOOD, name="Other")],
        [dict(GOOD, quantity=-1)],
        [dict(GOOD, id=0)],
        [{"id": 1, "name": "Milk", "quantity": 2, "expiry_date": "2025-01-01"}],
    ],
)
def test_malformed_documents_leave_store_unchanged(tmp_path, doc):
    path = tmp_path / "bad.json"
    _write(path, doc)
    store = _electronics()
    before = store.get_all()
    with pytest.raises(MalformedSnapshot):
        SnapshotAdapter(ElectronicItem).load(store, path)
    assert store.get_all() == before


def test_invalid_json_and_bytes_are_malformed(tmp_path):
    adapter = SnapshotAdapter(ElectronicItem)
    store = EntityStore()
    bad_json = tmp_path / "a.json"
    bad_json.write_text("[{", encoding="utf-8")
    bad_bytes = tmp_path / "b.json"
    bad_bytes.write_bytes(b"\xff\xfe\x00")
    for path in (bad_json, bad_bytes):
        with pytest.raises(MalformedSnapshot) as exc:
            adapter.load(store, path)
        assert exc.value.path == path


def test_load_replaces_previous_contents(tmp_path):
    path = tmp_path / "g.json"
    adapter = SnapshotAdapter(GroceryItem)
    adapter.save(EntityStore([GroceryItem(7, "Eggs", 12, date(2025, 1, 2))]), path)
    store = EntityStore(sample_groceries())
    adapter.load(store, path)
    assert store.get_all() == [GroceryItem(7, "Eggs", 12, date(2025, 1, 2))]


def test_overlong_name_is_load_io_error(tmp_path):
    store = _electronics()
    with pytest.raises(StorageIOError) as exc:
        SnapshotAdapter(ElectronicItem).load(store, tmp_path / ("x" * 300))
    assert exc.value.operation == "load"
    assert len(store) == 2


def test_deeply_nested_json_is_malformed(tmp_path):
    path = tmp_path / "deep.json"
    path.write_text("[" * 200000, encoding="utf-8")
    store = _electronics()
    with pytest.raises(MalformedSnapshot):
        SnapshotAdapter(ElectronicItem).load(store, path)
    assert len(store) == 2
