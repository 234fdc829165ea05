"""
Test cases for snapshot persistence.
"""

import json
import logging

import pytest

from vectordb.config.settings import VectorStoreSettings
from vectordb.errors import PersistenceError
from vectordb.models.domain import Document
from vectordb.search.similarity import SimilarityMetric
from vectordb.vector_store.memory_store import InMemoryVectorStore
from vectordb.vector_store.persistence import JsonSnapshotStore


def _dump(store):
    """Every namespace as {id: document dict including embedding}."""
    return {
        name: {
            document_id: store.get_document(name, document_id).to_dict()
            for document_id in store._namespaces.get(name).ids()
        }
        for name in store.list_namespaces()
    }


def test_round_trip_reproduces_maps(persistent_settings):
    """A fresh instance on the same storage path sees identical documents and vectors."""
    store = InMemoryVectorStore(persistent_settings)
    store.add_document("default", Document(id="a", content="alpha", metadata={"n": 1}), [0.1, 0.2, 0.3])
    store.add_document("other", Document(id="b", content="beta"), [1.0 / 3.0, -2.5, 1e-9])
    store.add_document("other", Document(id="c", metadata={"nested": {"x": [1, 2]}}), [0.0, 0.0, 1.0])

    reloaded = InMemoryVectorStore(persistent_settings)

    assert reloaded.list_namespaces() == store.list_namespaces()
    assert _dump(reloaded) == _dump(store)


def test_snapshot_file_layout(persistent_settings):
    """The snapshot uses the camelCase config keys and separate document/vector maps."""
    store = InMemoryVectorStore(persistent_settings)
    store.add_document("docs", Document(id="a", content="alpha"), [1.0, 0.0, 0.0])

    payload = json.loads(persistent_settings.snapshot_path.read_text(encoding="utf-8"))

    assert payload["config"] == {
        "dimensions": 3,
        "maxVectors": 10000,
        "similarityMetric": "cosine",
        "persistToDisk": True,
        "storagePath": str(persistent_settings.storage_path),
    }
    assert payload["namespaces"] == ["default", "docs"]
    assert payload["documents"]["docs"]["a"] == {"id": "a", "content": "alpha", "metadata": None}
    assert payload["vectors"]["docs"]["a"] == [1.0, 0.0, 0.0]
    assert payload["documents"]["default"] == {}


def test_every_mutation_rewrites_snapshot(persistent_settings):
    store = InMemoryVectorStore(persistent_settings)
    store.add_document("n", Document(id="a"), [1.0, 0.0, 0.0])
    store.update_document("n", Document(id="a", content="updated"))
    assert InMemoryVectorStore(persistent_settings).get_document("n", "a").content == "updated"

    store.delete_document("n", "a")
    assert InMemoryVectorStore(persistent_settings).get_document("n", "a") is None

    store.delete_collection("n")
    assert "n" not in InMemoryVectorStore(persistent_settings).list_namespaces()


def test_eviction_order_survives_reload(tmp_path):
    """Insertion order is restored, so eviction continues with the oldest entry."""
    settings = VectorStoreSettings(dimensions=3, max_vectors=2, persist_to_disk=True, storage_path=tmp_path)
    store = InMemoryVectorStore(settings)
    store.add_document("ns", Document(id="d1"), [1.0, 0.0, 0.0])
    store.add_document("ns", Document(id="d2"), [0.0, 1.0, 0.0])

    reloaded = InMemoryVectorStore(settings)
    reloaded.add_document("ns", Document(id="d3"), [0.0, 0.0, 1.0])

    assert reloaded.get_document("ns", "d1") is None
    assert reloaded.count("ns") == 2


def test_load_replaces_configuration(tmp_path):
    """Loading adopts the persisted configuration wholesale."""
    original = VectorStoreSettings(
        dimensions=3, max_vectors=7, similarity_metric="euclidean", persist_to_disk=True, storage_path=tmp_path
    )
    InMemoryVectorStore(original).add_document("n", Document(id="a"), [1.0, 0.0, 0.0])

    reloaded = InMemoryVectorStore(VectorStoreSettings(dimensions=3, persist_to_disk=True, storage_path=tmp_path))

    assert reloaded.settings.max_vectors == 7
    assert reloaded.settings.similarity_metric is SimilarityMetric.EUCLIDEAN


def test_missing_snapshot_is_empty_store(persistent_settings):
    """No file means an empty, valid store and load() is a no-op."""
    store = InMemoryVectorStore(persistent_settings)
    store.load()

    assert store.list_namespaces() == ["default"]
    assert not persistent_settings.snapshot_path.exists()


def test_save_and_load_noop_without_persistence(tmp_path):
    settings = VectorStoreSettings(dimensions=3, storage_path=tmp_path / "unused")
    store = InMemoryVectorStore(settings)
    store.add_document("n", Document(id="a"), [1.0, 0.0, 0.0])

    store.save()
    store.load()

    assert not (tmp_path / "unused").exists()
    assert store.count("n") == 1


def test_malformed_snapshot_raises_on_explicit_load(persistent_settings):
    """Parse errors surface from load() as PersistenceError."""
    store = InMemoryVectorStore(persistent_settings)
    persistent_settings.storage_path.mkdir(parents=True, exist_ok=True)
    persistent_settings.snapshot_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PersistenceError):
        store.load()


def test_initial_load_failure_is_logged(persistent_settings, caplog):
    """A broken snapshot at construction is logged and the store starts empty."""
    persistent_settings.storage_path.mkdir(parents=True, exist_ok=True)
    persistent_settings.snapshot_path.write_text("[]", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="vectordb"):
        store = InMemoryVectorStore(persistent_settings)

    assert store.list_namespaces() == ["default"]
    assert any("Failed to load vector database" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda payload: payload["vectors"]["n"].update({"a": [1.0, 0.0]}),
        lambda payload: payload["vectors"]["n"].pop("a"),
        lambda payload: payload["documents"].pop("n"),
        lambda payload: payload["config"].update({"dimensions": "three"}),
    ],
)
def test_inconsistent_snapshot_rejected_without_partial_state(persistent_settings, mutate):
    """Invalid snapshots fail validation before anything in memory is replaced."""
    store = InMemoryVectorStore(persistent_settings)
    store.add_document("n", Document(id="a"), [1.0, 0.0, 0.0])
    payload = json.loads(persistent_settings.snapshot_path.read_text(encoding="utf-8"))
    mutate(payload)
    persistent_settings.snapshot_path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(PersistenceError):
        store.load()

    assert store.get_document("n", "a") is not None


def test_save_failure_raises_persistence_error(tmp_path):
    """Write failures surface to the caller of save()."""
    blocker = tmp_path / "blocker"
    blocker.write_text("a file where a directory should be", encoding="utf-8")
    settings = VectorStoreSettings(dimensions=3, persist_to_disk=True, storage_path=blocker / "db")
    store = InMemoryVectorStore(settings)

    with pytest.raises(PersistenceError):
        store.save()


def test_deferred_persistence_writes_once(persistent_settings, monkeypatch):
    """Mutations inside the block share a single snapshot write."""
    store = InMemoryVectorStore(persistent_settings)
    writes = []
    original_write = JsonSnapshotStore.write

    def counting_write(self, snapshot):
        writes.append(snapshot)
        original_write(self, snapshot)

    monkeypatch.setattr(JsonSnapshotStore, "write", counting_write)

    with store.deferred_persistence():
        for i in range(5):
            store.add_document("bulk", Document(id=f"d{i}"), [1.0, float(i), 0.0])
        assert not persistent_settings.snapshot_path.exists()

    assert len(writes) == 1
    assert InMemoryVectorStore(persistent_settings).count("bulk") == 5


def test_snapshot_store_read_missing_and_write(tmp_path):
    snapshots = JsonSnapshotStore(tmp_path / "nested" / "dir")
    assert snapshots.read() is None

    payload = {"config": {}, "namespaces": [], "documents": {}, "vectors": {}}
    snapshots.write(payload)

    assert snapshots.exists()
    assert snapshots.read() == payload
    assert not snapshots.path.with_name("vectordb.json.tmp").exists()


def test_snapshot_store_rejects_missing_keys(tmp_path):
    snapshots = JsonSnapshotStore(tmp_path)
    snapshots.write({"config": {}})
    with pytest.raises(PersistenceError):
        snapshots.read()


def test_deferred_save_failure_keeps_original_error(persistent_settings, monkeypatch, caplog):
    """When the batch raises, a failing final save is logged and the batch error propagates."""
    store = InMemoryVectorStore(persistent_settings)

    def failing_write(self, snapshot):
        raise PersistenceError("disk full")

    monkeypatch.setattr(JsonSnapshotStore, "write", failing_write)

    with caplog.at_level(logging.ERROR, logger="vectordb"):
        with pytest.raises(RuntimeError, match="import aborted"):
            with store.deferred_persistence():
                store.add_document("bulk", Document(id="d0"), [1.0, 0.0, 0.0])
                raise RuntimeError("import aborted")

    assert store.count("bulk") == 1
    assert any("interrupted batch" in record.getMessage() for record in caplog.records)


def test_deferred_save_failure_raises_without_batch_error(persistent_settings, monkeypatch):
    store = InMemoryVectorStore(persistent_settings)

    def failing_write(self, snapshot):
        raise PersistenceError("disk full")

    monkeypatch.setattr(JsonSnapshotStore, "write", failing_write)

    with pytest.raises(PersistenceError):
        with store.deferred_persistence():
            store.add_document("bulk", Document(id="d0"), [1.0, 0.0, 0.0])
