"""
Collection/Document reference behavior over file and memory stores.
"""
from __future__ import annotations

import pytest

from filebase.domain import ids
from filebase.repositories import DocumentReference, JsonFileStore, MemoryStore


@pytest.fixture(params=["json", "memory"])
def store(request, tmp_path):
    if request.param == "json":
        return JsonFileStore(tmp_path / "database.json")
    return MemoryStore()


def test_add_then_get_returns_document(store):
    ref = store.collection("notes")
    doc = {"title": "hello", "tags": ["x"], "meta": {"pinned": True}}
    result = ref.add(doc)
    assert result["data"] == doc
    assert result["id"].startswith("doc")
    assert ref.doc(result["id"]).get() == doc
    assert store.collection("notes").doc(result["id"]).get() == doc


def test_add_uses_millisecond_clock(monkeypatch, store):
    monkeypatch.setattr(ids.time, "time_ns", lambda: 1_700_000_000_123_456_789)
    result = store.collection("notes").add({"n": 1})
    assert result["id"] == "doc1700000000123"


def test_doc_does_not_require_existing_id(store):
    ref = store.collection("notes").doc("missing")
    assert isinstance(ref, DocumentReference)
    assert ref.get() is None
    assert not ref.exists()


def test_set_is_idempotent(store):
    doc = {"a": 1, "b": [1, 2]}
    store.collection("notes").doc("n1").set(doc)
    once = store.read()
    store.collection("notes").doc("n1").set(doc)
    assert store.read() == once == {"notes": {"n1": doc}}


def test_set_overwrites_whole_document(store):
    ref = store.collection("notes").doc("n1")
    ref.set({"a": 1, "b": 2})
    ref.set({"c": 3})
    assert store.collection("notes").doc("n1").get() == {"c": 3}


def test_update_merges_shallowly(store):
    ref = store.collection("notes").doc("n1")
    ref.set({"a": 0, "b": 2, "nested": {"x": 1, "y": 2}})
    ref.update({"a": 1, "nested": {"x": 5}})
    assert store.collection("notes").doc("n1").get() == {"a": 1, "b": 2, "nested": {"x": 5}}


def test_update_on_missing_document_starts_empty(store):
    store.collection("notes").doc("new").update({"a": 1})
    assert store.read() == {"notes": {"new": {"a": 1}}}


def test_delete_then_get_is_not_found(store):
    ref = store.collection("notes").doc("n1")
    ref.set({"a": 1})
    ref.delete()
    assert ref.get() is None
    assert store.collection("notes").doc("n1").get() is None
    assert store.read() == {"notes": {}}


def test_get_returns_snapshot_without_rereading(store, sequential_doc_ids):
    ref = store.collection("notes")
    store.collection("notes").add({"n": 1})
    assert ref.get() == {}
    ref.refresh()
    assert ref.get() == {"doc1": {"n": 1}}


def test_collection_supports_len_iter_contains(store, sequential_doc_ids):
    ref = store.collection("notes")
    ref.add({"n": 1})
    ref.add({"n": 2})
    assert len(ref) == 2
    assert sorted(ref) == ["doc1", "doc2"]
    assert "doc1" in ref


def test_interleaved_adds_lose_the_first_write(store, sequential_doc_ids):
    # both references read the collection before either one flushes
    first = store.collection("notes")
    second = store.collection("notes")
    first.add({"n": 1})
    second.add({"n": 2})
    assert store.read()["notes"] == {"doc2": {"n": 2}}


def test_stale_reference_keeps_sibling_collections(store, sequential_doc_ids):
    notes = store.collection("notes")
    store.collection("cards").add({"uid": "c"})
    notes.add({"n": 1})
    tree = store.read()
    assert tree["cards"] == {"doc1": {"uid": "c"}}
    assert tree["notes"] == {"doc2": {"n": 1}}


@pytest.fixture(params=["json", "memory"])
def serialized_store(request, tmp_path):
    if request.param == "json":
        return JsonFileStore(tmp_path / "database.json", serialize_writes=True)
    return MemoryStore(serialize_writes=True)


def test_serialized_writes_keep_interleaved_adds(serialized_store, sequential_doc_ids):
    first = serialized_store.collection("notes")
    second = serialized_store.collection("notes")
    first.add({"n": 1})
    second.add({"n": 2})
    assert serialized_store.read()["notes"] == {"doc1": {"n": 1}, "doc2": {"n": 2}}
    # the flushing reference sees the merged collection afterwards
    assert second.get() == {"doc1": {"n": 1}, "doc2": {"n": 2}}


def test_serialized_delete_only_touches_its_document(serialized_store):
    serialized_store.write({"notes": {"a": {"n": 1}, "b": {"n": 2}}})
    stale = serialized_store.collection("notes")
    serialized_store.collection("notes").doc("c").set({"n": 3})
    stale.doc("a").delete()
    assert serialized_store.read()["notes"] == {"b": {"n": 2}, "c": {"n": 3}}


def test_memory_store_does_not_alias_snapshots():
    store = MemoryStore({"notes": {"n1": {"a": 1}}})
    ref = store.collection("notes")
    ref.get()["n1"]["a"] = 99
    assert store.read() == {"notes": {"n1": {"a": 1}}}
