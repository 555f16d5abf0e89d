import pytest

from solidauthz.resources import (
    Account,
    DeleteOperationHandler,
    GetOperationHandler,
    Operation,
    PutOperationHandler,
    Representation,
    WebID,
    WebIDStore,
)


class MemoryStorage:
    def __init__(self):
        self.data = {}

    def get(self, path):
        return self.data[path]

    def put(self, path, data):
        self.data[path] = data

    def delete(self, path):
        del self.data[path]


def test_webid_store_put_and_get():
    store = WebIDStore()
    profile = WebID(
        uri="https://example.com/card#me",
        name="Alice",
        email="alice@example.com",
        accounts=[Account(provider="https://example.com", uri="https://example.com/alice")],
    )
    store.put(profile)
    assert store.get("https://example.com/card#me") is profile


def test_webid_store_missing_is_none():
    assert WebIDStore().get("https://example.com/unknown#me") is None


def test_webid_store_put_replaces_same_uri():
    store = WebIDStore()
    store.put(WebID(uri="https://example.com/card#me", name="Old"))
    newer = WebID(uri="https://example.com/card#me", name="New")
    store.put(newer)
    assert store.get("https://example.com/card#me") is newer


def test_webid_store_delete():
    store = WebIDStore()
    store.put(WebID(uri="https://example.com/card#me"))
    store.delete("https://example.com/card#me")
    store.delete("https://example.com/card#me")
    assert store.get("https://example.com/card#me") is None


def test_put_then_get_round_trip():
    storage = MemoryStorage()
    put = PutOperationHandler(storage).handle(Operation("/doc", b"<a> <b> <c> ."))
    assert put.metadata == {"Content-Type": "text/turtle"}
    got = GetOperationHandler(storage).handle(Operation("/doc"))
    assert got.data == b"<a> <b> <c> ."
    assert got.metadata == {"Content-Type": "text/turtle"}


def test_delete_removes_resource():
    storage = MemoryStorage()
    storage.put("/doc", b"data")
    result = DeleteOperationHandler(storage).handle(Operation("/doc"))
    assert result == Representation()
    assert "/doc" not in storage.data


def test_get_missing_raises_storage_error():
    with pytest.raises(KeyError):
        GetOperationHandler(MemoryStorage()).handle(Operation("/missing"))


def test_delete_missing_raises_storage_error():
    with pytest.raises(KeyError):
        DeleteOperationHandler(MemoryStorage()).handle(Operation("/missing"))