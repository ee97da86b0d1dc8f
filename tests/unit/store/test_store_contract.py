from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from result import is_err, is_ok

from kvtool.codec import EncodingError, NoneCodec
from kvtool.store import LmdbStore, SqliteStore, Store, StoreOptions, StoreReadError, StoreWriteError

OPENERS = {
    "lmdb": LmdbStore.open,
    "sqlite": SqliteStore.open,
}


@pytest.fixture(params=sorted(OPENERS))
def store(request: pytest.FixtureRequest, tmp_path: Path) -> Iterator[Store]:
    opened = OPENERS[request.param](tmp_path / "store.db", "bucket", NoneCodec(), StoreOptions())
    assert is_ok(opened)
    with opened.ok_value as store:
        yield store


def test_get_returns_none_for_absent_key(store: Store) -> None:
    result = store.get(b"missing")

    assert is_ok(result)
    assert result.ok_value is None


def test_set_then_get_returns_value(store: Store) -> None:
    assert is_ok(store.set(b"greeting", b"hello"))

    result = store.get(b"greeting")

    assert is_ok(result)
    assert result.ok_value == b"hello"


def test_empty_value_is_distinct_from_absent_key(store: Store) -> None:
    assert is_ok(store.set(b"empty", b""))

    result = store.get(b"empty")

    assert is_ok(result)
    assert result.ok_value == b""


def test_binary_value_round_trips(store: Store) -> None:
    value = bytes(range(256)) * 4
    assert is_ok(store.set(b"\xff\x00key", value))

    assert store.get(b"\xff\x00key").ok_value == value


def test_set_overwrites_existing_value(store: Store) -> None:
    store.set(b"k", b"first")
    store.set(b"k", b"second")

    assert store.get(b"k").ok_value == b"second"


def test_set_rejects_value_the_codec_cannot_encode(store: Store) -> None:
    result = store.set(b"k", "not bytes")  # type: ignore[arg-type]

    assert is_err(result)
    assert isinstance(result.err_value, EncodingError)
    assert store.get(b"k").ok_value is None


def test_operations_fail_after_close(store: Store) -> None:
    store.close()
    store.close()

    get_result = store.get(b"k")
    set_result = store.set(b"k", b"v")

    assert isinstance(get_result.err_value, StoreReadError)
    assert isinstance(set_result.err_value, StoreWriteError)
    assert get_result.err_value.message == "store is closed"


@pytest.mark.parametrize("driver", sorted(OPENERS))
def test_buckets_are_isolated(driver: str, tmp_path: Path) -> None:
    location = tmp_path / "store.db"
    open_store = OPENERS[driver]

    with open_store(location, "one", NoneCodec(), StoreOptions()).ok_value as first:
        first.set(b"shared", b"from-one")

    with open_store(location, "two", NoneCodec(), StoreOptions()).ok_value as second:
        assert second.get(b"shared").ok_value is None
        second.set(b"shared", b"from-two")

    with open_store(location, "one", NoneCodec(), StoreOptions()).ok_value as first:
        assert first.get(b"shared").ok_value == b"from-one"


@pytest.mark.parametrize("driver", sorted(OPENERS))
def test_values_persist_across_handles(driver: str, tmp_path: Path) -> None:
    location = tmp_path / "store.db"
    open_store = OPENERS[driver]

    with open_store(location, "bucket", NoneCodec(), StoreOptions()).ok_value as writer:
        writer.set(b"k", b"persisted")

    with open_store(location, "bucket", NoneCodec(), StoreOptions()).ok_value as reader:
        assert reader.get(b"k").ok_value == b"persisted"


@pytest.mark.parametrize("driver", sorted(OPENERS))
def test_open_fails_when_parent_directory_is_missing(driver: str, tmp_path: Path) -> None:
    location = tmp_path / "missing" / "store.db"

    result = OPENERS[driver](location, "bucket", NoneCodec(), StoreOptions())

    assert is_err(result)
    error = result.err_value
    assert error.driver == driver
    assert error.location == str(location)
    assert error.bucket == "bucket"
    assert error.message
    assert not location.parent.exists()
