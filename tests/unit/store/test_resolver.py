from __future__ import annotations

from pathlib import Path

import pytest
from result import is_err, is_ok

from kvtool.codec import UnsupportedCodecError
from kvtool.store import (
    Driver,
    LmdbStore,
    SqliteStore,
    StoreOpenError,
    StoreOptions,
    UnsupportedDriverError,
    resolve_store,
    supported_drivers,
)


@pytest.mark.parametrize(
    ("driver", "store_cls"),
    [
        (Driver.LMDB, LmdbStore),
        (Driver.SQLITE, SqliteStore),
    ],
)
def test_resolve_store_opens_selected_backend(driver: Driver, store_cls: type, tmp_path: Path) -> None:
    location = tmp_path / "store.db"

    result = resolve_store(driver.value, location, "things")

    assert is_ok(result)
    with result.ok_value as store:
        assert isinstance(store, store_cls)
        assert store.driver == driver.value
        assert store.bucket == "things"
        assert store.location == str(location)


def test_resolve_store_rejects_unknown_driver_without_touching_location(tmp_path: Path) -> None:
    location = tmp_path / "store.db"

    result = resolve_store("nosuch", location, "bucket")

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, UnsupportedDriverError)
    assert error.driver == "nosuch"
    assert "nosuch" in error.message
    assert not location.exists()
    assert list(tmp_path.iterdir()) == []


def test_resolve_store_rejects_unknown_codec_without_touching_location(tmp_path: Path) -> None:
    location = tmp_path / "store.db"

    result = resolve_store("lmdb", location, "bucket", codec="gob")

    assert is_err(result)
    assert isinstance(result.err_value, UnsupportedCodecError)
    assert result.err_value.codec == "gob"
    assert not location.exists()


@pytest.mark.parametrize(("location", "bucket", "field"), [("", "bucket", "location"), ("store.db", "", "bucket")])
def test_resolve_store_rejects_empty_names(location: str, bucket: str, field: str) -> None:
    result = resolve_store("sqlite", location, bucket)

    assert is_err(result)
    assert isinstance(result.err_value, StoreOpenError)
    assert result.err_value.message == f"{field} must not be empty"


def test_resolve_store_wraps_backend_open_failure(tmp_path: Path) -> None:
    location = tmp_path / "missing-dir" / "store.db"

    result = resolve_store("lmdb", location, "bucket", options=StoreOptions(lmdb_map_size=1 << 20))

    assert is_err(result)
    assert isinstance(result.err_value, StoreOpenError)
    assert result.err_value.location == str(location)


def test_driver_names_are_case_sensitive(tmp_path: Path) -> None:
    result = resolve_store("LMDB", tmp_path / "store.db", "bucket")

    assert isinstance(result.err_value, UnsupportedDriverError)


def test_supported_drivers() -> None:
    assert supported_drivers() == ["lmdb", "sqlite"]
