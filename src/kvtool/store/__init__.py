"""kvtool Store module."""

from .lmdb_store import LmdbStore
from .models import (
    KeyNotFoundError,
    StoreError,
    StoreFailure,
    StoreOpenError,
    StoreReadError,
    StoreWriteError,
    UnsupportedDriverError,
    display_key,
)
from .options import StoreOptions
from .protocol import Store
from .resolver import Driver, resolve_store, supported_drivers
from .sqlite_store import SqliteStore

__all__ = [
    "Driver",
    "KeyNotFoundError",
    "LmdbStore",
    "SqliteStore",
    "Store",
    "StoreError",
    "StoreFailure",
    "StoreOpenError",
    "StoreOptions",
    "StoreReadError",
    "StoreWriteError",
    "UnsupportedDriverError",
    "display_key",
    "resolve_store",
    "supported_drivers",
]
