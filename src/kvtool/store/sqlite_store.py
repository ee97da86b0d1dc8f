"""SQLite-backed Store implementation."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path
from types import TracebackType
from typing import Self

from result import Err, Ok, Result, is_err

from kvtool.codec import Codec
from kvtool.common import create_logger

from .models import StoreFailure, StoreOpenError, StoreReadError, StoreWriteError, display_key
from .options import StoreOptions

logger = create_logger("store.sqlite")


class SqliteStore:
    """SQLite database file with one table per bucket."""

    driver = "sqlite"

    def __init__(
        self,
        conn: sqlite3.Connection,
        *,
        location: str,
        bucket: str,
        codec: Codec,
    ) -> None:
        self.location = location
        self.bucket = bucket
        self._conn: sqlite3.Connection | None = conn
        self._table = _table_name(bucket)
        self._codec = codec

    @classmethod
    def open(
        cls,
        location: str | Path,
        bucket: str,
        codec: Codec,
        options: StoreOptions,
    ) -> Result[SqliteStore, StoreOpenError]:
        path = str(location)

        try:
            table = _table_name(bucket)
        except UnicodeEncodeError:
            return Err(
                StoreOpenError(driver=cls.driver, location=path, bucket=bucket, message="bucket name is not valid UTF-8")
            )

        try:
            conn = sqlite3.connect(os.fsencode(path), timeout=options.sqlite_timeout)
        except sqlite3.Error as e:
            return Err(StoreOpenError(driver=cls.driver, location=path, bucket=bucket, message=str(e)))

        try:
            conn.execute("PRAGMA journal_mode=WAL")
            with conn:
                conn.execute(
                    f"CREATE TABLE IF NOT EXISTS {table} "
                    "(key BLOB PRIMARY KEY NOT NULL, value BLOB NOT NULL)"
                )
        except sqlite3.Error as e:
            conn.close()
            return Err(StoreOpenError(driver=cls.driver, location=path, bucket=bucket, message=str(e)))

        logger.debug("Opened SQLite database", location=path, bucket=bucket)
        return Ok(cls(conn, location=path, bucket=bucket, codec=codec))

    def get(self, key: bytes) -> Result[bytes | None, StoreFailure]:
        if self._conn is None:
            return Err(StoreReadError(bucket=self.bucket, message="store is closed"))

        try:
            row = self._conn.execute(f"SELECT value FROM {self._table} WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            logger.debug("SQLite read failed", key=display_key(key), error=str(e))
            return Err(StoreReadError(bucket=self.bucket, message=str(e)))

        if row is None:
            return Ok(None)
        return self._codec.decode(row[0])

    def set(self, key: bytes, value: bytes) -> Result[None, StoreFailure]:
        if self._conn is None:
            return Err(StoreWriteError(bucket=self.bucket, message="store is closed"))

        encoded = self._codec.encode(value)
        if is_err(encoded):
            return encoded

        try:
            with self._conn:
                self._conn.execute(
                    f"INSERT INTO {self._table} (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, encoded.ok_value),
                )
        except sqlite3.Error as e:
            logger.debug("SQLite write failed", key=display_key(key), error=str(e))
            return Err(StoreWriteError(bucket=self.bucket, message=str(e)))

        return Ok(None)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug("Closed SQLite database", location=self.location)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _table_name(bucket: str) -> str:
    """Quote ``bucket`` as an SQL identifier.

    Raises ``UnicodeEncodeError`` for names holding surrogate escapes, which
    SQLite cannot store.
    """
    bucket.encode("utf-8")
    return '"' + bucket.replace('"', '""') + '"'
