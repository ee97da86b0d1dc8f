"""LMDB-backed Store implementation."""

from __future__ import annotations

import os
from pathlib import Path
from types import TracebackType
from typing import Self

import lmdb
from result import Err, Ok, Result, is_err

from kvtool.codec import Codec
from kvtool.common import create_logger

from .models import StoreFailure, StoreOpenError, StoreReadError, StoreWriteError, display_key
from .options import StoreOptions

logger = create_logger("store.lmdb")


class LmdbStore:
    """Single-file LMDB environment with one named database per bucket."""

    driver = "lmdb"

    def __init__(
        self,
        env: lmdb.Environment,
        db: lmdb._Database,
        *,
        location: str,
        bucket: str,
        codec: Codec,
    ) -> None:
        self.location = location
        self.bucket = bucket
        self._env: lmdb.Environment | None = env
        self._db = db
        self._codec = codec

    @classmethod
    def open(
        cls,
        location: str | Path,
        bucket: str,
        codec: Codec,
        options: StoreOptions,
    ) -> Result[LmdbStore, StoreOpenError]:
        path = str(location)

        try:
            env = lmdb.open(
                path,
                subdir=False,
                map_size=options.lmdb_map_size,
                max_dbs=options.lmdb_max_buckets,
            )
        except (lmdb.Error, UnicodeEncodeError) as e:
            return Err(cls._open_error(path, bucket, e))

        try:
            db = env.open_db(os.fsencode(bucket), create=True)
        except lmdb.Error as e:
            env.close()
            return Err(cls._open_error(path, bucket, e))

        logger.debug("Opened LMDB environment", location=path, bucket=bucket)
        return Ok(cls(env, db, location=path, bucket=bucket, codec=codec))

    def get(self, key: bytes) -> Result[bytes | None, StoreFailure]:
        if self._env is None:
            return Err(StoreReadError(bucket=self.bucket, message="store is closed"))

        try:
            with self._env.begin(db=self._db) as txn:
                raw = txn.get(key)
        except lmdb.Error as e:
            logger.debug("LMDB read failed", key=display_key(key), error=str(e))
            return Err(StoreReadError(bucket=self.bucket, message=str(e)))

        if raw is None:
            return Ok(None)
        return self._codec.decode(raw)

    def set(self, key: bytes, value: bytes) -> Result[None, StoreFailure]:
        if self._env is None:
            return Err(StoreWriteError(bucket=self.bucket, message="store is closed"))

        encoded = self._codec.encode(value)
        if is_err(encoded):
            return encoded

        try:
            with self._env.begin(db=self._db, write=True) as txn:
                txn.put(key, encoded.ok_value)
        except lmdb.Error as e:
            logger.debug("LMDB write failed", key=display_key(key), error=str(e))
            return Err(StoreWriteError(bucket=self.bucket, message=str(e)))

        return Ok(None)

    def close(self) -> None:
        if self._env is not None:
            self._env.close()
            self._env = None
            logger.debug("Closed LMDB environment", location=self.location)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @classmethod
    def _open_error(cls, location: str, bucket: str, error: Exception) -> StoreOpenError:
        return StoreOpenError(driver=cls.driver, location=location, bucket=bucket, message=str(error))
