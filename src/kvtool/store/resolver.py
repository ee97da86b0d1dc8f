"""Turns a driver name, location and bucket into an open Store."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from result import Err, Result, is_err

from kvtool.codec import get_codec
from kvtool.common import create_logger
from kvtool.constants import DEFAULT_CODEC

from .lmdb_store import LmdbStore
from .models import StoreFailure, StoreOpenError, UnsupportedDriverError
from .options import StoreOptions
from .protocol import Store
from .sqlite_store import SqliteStore

logger = create_logger("store.resolver")


class Driver(StrEnum):
    LMDB = "lmdb"
    SQLITE = "sqlite"


def supported_drivers() -> list[str]:
    return [driver.value for driver in Driver]


def resolve_store(
    driver: str,
    location: str | Path,
    bucket: str,
    codec: str = DEFAULT_CODEC,
    options: StoreOptions | None = None,
) -> Result[Store, StoreFailure]:
    """Open the store selected by ``driver``.

    Driver and codec names are validated before the backend is touched, so an
    unknown selector never creates a file at ``location``.
    """
    if driver not in supported_drivers():
        return Err(
            UnsupportedDriverError(
                driver=driver,
                message=f"unknown driver {driver!r} (expected one of: {', '.join(supported_drivers())})",
            )
        )

    codec_result = get_codec(codec)
    if is_err(codec_result):
        return codec_result

    path = str(location)
    for field, value in (("location", path), ("bucket", bucket)):
        if not value:
            return Err(
                StoreOpenError(driver=driver, location=path, bucket=bucket, message=f"{field} must not be empty")
            )

    options = options or StoreOptions()
    store_codec = codec_result.ok_value

    result: Result[Store, StoreFailure]
    match Driver(driver):
        case Driver.LMDB:
            result = LmdbStore.open(path, bucket, store_codec, options)
        case Driver.SQLITE:
            result = SqliteStore.open(path, bucket, store_codec, options)

    return result.inspect(
        lambda _: logger.debug("Store resolved", driver=driver, location=path, bucket=bucket, codec=codec)
    ).inspect_err(lambda error: logger.debug("Store resolution failed", driver=driver, error=error.message))
