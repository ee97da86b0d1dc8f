"""Backend tuning options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StoreOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Upper bound of the LMDB memory map; the file itself grows on demand.
    lmdb_map_size: int = Field(default=1 << 30, gt=0)
    lmdb_max_buckets: int = Field(default=128, gt=0)
    sqlite_timeout: float = Field(default=5.0, ge=0)
