from __future__ import annotations

import io
from pathlib import Path

import pytest

from kvtool.console import Console


@pytest.fixture
def console() -> Console:
    return Console(stdin=io.BytesIO(), stdout=io.BytesIO(), stderr=io.StringIO(), color=False)


@pytest.fixture
def location(tmp_path: Path) -> Path:
    return tmp_path / "store.db"
