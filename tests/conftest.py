from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG directories at a temp dir and drop ambient config overrides."""
    home = tmp_path / "env"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / "xdg-config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / "xdg-data"))
    monkeypatch.delenv("NO_COLOR", raising=False)
    for key in list(os.environ):
        if key.upper().startswith("KVTOOL_"):
            monkeypatch.delenv(key)
    return home
