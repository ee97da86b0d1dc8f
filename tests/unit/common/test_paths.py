from __future__ import annotations

from pathlib import Path

import pytest

from kvtool.common import AppPaths, get_data_directory, get_global_config_path, get_global_config_root


def test_global_config_root_uses_xdg_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))

    assert get_global_config_root(AppPaths()) == tmp_path / "cfg" / "kvtool"
    assert get_global_config_path(AppPaths()) == tmp_path / "cfg" / "kvtool" / "config.yaml"


def test_global_config_root_defaults_to_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_global_config_root(AppPaths()) == tmp_path / ".config" / "kvtool"


def test_data_directory_uses_xdg_data_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    assert get_data_directory(AppPaths(data_dir_name="custom")) == tmp_path / "data" / "custom"


def test_data_directory_defaults_to_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_DATA_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_data_directory(AppPaths()) == tmp_path / ".local" / "share" / "kvtool"
