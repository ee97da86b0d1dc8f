from __future__ import annotations

import io
import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger
from pydantic import ValidationError

from kvtool.common import (
    AppInfo,
    AppPaths,
    LoggingConfig,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    get_default_log_file_path,
    setup_cli_logging,
)


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    yield
    logger.remove()
    disable_library_logging()


def test_default_log_file_lives_in_data_directory(isolated_environment: Path) -> None:
    path = get_default_log_file_path(AppPaths())

    assert path == isolated_environment / "xdg-data" / "kvtool" / "logs" / "kvtool.log"


def test_setup_cli_logging_writes_text_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "cli.log"
    config = LoggingConfig(log_file=str(log_file), log_level="DEBUG")

    setup_cli_logging(AppInfo(), config, AppPaths())
    create_logger("test").debug("store opened", bucket="things")
    logger.complete()

    content = log_file.read_text()
    assert "store opened" in content
    assert "'bucket': 'things'" in content


def test_setup_cli_logging_json_format(tmp_path: Path) -> None:
    log_file = tmp_path / "cli.jsonl"
    config = LoggingConfig(log_file=str(log_file), log_level="INFO", format="json")

    setup_cli_logging(AppInfo(), config, AppPaths())
    create_logger("test").info("hello")
    logger.complete()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    messages = [record["record"]["message"] for record in records]
    assert "hello" in messages
    assert records[-1]["record"]["extra"]["scope"] == "test"


def test_setup_cli_logging_respects_level(tmp_path: Path) -> None:
    log_file = tmp_path / "cli.log"
    config = LoggingConfig(log_file=str(log_file), log_level="WARNING")

    setup_cli_logging(AppInfo(), config, AppPaths())
    create_logger("test").info("quiet")
    create_logger("test").warning("loud")
    logger.complete()

    content = log_file.read_text()
    assert "quiet" not in content
    assert "loud" in content


@pytest.mark.parametrize("log_file", ["-", "/dev/stdout", " /dev/stderr ", "/proc/self/fd/1"])
def test_log_file_cannot_target_standard_streams(log_file: str) -> None:
    with pytest.raises(ValidationError, match="log_file must be a regular file"):
        LoggingConfig(log_file=log_file)


def test_blank_log_file_falls_back_to_default(isolated_environment: Path) -> None:
    config = LoggingConfig(log_file="  ")

    assert config.log_file is None
    assert config.resolve_log_file(AppPaths()) == get_default_log_file_path(AppPaths())


def test_log_file_expands_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    config = LoggingConfig(log_file="~/kvtool.log")

    assert config.resolve_log_file(AppPaths()) == tmp_path / "kvtool.log"


def test_setup_cli_logging_keeps_handlers_when_directory_is_unwritable(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    sink = io.StringIO()
    enable_library_logging(level="DEBUG", sink=sink)

    with pytest.raises(OSError):
        setup_cli_logging(AppInfo(), LoggingConfig(log_file=str(blocker / "cli.log")), AppPaths())
    create_logger("test").info("still routed")
    logger.complete()

    assert "still routed" in sink.getvalue()


def test_enable_library_logging_writes_to_sink() -> None:
    sink = io.StringIO()

    enable_library_logging(level="INFO", sink=sink)
    create_logger("test").debug("hidden")
    create_logger("test").info("visible")
    logger.complete()

    assert "hidden" not in sink.getvalue()
    assert "visible" in sink.getvalue()


def test_setup_cli_logging_escapes_undecodable_text(tmp_path: Path) -> None:
    log_file = tmp_path / "cli.log"

    setup_cli_logging(AppInfo(), LoggingConfig(log_file=str(log_file), log_level="DEBUG"), AppPaths())
    create_logger("test").debug("opened bucket b\udcff")
    logger.complete()

    assert "opened bucket b\\udcff" in log_file.read_text(encoding="utf-8")
