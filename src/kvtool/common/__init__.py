"""Common models and helpers used across kvtool modules."""

from .logging import (
    LoggingConfig,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    get_default_log_file_path,
    setup_cli_logging,
)
from .models import AppInfo, AppPaths
from .paths import get_data_directory, get_global_config_path, get_global_config_root

__all__ = [
    "AppInfo",
    "AppPaths",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_directory",
    "get_default_log_file_path",
    "get_global_config_path",
    "get_global_config_root",
    "setup_cli_logging",
]
