"""kvtool - get and put single values in local key-value stores.

By default, kvtool's internal logging is disabled when used as a library.
Library users can enable logging by calling kvtool.enable_logging().
"""

from kvtool.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
