"""Utilities package initialization."""
from .config import Config
from .logger import setup_logger, to_activity_record
from .helpers import (
    format_version,
    strip_markup,
    check_host_status,
)

__all__ = [
    "Config",
    "setup_logger",
    "to_activity_record",
    "format_version",
    "strip_markup",
    "check_host_status",
]
