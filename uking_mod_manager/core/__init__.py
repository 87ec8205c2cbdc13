"""Core package initialization."""
from .mod import Mod, ModMeta, ModOption, OptionGroup, Profile, LogRecord
from .catalog import CatalogError, ModCatalogAPI, HttpCatalogAPI, OfflineCatalogAPI, StaticCatalogAPI
from .log_buffer import ActivityLog
from .controller import (
    ControllerError,
    ControllerSnapshot,
    InvalidIndex,
    ModStateController,
    NotFound,
)

__all__ = [
    "Mod",
    "ModMeta",
    "ModOption",
    "OptionGroup",
    "Profile",
    "LogRecord",
    "CatalogError",
    "ModCatalogAPI",
    "HttpCatalogAPI",
    "OfflineCatalogAPI",
    "StaticCatalogAPI",
    "ActivityLog",
    "ControllerError",
    "ControllerSnapshot",
    "InvalidIndex",
    "ModStateController",
    "NotFound",
]
