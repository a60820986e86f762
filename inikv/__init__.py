"""inikv: section/key=value resource file store."""

from .api import delete_value, dump_values, get_value, load_resource, set_value
from .errors import (
    FileOpenError,
    FileReadError,
    FileWriteError,
    IniKVError,
    KeyNotFoundError,
    NotFoundError,
    NotLoadedError,
    SectionNotFoundError,
    Status,
)
from .section import Section
from .store import IniStore, store

__all__ = [
    "FileOpenError",
    "FileReadError",
    "FileWriteError",
    "IniKVError",
    "IniStore",
    "KeyNotFoundError",
    "NotFoundError",
    "NotLoadedError",
    "Section",
    "SectionNotFoundError",
    "Status",
    "delete_value",
    "dump_values",
    "get_value",
    "load_resource",
    "set_value",
    "store",
]
