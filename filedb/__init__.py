from __future__ import annotations

from .codec import KEY_VALUE_SEP, decode, encode, is_valid_key
from .errors import (
    Closed,
    DuplicateKey,
    FileDBError,
    FormatError,
    InvalidFormat,
    NotFound,
    OpenFailure,
    PersistFailure,
)
from .interfaces import DB, AsyncDB
from .models import Entry
from .repositories import AsyncFileDB
from .store import FileDB

__all__ = [
    "DB",
    "AsyncDB",
    "FileDB",
    "AsyncFileDB",
    "Entry",
    "KEY_VALUE_SEP",
    "decode",
    "encode",
    "is_valid_key",
    "FileDBError",
    "OpenFailure",
    "FormatError",
    "InvalidFormat",
    "DuplicateKey",
    "NotFound",
    "Closed",
    "PersistFailure",
]
