from __future__ import annotations

import contextlib
import logging
import os
import threading
from pathlib import Path
from typing import IO, Iterator

from .codec import decode, encode, is_valid_key
from .errors import Closed, DuplicateKey, FormatError, InvalidFormat, NotFound, OpenFailure, PersistFailure
from .locks import ReadWriteLock

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def _check_value(value: str) -> None:
    # A newline would split the entry into two lines on disk.
    if "\n" in value:
        raise InvalidFormat("value must not contain a newline")


class FileDB:
    """
    A DB holding its data in memory and persisting it to a file on close().

    The whole file is read and decoded when the DB is opened; create/read/
    update/delete only touch the in-memory dict; close() rewrites the file from
    scratch and releases it. A closed DB cannot be reopened, open a new one.

    Locking: `_closed_lock` guards the closed flag and `_lock` guards `_data`.
    They are always taken in that order. CRUD calls hold the read side of
    `_closed_lock` for their whole duration, so close() (which takes the write
    side) waits for in-flight calls and never serializes a dict mid-mutation.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self._path = Path(path)
        self._lock = threading.Lock()
        self._closed_lock = ReadWriteLock()
        self._closed = False
        self._file = self._open(self._path)
        try:
            self._data = self._load(self._file)
        except BaseException:
            self._file.close()
            raise
        logger.debug("opened %s with %d entries", self._path, len(self._data))

    @staticmethod
    def _open(path: Path) -> IO[bytes]:
        try:
            fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
        except OSError as e:
            raise OpenFailure(f"failed to open file {path}") from e
        return open(fd, "r+b")

    @staticmethod
    def _load(f: IO[bytes]) -> dict[str, str]:
        try:
            raw = f.read()
        except OSError as e:
            raise OpenFailure(f"failed to read file {f.name}") from e
        # Bytes that are not UTF-8 become lone surrogates and are written back unchanged.
        return decode(raw.decode(ENCODING, errors=ENCODING_ERRORS))

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        with self._closed_lock.read_locked():
            return self._closed

    @contextlib.contextmanager
    def _open_guard(self) -> Iterator[None]:
        with self._closed_lock.read_locked():
            if self._closed:
                raise Closed("DB is closed")
            with self._lock:
                yield

    def create(self, key: str, value: str) -> None:
        """
        Add a new entry.

        Raises InvalidFormat for a key outside [A-Za-z0-9_-] or a value holding
        a newline (whatever the DB state), Closed after close(), DuplicateKey if
        the key already exists.
        """
        if not is_valid_key(key):
            raise InvalidFormat(f"key {key!r} must match [A-Za-z0-9_-]*")
        _check_value(value)
        with self._open_guard():
            if key in self._data:
                raise DuplicateKey(f"key {key!r} already exists")
            self._data[key] = value

    def read(self, key: str) -> str:
        with self._open_guard():
            try:
                return self._data[key]
            except KeyError:
                raise NotFound(f"key {key!r} is not present in the DB") from None

    def update(self, key: str, value: str) -> None:
        # Keys are only validated on create; an absent key is all we can hit here.
        _check_value(value)
        with self._open_guard():
            if key not in self._data:
                raise NotFound(f"key {key!r} is not present in the DB")
            self._data[key] = value

    def delete(self, key: str) -> str:
        """Remove the entry and return the value it held."""
        with self._open_guard():
            try:
                return self._data.pop(key)
            except KeyError:
                raise NotFound(f"key {key!r} is not present in the DB") from None

    def close(self) -> None:
        """
        Dump all entries into the file and release it.

        A second call raises Closed. PersistFailure is raised if the entries
        cannot be serialized (the file is left as it was) or if writing fails
        (what ends up on disk is undefined). The file handle is released either way.
        """
        with self._closed_lock.write_locked():
            if self._closed:
                raise Closed("DB is closed")
            self._closed = True

        with self._lock:
            count = len(self._data)
            try:
                try:
                    payload = self._serialize(self._data)
                    self._file.truncate(0)
                    self._file.seek(0)
                    self._file.write(payload)
                    self._file.flush()
                finally:
                    self._file.close()
            except OSError as e:
                raise PersistFailure(f"failed to write to file {self._path}") from e
        logger.debug("persisted %d entries to %s", count, self._path)

    def _serialize(self, data: dict[str, str]) -> bytes:
        # Runs before the file is truncated.
        try:
            return encode(data).encode(ENCODING, errors=ENCODING_ERRORS)
        except (FormatError, UnicodeEncodeError) as e:
            raise PersistFailure(f"cannot serialize entries for {self._path}") from e

    def __enter__(self) -> "FileDB":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.close()
        except Closed:
            pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"
