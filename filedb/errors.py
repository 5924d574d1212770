from __future__ import annotations


class FileDBError(Exception):
    """Base class for every error raised by the store and its codec."""


class OpenFailure(FileDBError):
    """The backing file could not be opened or read."""


class FormatError(FileDBError):
    """The backing file content does not follow the line format."""

    def __init__(self, message: str, *, line_no: int | None = None):
        super().__init__(message)
        self.line_no = line_no


class InvalidFormat(FileDBError):
    """A key contains characters outside [A-Za-z0-9_-]."""


class DuplicateKey(FileDBError):
    """create() was called with a key that is already present."""


class NotFound(FileDBError, KeyError):
    """The key is not present in the DB."""

    def __str__(self) -> str:
        # KeyError.__str__ repr()s the argument.
        return Exception.__str__(self)


class Closed(FileDBError):
    """The DB was used after close()."""


class PersistFailure(FileDBError):
    """Writing the entries back to the file failed during close()."""
