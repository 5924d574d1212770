from __future__ import annotations

from typing import Protocol


class DB(Protocol):
    """
    Basic CRUD over string keys and values.

    Errors are raised, never returned: see filedb.errors.
    """

    def create(self, key: str, value: str) -> None:
        """Add a new key; fails if it already exists."""
        ...

    def read(self, key: str) -> str:
        ...

    def update(self, key: str, value: str) -> None:
        """Replace the value of an existing key."""
        ...

    def delete(self, key: str) -> str:
        """Remove the key and return its last value."""
        ...

    def close(self) -> None:
        ...


class AsyncDB(Protocol):
    async def create(self, key: str, value: str) -> None: ...
    async def read(self, key: str) -> str: ...
    async def update(self, key: str, value: str) -> None: ...
    async def delete(self, key: str) -> str: ...
    async def close(self) -> None: ...
