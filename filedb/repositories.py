from __future__ import annotations

import asyncio
import os

from .errors import Closed
from .interfaces import AsyncDB
from .store import FileDB


class AsyncFileDB(AsyncDB):
    """
    Async wrapper around the file-backed DB.
    Uses asyncio.to_thread so lock waits and the final file write never block the event loop.
    """

    def __init__(self, db: FileDB) -> None:
        self._db = db

    @classmethod
    async def open(cls, path: str | os.PathLike[str]) -> "AsyncFileDB":
        return cls(await asyncio.to_thread(FileDB, path))

    @property
    def db(self) -> FileDB:
        return self._db

    async def create(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._db.create, key, value)

    async def read(self, key: str) -> str:
        return await asyncio.to_thread(self._db.read, key)

    async def update(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._db.update, key, value)

    async def delete(self, key: str) -> str:
        return await asyncio.to_thread(self._db.delete, key)

    async def close(self) -> None:
        await asyncio.to_thread(self._db.close)

    async def __aenter__(self) -> "AsyncFileDB":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            await self.close()
        except Closed:
            pass
