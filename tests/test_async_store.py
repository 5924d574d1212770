from __future__ import annotations

import asyncio

import pytest

from filedb import AsyncFileDB, Closed, DuplicateKey, FileDB, NotFound


def test_async_file_db_basic_flow(db_path):
    async def _run():
        db = await AsyncFileDB.open(db_path)

        await db.create("a", "1")
        with pytest.raises(DuplicateKey):
            await db.create("a", "2")
        assert await db.read("a") == "1"

        await db.update("a", "2")
        assert await db.read("a") == "2"
        assert await db.delete("a") == "2"
        with pytest.raises(NotFound):
            await db.read("a")

        await db.create("kept", "yes")
        await db.close()
        with pytest.raises(Closed):
            await db.close()

    asyncio.run(_run())

    with FileDB(db_path) as db:
        assert db.read("kept") == "yes"


def test_async_file_db_concurrent_creates(db_path):
    async def _run():
        async with await AsyncFileDB.open(db_path) as db:
            await asyncio.gather(*(db.create(f"k{i}", str(i)) for i in range(100)))
            values = await asyncio.gather(*(db.read(f"k{i}") for i in range(100)))
            assert values == [str(i) for i in range(100)]
        assert db.db.closed

    asyncio.run(_run())


def test_async_context_exit_after_explicit_close(db_path):
    async def _run():
        async with await AsyncFileDB.open(db_path) as db:
            await db.create("k", "v")
            await db.close()
        assert db.db.closed

    asyncio.run(_run())

    with FileDB(db_path) as db:
        assert db.read("k") == "v"
