"""Concurrent requests: no coordination, but no spurious failures either."""

import asyncio

import pytest

from userstore import storage


@pytest.mark.asyncio
async def test_concurrent_puts_same_name_last_writer_wins(root):
    store = storage.NEO.presets
    values = [{"n": i} for i in range(20)]
    await asyncio.gather(*(store.put(root, "race", v) for v in values))
    item = await store.get(root, "race")
    assert item["preset"] in values
    # temp files never leak into the collection
    assert [p.name for p in (root / "NeoSamplers").iterdir()] == ["race.json"]


@pytest.mark.asyncio
async def test_concurrent_first_writes_create_directory_once(root):
    """Racing mkdir calls on a fresh root must all succeed."""
    store = storage.NEO.themes
    await asyncio.gather(*(store.put(root, f"t{i}", {"i": i}) for i in range(10)))
    assert len(await store.list(root)) == 10
