import asyncio

import pytest
from bson import ObjectId

from blogql.database.models import POSTS
from blogql.graphql.context import build_context
from blogql.graphql.loaders import Loaders, load_documents


@pytest.mark.asyncio
async def test_load_documents_preserves_key_order(store):
    first = store.add(POSTS, title="first")
    second = store.add(POSTS, title="second")
    missing = ObjectId()

    result = await load_documents(store, POSTS, [second, missing, first])

    assert [doc["title"] if doc else None for doc in result] == ["second", None, "first"]


@pytest.mark.asyncio
async def test_concurrent_loads_share_one_query(store):
    ids = [store.add(POSTS, title=str(i)) for i in range(4)]
    loaders = Loaders(store)

    results = await asyncio.gather(
        loaders.post_loader.load_many(ids[:2]),
        loaders.post_loader.load_many(ids[2:]),
        loaders.post_loader.load(ids[0]),
    )

    assert [doc["title"] for doc in results[0] + results[1]] == ["0", "1", "2", "3"]
    assert results[2]["title"] == "0"
    assert store.calls_to("find_by_ids", POSTS) == 1


def test_context_gets_fresh_loaders(store):
    first = build_context(store)
    second = build_context(store)

    assert first["store"] is second["store"] is store
    assert first["loaders"] is not second["loaders"]
