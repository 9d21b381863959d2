from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database.models import POSTS
from ..context import get_store
from .common import fetch_document_by_id

if TYPE_CHECKING:
    from ..types.post import Post


async def resolve_posts(info: strawberry.Info) -> list[Post]:
    """Resolve every post."""
    from ..types.post import Post as PostType

    documents = await get_store(info).find_all(POSTS)
    return [PostType.from_document(document) for document in documents]


async def resolve_post_by_id(info: strawberry.Info, id: str) -> Post:
    """Resolve a post by its ID."""
    from ..types.post import Post as PostType

    document = await fetch_document_by_id(info, POSTS, "Post", id)
    return PostType.from_document(document)
