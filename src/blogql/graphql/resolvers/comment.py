from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database.models import COMMENTS
from ..context import get_store
from .common import fetch_document_by_id

if TYPE_CHECKING:
    from ..types.comment import Comment


async def resolve_comments(info: strawberry.Info) -> list[Comment]:
    """Resolve every comment."""
    from ..types.comment import Comment as CommentType

    documents = await get_store(info).find_all(COMMENTS)
    return [CommentType.from_document(document) for document in documents]


async def resolve_comment_by_id(info: strawberry.Info, id: str) -> Comment:
    """Resolve a comment by its ID."""
    from ..types.comment import Comment as CommentType

    document = await fetch_document_by_id(info, COMMENTS, "Comment", id)
    return CommentType.from_document(document)
