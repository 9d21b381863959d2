"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated, Any

import strawberry
from bson import ObjectId

from ...ids import format_object_id

if TYPE_CHECKING:
    from .comment import Comment
    from .post import Post


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    liked_posts: list[strawberry.ID]

    # Stored references, resolved on demand by the relational fields below
    post_ids: strawberry.Private[list[ObjectId]]
    comment_ids: strawberry.Private[list[ObjectId]]

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "User":
        return cls(
            id=strawberry.ID(format_object_id(document["_id"])),
            name=document.get("name", ""),
            email=document.get("email", ""),
            liked_posts=[
                strawberry.ID(format_object_id(ref)) for ref in document.get("likedPosts") or []
            ],
            post_ids=list(document.get("posts") or []),
            comment_ids=list(document.get("comments") or []),
        )

    @strawberry.field
    async def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]] | None:
        """Posts referenced by this user. Dangling references are skipped."""
        from ..resolvers.user import resolve_user_posts

        return await resolve_user_posts(self, info)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]] | None:
        """Comments referenced by this user. Dangling references are skipped."""
        from ..resolvers.user import resolve_user_comments

        return await resolve_user_comments(self, info)
