"""
Post GraphQL type definitions
"""

from typing import Any

import strawberry

from ...ids import format_object_id, format_optional_object_id


@strawberry.type
class Post:
    """Post type for GraphQL API."""

    id: strawberry.ID
    title: str | None = None
    content: str | None = None
    author: strawberry.ID | None = None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Post":
        return cls(
            id=strawberry.ID(format_object_id(document["_id"])),
            title=document.get("title"),
            content=document.get("content"),
            author=format_optional_object_id(document.get("author")),
        )
