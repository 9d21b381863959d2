"""
Comment GraphQL type definitions
"""

from typing import Any

import strawberry

from ...ids import format_object_id, format_optional_object_id


@strawberry.type
class Comment:
    """Comment type for GraphQL API."""

    id: strawberry.ID
    text: str | None = None
    author: strawberry.ID | None = None
    post: strawberry.ID | None = None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Comment":
        return cls(
            id=strawberry.ID(format_object_id(document["_id"])),
            text=document.get("text"),
            author=format_optional_object_id(document.get("author")),
            post=format_optional_object_id(document.get("post")),
        )
