from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import strawberry
from pydantic import BaseModel, Field, ValidationError

from ...database.models import USERS, UserDocument
from ...database.store import DuplicateDocumentError
from ...errors import AlreadyExistsError, InvalidArgumentError
from ...ids import parse_object_ids
from ...logging import get_logger
from ...passwords import hash_password
from ..context import get_loaders, get_store
from .common import fetch_document_by_id

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)

# Client-facing argument names for request fields that differ
_ARGUMENT_NAMES = {"liked_posts": "likedPosts"}


class CreateUserRequest(BaseModel):
    """Arguments of createUser, checked before any store access."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    posts: list[str] = Field(default_factory=list)
    comments: list[str] = Field(default_factory=list)
    liked_posts: list[str] = Field(default_factory=list)


def _invalid_request(error: ValidationError) -> InvalidArgumentError:
    first = error.errors()[0]
    field = str(first["loc"][0]) if first["loc"] else "input"
    argument = _ARGUMENT_NAMES.get(field, field)
    value = "[REDACTED]" if field == "password" else first.get("input")
    return InvalidArgumentError(argument, value, reason=f"Invalid '{argument}': {first['msg']}")


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[User]:
    """Resolve every user, ordered by ID."""
    from ..types.user import User as UserType

    documents = await get_store(info).find_all(USERS)
    return [UserType.from_document(document) for document in documents]


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User:
    """Resolve a user by its ID."""
    from ..types.user import User as UserType

    document = await fetch_document_by_id(info, USERS, "User", id)
    return UserType.from_document(document)


# Mutation resolvers
async def create_user(
    info: strawberry.Info,
    *,
    name: str,
    email: str,
    password: str,
    posts: list[str] | None = None,
    comments: list[str] | None = None,
    liked_posts: list[str] | None = None,
    id: str | None = None,
) -> User:
    """
    Create a new user with a unique email.

    The identifier is always assigned by the store; a caller-supplied ``id``
    is ignored.

    Raises:
        InvalidArgumentError: Missing field or malformed reference ID
        AlreadyExistsError: Another user already has this email
    """
    from ..types.user import User as UserType

    try:
        request = CreateUserRequest(
            name=name,
            email=email,
            password=password,
            posts=posts or [],
            comments=comments or [],
            liked_posts=liked_posts or [],
        )
    except ValidationError as e:
        raise _invalid_request(e) from e

    if id is not None:
        logger.warning("Ignoring caller-supplied id on createUser", supplied_id=id)

    post_ids = parse_object_ids(request.posts, "posts")
    comment_ids = parse_object_ids(request.comments, "comments")
    liked_post_ids = parse_object_ids(request.liked_posts, "likedPosts")

    store = get_store(info)
    if await store.exists_by_field(USERS, "email", request.email):
        logger.info("Rejected duplicate email on createUser")
        raise AlreadyExistsError("User", "email", request.email)

    loop = asyncio.get_running_loop()
    password_hash = await loop.run_in_executor(None, hash_password, request.password)

    document: UserDocument = {
        "name": request.name,
        "email": request.email,
        "password_hash": password_hash,
        "posts": post_ids,
        "comments": comment_ids,
        "likedPosts": liked_post_ids,
    }

    try:
        user_id = await store.insert(USERS, dict(document))
    except DuplicateDocumentError as e:
        # Lost a race against a concurrent insert with the same email
        raise AlreadyExistsError("User", "email", request.email) from e

    logger.info("User created", user_id=str(user_id))
    return UserType.from_document({**document, "_id": user_id})


# Field resolvers
async def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    """Resolve the posts a user references, once each, omitting dangling references."""
    from ..types.post import Post as PostType

    if not user.post_ids:
        return []
    keys = list(dict.fromkeys(user.post_ids))
    documents = await get_loaders(info).post_loader.load_many(keys)
    return [PostType.from_document(document) for document in documents if document is not None]


async def resolve_user_comments(user: User, info: strawberry.Info) -> list[Comment]:
    """Resolve the comments a user references, once each, omitting dangling references."""
    from ..types.comment import Comment as CommentType

    if not user.comment_ids:
        return []
    keys = list(dict.fromkeys(user.comment_ids))
    documents = await get_loaders(info).comment_loader.load_many(keys)
    return [
        CommentType.from_document(document) for document in documents if document is not None
    ]
