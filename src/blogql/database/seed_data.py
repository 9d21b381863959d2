"""
Sample data for local development.

The API can only create users, so posts and comments have to be seeded
directly through the document store.
"""

from __future__ import annotations

import asyncio
import random
import secrets
from dataclasses import dataclass, field

from bson import ObjectId

from ..logging import get_logger
from ..passwords import hash_password
from .models import COMMENTS, POSTS, USERS
from .store import DocumentStore

logger = get_logger(__name__)

SAMPLE_TITLES = [
    "Getting started with MongoDB",
    "Why GraphQL?",
    "Notes on async Python",
    "Designing document schemas",
    "A week of weekend projects",
]

SAMPLE_COMMENTS = [
    "Great write-up, thanks!",
    "Could you expand on the second part?",
    "This saved me an afternoon.",
    "I disagree with the conclusion.",
    "Bookmarked.",
]


@dataclass
class SeedResult:
    user_ids: list[ObjectId] = field(default_factory=list)
    post_ids: list[ObjectId] = field(default_factory=list)
    comment_ids: list[ObjectId] = field(default_factory=list)


async def seed_sample_data(
    store: DocumentStore,
    *,
    users: int = 3,
    posts: int = 5,
    comments: int = 8,
    seed: int | None = None,
    password: str = "password",
) -> SeedResult:
    """
    Insert posts, comments and users that reference each other.

    Each user is given a random subset of the posts and comments as their own
    and another subset as liked posts. Emails carry a random suffix so the
    function can be run repeatedly against the same database.

    Args:
        store: Document store to write to
        users: Number of users to create
        posts: Number of posts to create
        comments: Number of comments to create
        seed: Random seed for reproducible reference assignment
        password: Plain password given to every sample user (stored hashed)

    Returns:
        The identifiers of everything created
    """
    rng = random.Random(seed)
    result = SeedResult()
    batch = secrets.token_hex(3)

    for i in range(posts):
        post_id = await store.insert(
            POSTS,
            {
                "title": SAMPLE_TITLES[i % len(SAMPLE_TITLES)],
                "content": f"Sample post #{i + 1}",
            },
        )
        result.post_ids.append(post_id)

    for i in range(comments):
        document = {"text": SAMPLE_COMMENTS[i % len(SAMPLE_COMMENTS)]}
        if result.post_ids:
            document["post"] = rng.choice(result.post_ids)
        result.comment_ids.append(await store.insert(COMMENTS, document))

    password_hash = await asyncio.get_running_loop().run_in_executor(None, hash_password, password)
    for i in range(users):
        owned_posts = rng.sample(result.post_ids, k=rng.randint(0, len(result.post_ids)))
        owned_comments = rng.sample(
            result.comment_ids, k=rng.randint(0, len(result.comment_ids))
        )
        liked = rng.sample(result.post_ids, k=rng.randint(0, len(result.post_ids)))
        user_id = await store.insert(
            USERS,
            {
                "name": f"Sample User {i + 1}",
                "email": f"user{i + 1}-{batch}@example.com",
                "password_hash": password_hash,
                "posts": owned_posts,
                "comments": owned_comments,
                "likedPosts": liked,
            },
        )
        result.user_ids.append(user_id)

    logger.info(
        "Sample data seeded",
        users=len(result.user_ids),
        posts=len(result.post_ids),
        comments=len(result.comment_ids),
    )
    return result
