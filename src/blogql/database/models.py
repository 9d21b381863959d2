"""
Document shapes stored in MongoDB
"""

from typing import Any, TypedDict

from bson import ObjectId

USERS = "users"
POSTS = "posts"
COMMENTS = "comments"

COLLECTIONS = (USERS, POSTS, COMMENTS)

# Post and comment bodies are not constrained by the API
PostDocument = dict[str, Any]
CommentDocument = dict[str, Any]


class UserDocument(TypedDict, total=False):
    _id: ObjectId
    name: str
    email: str
    password_hash: str
    posts: list[ObjectId]
    comments: list[ObjectId]
    likedPosts: list[ObjectId]
