"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator, Sequence
from typing import Any

# Keep password hashing cheap; must be set before blogql.config is imported
os.environ.setdefault("BLOGQL_PASSWORD_HASH_TIME_COST", "1")
os.environ.setdefault("BLOGQL_PASSWORD_HASH_MEMORY_COST", "1024")
os.environ.setdefault("BLOGQL_PASSWORD_HASH_PARALLELISM", "1")

import pytest
from bson import ObjectId

from blogql.database.models import COLLECTIONS, USERS
from blogql.database.store import Document, DocumentStore, DuplicateDocumentError
from blogql.graphql.context import build_context
from blogql.graphql.schema import schema


class InMemoryDocumentStore(DocumentStore):
    """DocumentStore double holding documents in dicts.

    ``failures`` maps an operation name (e.g. "find_by_ids:posts") to an
    exception raised when that operation runs. ``calls`` records every
    operation for batching assertions.
    """

    def __init__(self, unique_fields: dict[str, str] | None = None):
        self.collections: dict[str, dict[ObjectId, Document]] = {
            name: {} for name in COLLECTIONS
        }
        self.unique_fields = unique_fields if unique_fields is not None else {USERS: "email"}
        self.failures: dict[str, Exception] = {}
        self.calls: list[tuple[str, str]] = []

    def _record(self, operation: str, collection: str) -> None:
        self.calls.append((operation, collection))
        failure = self.failures.get(f"{operation}:{collection}")
        if failure is not None:
            raise failure

    def calls_to(self, operation: str, collection: str) -> int:
        return self.calls.count((operation, collection))

    async def find_all(self, collection: str) -> list[Document]:
        self._record("find_all", collection)
        documents = self.collections[collection]
        return [dict(documents[key]) for key in sorted(documents)]

    async def find_by_id(self, collection: str, id: ObjectId) -> Document | None:
        self._record("find_by_id", collection)
        document = self.collections[collection].get(id)
        return dict(document) if document is not None else None

    async def find_by_ids(self, collection: str, ids: Sequence[ObjectId]) -> list[Document]:
        self._record("find_by_ids", collection)
        documents = self.collections[collection]
        return [dict(documents[key]) for key in set(ids) if key in documents]

    async def insert(self, collection: str, document: Document) -> ObjectId:
        self._record("insert", collection)
        unique_field = self.unique_fields.get(collection)
        if unique_field is not None:
            value = document.get(unique_field)
            for existing in self.collections[collection].values():
                if existing.get(unique_field) == value:
                    raise DuplicateDocumentError(collection, {unique_field: value})
        new_id = ObjectId()
        self.collections[collection][new_id] = {**document, "_id": new_id}
        return new_id

    async def exists_by_field(self, collection: str, field: str, value: Any) -> bool:
        self._record("exists_by_field", collection)
        return any(doc.get(field) == value for doc in self.collections[collection].values())

    def add(self, collection: str, **fields: Any) -> ObjectId:
        """Insert a document directly, bypassing call recording."""
        new_id = fields.pop("_id", None) or ObjectId()
        self.collections[collection][new_id] = {**fields, "_id": new_id}
        return new_id


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def execute(store: InMemoryDocumentStore):
    """Execute a GraphQL operation against the schema with a fresh context."""

    async def _execute(query: str, variables: dict[str, Any] | None = None):
        return await schema.execute(
            query,
            variable_values=variables,
            context_value=build_context(store),
        )

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
