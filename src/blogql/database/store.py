"""Document store interface and its MongoDB implementation."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from ..logging import get_logger
from .models import COLLECTIONS, USERS

logger = get_logger(__name__)

Document = dict[str, Any]


class DocumentStoreError(Exception):
    """Base exception for document store operations."""

    pass


class DuplicateDocumentError(DocumentStoreError):
    """An insert violated a unique index."""

    def __init__(self, collection: str, key: dict[str, Any] | None = None):
        super().__init__(f"Duplicate document in '{collection}': {key or {}}")
        self.collection = collection
        self.key = key or {}


class UnknownCollectionError(DocumentStoreError):
    """The requested collection is not one of users, posts, comments."""

    pass


class DocumentStore(ABC):
    """Capability interface the resolvers use to reach the database.

    Implementations must be safe to share across concurrent requests.
    """

    @abstractmethod
    async def find_all(self, collection: str) -> list[Document]:
        """Return every document in the collection, ordered by identifier."""
        pass

    @abstractmethod
    async def find_by_id(self, collection: str, id: ObjectId) -> Document | None:
        """Return the document with the given identifier, or None."""
        pass

    @abstractmethod
    async def find_by_ids(self, collection: str, ids: Sequence[ObjectId]) -> list[Document]:
        """Return the documents whose identifiers are in ``ids``.

        One round trip regardless of how many ids are given. Identifiers with
        no matching document are omitted; the result order is unspecified.
        """
        pass

    @abstractmethod
    async def insert(self, collection: str, document: Document) -> ObjectId:
        """Persist a new document and return its store-assigned identifier.

        Raises:
            DuplicateDocumentError: If a unique index rejects the document
        """
        pass

    @abstractmethod
    async def exists_by_field(self, collection: str, field: str, value: Any) -> bool:
        """Return True if any document has ``field`` equal to ``value``."""
        pass

    async def ping(self) -> None:
        """Check the backing database is reachable. Raises on failure."""
        return None


class MongoDocumentStore(DocumentStore):
    """DocumentStore backed by an async pymongo database handle."""

    def __init__(self, database: AsyncDatabase):
        self.database = database

    def _collection(self, name: str):
        if name not in COLLECTIONS:
            raise UnknownCollectionError(f"Unknown collection: {name}")
        return self.database[name]

    async def find_all(self, collection: str) -> list[Document]:
        cursor = self._collection(collection).find().sort("_id", ASCENDING)
        return await cursor.to_list()

    async def find_by_id(self, collection: str, id: ObjectId) -> Document | None:
        return await self._collection(collection).find_one({"_id": id})

    async def find_by_ids(self, collection: str, ids: Sequence[ObjectId]) -> list[Document]:
        if not ids:
            return []
        cursor = self._collection(collection).find({"_id": {"$in": list(ids)}})
        return await cursor.to_list()

    async def insert(self, collection: str, document: Document) -> ObjectId:
        # insert_one sets _id on the dict it is given
        to_insert = dict(document)
        try:
            result = await self._collection(collection).insert_one(to_insert)
        except DuplicateKeyError as e:
            raise DuplicateDocumentError(collection, (e.details or {}).get("keyValue")) from e
        logger.debug("Document inserted", collection=collection, id=str(result.inserted_id))
        return result.inserted_id

    async def exists_by_field(self, collection: str, field: str, value: Any) -> bool:
        count = await self._collection(collection).count_documents({field: value}, limit=1)
        return count > 0

    async def ping(self) -> None:
        """Round-trip to the server; raises the driver error if unreachable."""
        await self.database.command("ping")

    async def ensure_indexes(self) -> None:
        """Create the indexes the API relies on. Idempotent."""
        await self.database[USERS].create_index("email", unique=True, name="email_unique")
        logger.info("Database indexes ensured", collection=USERS, index="email_unique")
