from functools import partial

from bson import ObjectId
from strawberry.dataloader import DataLoader

from ..database.models import COMMENTS, POSTS
from ..database.store import Document, DocumentStore


async def load_documents(
    store: DocumentStore, collection: str, keys: list[ObjectId]
) -> list[Document | None]:
    """Batch load documents by ID; missing keys map to None."""
    documents = await store.find_by_ids(collection, keys)
    documents_map = {document["_id"]: document for document in documents}
    return [documents_map.get(key) for key in keys]


class Loaders:
    """Per-request loaders; all User.posts fields of one response share one lookup."""

    def __init__(self, store: DocumentStore):
        self.post_loader = DataLoader(load_fn=partial(load_documents, store, POSTS))
        self.comment_loader = DataLoader(load_fn=partial(load_documents, store, COMMENTS))
