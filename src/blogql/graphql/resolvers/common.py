from typing import Any

import strawberry

from ...errors import NotFoundError
from ...ids import parse_object_id
from ...logging import get_logger
from ..context import get_store

logger = get_logger(__name__)


async def fetch_document_by_id(
    info: strawberry.Info, collection: str, kind: str, id: str
) -> dict[str, Any]:
    """
    Look up exactly one document by its client-facing ID.

    Raises:
        InvalidArgumentError: If ``id`` is not a valid ObjectId (no store access happens)
        NotFoundError: If no document has that ID
    """
    object_id = parse_object_id(id)
    document = await get_store(info).find_by_id(collection, object_id)
    if document is None:
        logger.info(f"{kind} not found", collection=collection, id=id)
        raise NotFoundError(kind, id)
    return document
