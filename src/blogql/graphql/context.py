"""
Request context handed to every resolver
"""

from typing import Any

import strawberry

from ..database.store import DocumentStore
from .loaders import Loaders


def build_context(store: DocumentStore, request: Any = None) -> dict[str, Any]:
    """Build a fresh context for one GraphQL request.

    The store is shared across requests; loaders are not, so their caches never
    outlive a single response.
    """
    return {
        "request": request,
        "store": store,
        "loaders": Loaders(store),
    }


def get_store(info: strawberry.Info) -> DocumentStore:
    return info.context["store"]


def get_loaders(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]
