"""
Database module for blogql
"""

from .connection import close_database, create_document_store, get_database, init_database
from .store import DocumentStore, DuplicateDocumentError, MongoDocumentStore

__all__ = [
    "DocumentStore",
    "DuplicateDocumentError",
    "MongoDocumentStore",
    "close_database",
    "create_document_store",
    "get_database",
    "init_database",
]
