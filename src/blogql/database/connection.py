"""
Database connection management
"""

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import (
    ConfigurationError,
    OperationFailure,
    PyMongoError,
    ServerSelectionTimeoutError,
)

from ..config import require_mongo_url, settings
from ..logging import get_logger
from .store import MongoDocumentStore

logger = get_logger(__name__)

# One client per process, opened at startup
_client: AsyncMongoClient | None = None


def _redact_url(url: str) -> str:
    """Hide credentials in a mongodb:// URL before logging it."""
    scheme, sep, rest = url.partition("://")
    if "@" not in rest:
        return url
    return f"{scheme}{sep}***@{rest.rsplit('@', 1)[1]}"


def init_database(mongo_url: str | None = None, force_reinit: bool = False) -> AsyncDatabase:
    """Create the shared client and return the configured database handle.

    The client connects lazily; use check_database_connection to verify reachability.

    Raises:
        MissingConfigurationError: If no connection string is configured
    """
    global _client

    if _client is not None and not force_reinit and mongo_url is None:
        return _client[settings.mongo_database]

    url = mongo_url or require_mongo_url()
    _client = AsyncMongoClient(url, serverSelectionTimeoutMS=settings.mongo_timeout_ms)
    logger.info(
        "Database client initialized",
        mongo_url=_redact_url(url),
        database=settings.mongo_database,
    )
    return _client[settings.mongo_database]


def get_database() -> AsyncDatabase:
    """Get the shared database handle, initializing the client if needed."""
    if _client is None:
        return init_database()
    return _client[settings.mongo_database]


def create_document_store() -> MongoDocumentStore:
    """Build the store that is injected into every request context."""
    return MongoDocumentStore(get_database())


async def close_database() -> None:
    """Close the shared client."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None
        logger.info("Database client closed")


def reset_database() -> None:
    """Forget the shared client without closing it (for tests)."""
    global _client
    _client = None


async def check_database_connection() -> tuple[bool, str | None]:
    """
    Test the database connection and return helpful error messages.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _client is None:
        return False, "Database client not initialized"

    try:
        await _client.admin.command("ping")
        return True, None
    except ServerSelectionTimeoutError as e:
        return False, (
            f"Cannot reach MongoDB: {e}\n"
            f"The server appears to be down or unreachable.\n"
            f"Please check that MongoDB is running and the connection string is correct."
        )
    except OperationFailure as e:
        if e.code == 18:  # AuthenticationFailed
            return False, (
                f"Database authentication failed: {e}\n"
                f"Please check the credentials in your connection string."
            )
        return False, f"Database command failed: {e}"
    except ConfigurationError as e:
        return False, f"Invalid database configuration: {e}"
    except PyMongoError as e:
        return False, f"Database connection error ({type(e).__name__}): {e}"
