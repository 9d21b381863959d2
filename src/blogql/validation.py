"""
Startup validation for blogql.

Checks run once when the API starts so misconfiguration shows up in the logs
before the first request rather than as failing resolvers.
"""

from __future__ import annotations

from typing import Any

from pymongo.errors import PyMongoError

from .config import settings
from .database.connection import check_database_connection
from .database.store import MongoDocumentStore
from .logging import get_logger

logger = get_logger(__name__)


class ValidationError(Exception):
    """Raised when application validation fails."""

    pass


async def validate_database(store: MongoDocumentStore) -> dict[str, Any]:
    """
    Validate that the database is reachable and the required indexes exist.

    Returns a dictionary with validation results.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
    }

    success, error_message = await check_database_connection()
    if not success:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)
        return results

    logger.info("Database connection validation successful", database=settings.mongo_database)

    try:
        await store.ensure_indexes()
    except PyMongoError as e:
        # Existing duplicate emails prevent the unique index from being built
        results["valid"] = False
        results["errors"].append(f"Failed to ensure indexes: {e}")
        logger.error("Index creation failed", error=str(e))

    return results


async def validate_startup_configuration(store: MongoDocumentStore) -> dict[str, Any]:
    """
    Run all startup checks.

    Raises:
        ValidationError: In production when any check fails
    """
    database_results = await validate_database(store)
    results = {
        "database": database_results,
        "overall_valid": database_results["valid"],
    }

    if not results["overall_valid"]:
        logger.error(
            "Startup validation failed - requests may fail until resolved",
            database_errors=database_results["errors"],
        )
        if settings.environment.lower() in ("production", "prod"):
            raise ValidationError("Critical configuration validation failed in production")

    return results
