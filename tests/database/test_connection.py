"""
Tests for the shared MongoDB client lifecycle
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from blogql.config import MissingConfigurationError
from blogql.database import connection


@pytest.fixture(autouse=True)
def fresh_client():
    connection.reset_database()
    yield
    connection.reset_database()


def test_redact_url_hides_credentials():
    assert (
        connection._redact_url("mongodb://user:pw@db:27017/app")
        == "mongodb://***@db:27017/app"
    )
    assert connection._redact_url("mongodb://db:27017") == "mongodb://db:27017"


def test_init_requires_url():
    with patch.object(connection, "require_mongo_url", side_effect=MissingConfigurationError("x")):
        with pytest.raises(MissingConfigurationError):
            connection.init_database()


def test_init_reuses_client():
    with patch.object(connection, "AsyncMongoClient") as client_cls:
        connection.init_database("mongodb://db:27017")
        connection.get_database()

    client_cls.assert_called_once()


@pytest.mark.asyncio
async def test_check_without_client():
    ok, message = await connection.check_database_connection()

    assert not ok
    assert "not initialized" in message


@pytest.mark.asyncio
async def test_check_success():
    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})
    with patch.object(connection, "AsyncMongoClient", return_value=client):
        connection.init_database("mongodb://db:27017")

    assert await connection.check_database_connection() == (True, None)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, expected",
    [
        (ServerSelectionTimeoutError("timed out"), "Cannot reach MongoDB"),
        (OperationFailure("auth failed", code=18), "authentication failed"),
        (OperationFailure("boom", code=2), "command failed"),
    ],
)
async def test_check_failures(error, expected):
    client = MagicMock()
    client.admin.command = AsyncMock(side_effect=error)
    with patch.object(connection, "AsyncMongoClient", return_value=client):
        connection.init_database("mongodb://db:27017")

    ok, message = await connection.check_database_connection()

    assert not ok
    assert expected in message


@pytest.mark.asyncio
async def test_close_database():
    client = MagicMock()
    client.close = AsyncMock()
    with patch.object(connection, "AsyncMongoClient", return_value=client):
        connection.init_database("mongodb://db:27017")

    await connection.close_database()

    client.close.assert_awaited_once()
    assert connection._client is None
