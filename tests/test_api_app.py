"""
HTTP-level tests for the FastAPI application with an injected store
"""

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from blogql.api.app import create_app
from blogql.database.models import POSTS, USERS


@pytest.fixture
def client_app(store):
    return create_app(store=store)


@pytest.mark.asyncio
async def test_health_reports_database(client_app):
    transport = ASGITransport(app=client_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"


@pytest.mark.asyncio
async def test_health_degraded_when_ping_fails(client_app, store):
    async def failing_ping():
        raise RuntimeError("no route to host")

    store.ping = failing_ping
    transport = ASGITransport(app=client_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")

    assert response.json()["database"] == "unavailable"
    assert response.json()["status"] == "degraded"


@pytest.mark.asyncio
async def test_graphql_query_over_http(client_app, store):
    post_id = store.add(POSTS, title="Hello")
    user_id = store.add(USERS, name="Ada", email="ada@example.com", posts=[post_id])

    transport = ASGITransport(app=client_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/graphql",
            json={
                "query": "query UserPosts($id: ID!) { user(id: $id) { name posts { title } } }",
                "variables": {"id": str(user_id)},
            },
            headers={"x-request-id": "req-123"},
        )

    assert response.status_code == 200
    assert response.headers["x-request-id"] == "req-123"
    assert response.json()["data"] == {"user": {"name": "Ada", "posts": [{"title": "Hello"}]}}


@pytest.mark.asyncio
async def test_graphql_error_code_over_http(client_app):
    transport = ASGITransport(app=client_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/graphql",
            json={"query": f'{{ post(id: "{ObjectId()}") {{ id }} }}'},
        )

    body = response.json()
    assert body["data"] == {"post": None}
    assert body["errors"][0]["extensions"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_create_user_over_http(client_app, store):
    transport = ASGITransport(app=client_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/graphql",
            json={
                "query": (
                    "mutation Create($email: String!) {"
                    ' createUser(name: "Ada", password: "pw", email: $email) { id email } }'
                ),
                "variables": {"email": "ada@example.com"},
            },
        )

    created = response.json()["data"]["createUser"]
    assert created["email"] == "ada@example.com"
    assert ObjectId(created["id"]) in store.collections[USERS]
