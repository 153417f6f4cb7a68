from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from feedesk.core.config import settings
from feedesk.core.store import FeeStore
from feedesk.db.session import create_store
from feedesk.main import create_app


@pytest.fixture()
def store() -> FeeStore:
    """Fresh store with the sample data for every test."""
    return create_store(seed=True)


@pytest.fixture()
def empty_store() -> FeeStore:
    return create_store(seed=False)


@pytest.fixture()
def app(store: FeeStore) -> FastAPI:
    return create_app(store)


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app (unauthenticated)."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture()
async def auth_client(client: AsyncClient) -> AsyncClient:
    """Same client with a bearer token for the configured administrator."""
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": settings.admin_email, "password": settings.admin_password},
    )
    assert response.status_code == 200
    client.headers["Authorization"] = f"Bearer {response.json()['access_token']}"
    return client
