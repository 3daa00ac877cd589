"""
Snippr - Test Configuration (conftest.py)
===========================================

Shared pytest fixtures.

Function-scoped (fresh for each test):
    ├── store:        New SnippetStore with the eight seed snippets
    ├── empty_store:  New SnippetStore with no seed data
    ├── app:          FastAPI app built around `store`
    └── test_client:  HTTPX AsyncClient talking to `app` in-process
"""

import os

# Must be set before snippr.config is imported
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from snippr.main import create_app
from snippr.store import SnippetStore


@pytest.fixture
def store():
    return SnippetStore()


@pytest.fixture
def empty_store():
    return SnippetStore(seed=())


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server, no lifespan).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
