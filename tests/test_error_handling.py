"""
Snippr - Server Error Mapping Tests
=====================================

What:  The 500 paths of the exception handlers in main.py.
How:   A SnippetStore whose list() raises is handed to create_app(); the
       request then fails inside the route handler.

What we test:
    ✅ A bare SnipprError becomes a 500 internal_server_error
    ✅ Any other exception becomes a generic 500 without internal details
    ✅ Both carry X-Request-ID in the header and in the body
"""

import pytest
from httpx import ASGITransport, AsyncClient

from snippr.exceptions import SnipprError
from snippr.main import create_app
from snippr.store import SnippetStore


class FailingListStore(SnippetStore):
    """SnippetStore whose list() raises the given exception."""

    def __init__(self, exc: Exception):
        super().__init__()
        self._exc = exc

    def list(self, language=None):
        raise self._exc


def _client(store: SnippetStore) -> AsyncClient:
    # ServerErrorMiddleware re-raises after responding; keep the response instead
    transport = ASGITransport(app=create_app(store=store), raise_app_exceptions=False)
    return AsyncClient(transport=transport, base_url="http://test")


class TestServerErrors:
    """Tests for the 500 mappings."""

    @pytest.mark.asyncio
    async def test_snippr_error_maps_to_500(self):
        """A bare SnipprError should return 500 internal_server_error without its context."""
        store = FailingListStore(SnipprError("store exploded", context={"secret": "s3cr3t"}))

        async with _client(store) as client:
            response = await client.get("/snippets", headers={"X-Request-ID": "rid-500"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert body["request_id"] == "rid-500"
        assert "s3cr3t" not in response.text
        assert "store exploded" not in response.text
        assert response.headers["X-Request-ID"] == "rid-500"

    @pytest.mark.asyncio
    async def test_unexpected_error_maps_to_generic_500(self):
        """An arbitrary exception should return a generic 500 that hides the exception."""
        store = FailingListStore(KeyError("internal-key-name"))

        async with _client(store) as client:
            response = await client.get("/snippets", headers={"X-Request-ID": "rid-1"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert body["details"] is None
        assert body["request_id"] == "rid-1"
        assert "internal-key-name" not in response.text
        assert "KeyError" not in response.text

    @pytest.mark.asyncio
    async def test_unexpected_error_keeps_request_id_header(self):
        """The fallback 500 runs outside RequestIDMiddleware but should still send X-Request-ID."""
        store = FailingListStore(RuntimeError("boom"))

        async with _client(store) as client:
            echoed = await client.get("/snippets", headers={"X-Request-ID": "rid-1"})
            generated = await client.get("/snippets")

        assert echoed.headers["X-Request-ID"] == "rid-1"
        assert generated.headers["X-Request-ID"] == generated.json()["request_id"]
        assert len(generated.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_other_routes_unaffected(self):
        """A failing list() should not break GET /snippets/{id}."""
        store = FailingListStore(RuntimeError("boom"))

        async with _client(store) as client:
            response = await client.get("/snippets/1")

        assert response.status_code == 200
        assert response.json()["id"] == 1
