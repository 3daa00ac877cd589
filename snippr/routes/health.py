"""
Snippr - Health Check Route
=============================

What:  GET /health for container probes and load balancers.
How:   The service has no external dependencies, so it is healthy whenever
       the process can answer and the store is attached to the app. The
       response also reports how many snippets are stored and how long ago
       the app was created (app.state.started_at, set by create_app()).
"""

import time

from fastapi import APIRouter, Depends, Request

from snippr import __version__
from snippr.schemas.snippet import HealthResponse
from snippr.store import SnippetStore, get_store


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    store: SnippetStore = Depends(get_store),
) -> HealthResponse:
    started_at = getattr(request.app.state, "started_at", None) or time.time()
    return HealthResponse(
        status="healthy",
        version=__version__,
        snippet_count=store.count(),
        uptime_seconds=round(max(time.time() - started_at, 0.0), 2),
    )
