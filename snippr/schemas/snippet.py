"""
Snippr - Pydantic Request/Response Schemas
============================================

What:  The JSON contract of the HTTP API.
How:   FastAPI validates request bodies against these models, serializes
       responses through them and builds the OpenAPI docs from them.

Snippet JSON shape:
    {"id": 9, "language": "Go", "code": "fmt.Println(\"hi\")"}
"""

from typing import Optional

from pydantic import BaseModel, Field

from snippr.models.snippet import Snippet


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class SnippetCreate(BaseModel):
    """
    What:  Body of POST /snippets.

    Both fields are optional at the schema level so that a missing field
    reaches SnippetStore.create() and is reported as a 400 validation_error
    rather than a schema error. Unknown keys, including a client-supplied
    `id`, are ignored; the server always assigns the id.
    """
    language: Optional[str] = Field(default=None, description="Language tag, e.g. 'Python'")
    code: Optional[str] = Field(default=None, description="Snippet source code")

    model_config = {"extra": "ignore"}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class SnippetResponse(BaseModel):
    """A stored snippet as returned by every /snippets endpoint."""
    id: int = Field(description="Server-assigned snippet id")
    language: str = Field(description="Language tag")
    code: str = Field(description="Snippet source code")

    model_config = {"from_attributes": True}

    @classmethod
    def from_snippet(cls, snippet: Snippet) -> "SnippetResponse":
        return cls(id=snippet.id, language=snippet.language, code=snippet.code)


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by all endpoints.

    Example:
        {
            "error": "not_found",
            "message": "snippet with ID '42' was not found",
            "details": {"resource": "snippet", "resource_id": 42},
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    snippet_count: int = Field(description="Number of snippets currently stored")
    uptime_seconds: float = Field(description="Seconds since service started")
