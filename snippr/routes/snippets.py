"""
Snippr - Snippet Route Handlers
=================================

What:  GET /snippets, GET /snippets/{id} and POST /snippets.
How:   Each handler pulls the store from app state through Depends(get_store),
       calls one store operation and converts the result into
       SnippetResponse. Errors raised by the store (NotFoundError,
       ValidationError) propagate to the handlers registered in main.py.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from snippr.schemas.snippet import ErrorResponse, SnippetCreate, SnippetResponse
from snippr.store import SnippetStore, get_store


router = APIRouter(prefix="/snippets", tags=["Snippets"])


@router.get(
    "",
    response_model=List[SnippetResponse],
    summary="List snippets",
    description=(
        "Returns every stored snippet. Pass `lang` to keep only snippets of that "
        "language (case-insensitive). The order of the array is not significant."
    ),
)
async def list_snippets(
    lang: Optional[str] = Query(
        default=None,
        description="Language filter, e.g. `python`. Empty means no filter.",
    ),
    store: SnippetStore = Depends(get_store),
) -> List[SnippetResponse]:
    snippets = store.list(lang)
    return [SnippetResponse.from_snippet(snippet) for snippet in snippets]


@router.get(
    "/{snippet_id}",
    response_model=SnippetResponse,
    responses={
        404: {"description": "Snippet not found", "model": ErrorResponse},
        400: {"description": "Id is not an integer", "model": ErrorResponse},
    },
    summary="Get a single snippet by ID",
)
async def get_snippet(
    snippet_id: int,
    store: SnippetStore = Depends(get_store),
) -> SnippetResponse:
    return SnippetResponse.from_snippet(store.get(snippet_id))


@router.post(
    "",
    response_model=SnippetResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "language or code missing/empty, or malformed body", "model": ErrorResponse},
    },
    summary="Create a snippet",
    description=(
        "Stores a new snippet and returns it with its server-assigned id. "
        "An `id` in the request body is ignored."
    ),
)
async def create_snippet(
    payload: SnippetCreate,
    store: SnippetStore = Depends(get_store),
) -> SnippetResponse:
    snippet = store.create(language=payload.language, code=payload.code)
    return SnippetResponse.from_snippet(snippet)
