"""
Snippr - In-Memory Snippet Store
==================================

What:  Thread-safe owner of every snippet and of the id counter.
How:   A dict keyed by id plus an integer counter, both guarded by a single
       threading.Lock. The store is built once by create_app(), attached to
       app.state.store, and handed to route handlers through get_store().
Who:   Route handlers (via Depends(get_store)) and the health check.

Concurrency:
    Handlers may run on the event loop or in Starlette's thread pool, so
    every access goes through the lock:

    create():  validate → [lock: counter += 1 → build Snippet → insert]
    list():    [lock: copy values] → filter the copy
    get():     [lock: dict lookup]

    Validation happens before the lock is taken, so a rejected create never
    advances the counter. Snippets are frozen and inserted only after they
    are fully built, so readers never observe a half-constructed record.

Invariants:
    - every key equals the id of its value
    - ids are handed out in strictly increasing order and never reused
    - the mapping only grows, and only through create()
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from starlette.requests import Request

from snippr.exceptions import NotFoundError, ValidationError
from snippr.models.snippet import Snippet
from snippr.seed import SEED_SNIPPETS

logger = logging.getLogger(__name__)


class SnippetStore:
    """
    In-memory snippet collection with atomic id assignment.

    The counter starts at the highest seed id, so the first created snippet
    on a default store gets id 9.
    """

    def __init__(self, seed: Iterable[Snippet] = SEED_SNIPPETS):
        self._lock = threading.Lock()
        self._snippets: Dict[int, Snippet] = {}
        self._counter = 0

        for snippet in seed:
            if snippet.id in self._snippets:
                raise ValueError(f"Duplicate seed snippet id {snippet.id}")
            self._snippets[snippet.id] = snippet
            self._counter = max(self._counter, snippet.id)

        logger.debug(
            "Snippet store initialised with %d seed snippets (last id %d)",
            len(self._snippets),
            self._counter,
        )

    def list(self, language: Optional[str] = None) -> List[Snippet]:
        """
        Return a snapshot of stored snippets, optionally filtered by language.

        An absent or empty `language` returns everything. Otherwise only
        snippets whose language matches case-insensitively are returned.
        Callers must not rely on the order of the result.
        """
        with self._lock:
            snapshot = list(self._snippets.values())

        if not language:
            return snapshot
        return [snippet for snippet in snapshot if snippet.matches_language(language)]

    def get(self, snippet_id: int) -> Snippet:
        """
        Look up a single snippet.

        Raises:
            NotFoundError: no snippet has this id
        """
        with self._lock:
            snippet = self._snippets.get(snippet_id)

        if snippet is None:
            raise NotFoundError(resource="snippet", resource_id=snippet_id)
        return snippet

    def create(self, language: Optional[str], code: Optional[str]) -> Snippet:
        """
        Validate the fields, assign the next id and store a new snippet.

        Raises:
            ValidationError: `language` or `code` is missing or empty
        """
        for field, value in (("language", language), ("code", code)):
            if not value:
                logger.debug("Rejected snippet create: empty %s", field)
                raise ValidationError(
                    message=f"Field '{field}' is required and must not be empty",
                    field=field,
                )

        with self._lock:
            self._counter += 1
            snippet = Snippet(id=self._counter, language=language, code=code)
            self._snippets[snippet.id] = snippet

        logger.info("Created snippet %d (%s, %d chars)", snippet.id, snippet.language, len(code))
        return snippet

    def count(self) -> int:
        with self._lock:
            return len(self._snippets)

    def __len__(self) -> int:
        return self.count()

    @property
    def last_id(self) -> int:
        """The most recently assigned id (the highest seed id on a fresh store)."""
        with self._lock:
            return self._counter


def get_store(request: Request) -> SnippetStore:
    """
    FastAPI dependency returning the store owned by the running application.

    Usage:
        @router.get("/snippets")
        async def list_snippets(store: SnippetStore = Depends(get_store)): ...
    """
    store = getattr(request.app.state, "store", None)
    if not isinstance(store, SnippetStore):
        raise RuntimeError("Snippet store has not been initialised")
    return store
