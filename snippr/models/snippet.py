"""
Snippr - Snippet Domain Record
================================

What:  The value stored by SnippetStore: an id, a language tag and the code.
How:   A frozen dataclass. Once the store has built a Snippet, nothing can
       reassign its fields, so a reader holding a reference always sees the
       fully populated record.

Lifecycle:
    1. Seed snippets are built when the store is constructed (ids 1-8)
    2. Client snippets are built inside SnippetStore.create() under its lock
    3. Never updated, never deleted
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Snippet:
    """A single stored code sample."""

    id: int
    language: str
    code: str

    def matches_language(self, language: str) -> bool:
        """Case-insensitive comparison of the language tag."""
        return self.language.lower() == language.lower()
