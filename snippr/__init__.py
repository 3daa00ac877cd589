"""
Snippr - In-Memory Code Snippet Service
=========================================

A small FastAPI service that lists, fetches and creates code snippets held
in a thread-safe in-memory store.

Layout:
    ┌─────────────────────────────────────┐
    │         Routes (API Layer)          │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Schemas (API contract)        │  ← Pydantic request/response models
    ├─────────────────────────────────────┤
    │     SnippetStore (in memory)        │  ← id assignment, filtering, locking
    ├─────────────────────────────────────┤
    │     Snippet model + seed data       │  ← frozen records
    └─────────────────────────────────────┘

Run with `snippr` or `uvicorn snippr.main:app`.
"""

__version__ = "1.0.0"
