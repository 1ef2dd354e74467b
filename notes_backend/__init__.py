"""
Simple Notes Backend: Application Package
==========================================

What: In-memory notes service (create, read, update, delete, list) over HTTP.
Who:  Imported by uvicorn (`notes_backend.main:app`), pytest, and `python -m notes_backend`.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Orchestration)       │  ← id parsing, schema mapping, logging
    ├─────────────────────────────────────┤
    │       Store (Notes collection)      │  ← identity, timestamps, ordering, locking
    ├─────────────────────────────────────┤
    │      Models & Schemas (Data)        │  ← Note entity + Pydantic API contracts
    └─────────────────────────────────────┘

    Nothing is persisted: the collection lives for the process lifetime only.
"""

__version__ = "1.0.0"
