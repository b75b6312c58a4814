"""
QuickNotes Backend - Application Package
=========================================

What: Small note-taking API: create, list, fetch, update and delete short text notes.
How:  FastAPI app over an in-memory, lock-guarded note store.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← not-found handling, logging
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← validated Note + Pydantic contracts
    ├─────────────────────────────────────┤
    │          Store (In-Memory)          │  ← reader/writer locked mapping
    └─────────────────────────────────────┘

    Notes live only in process memory and are lost on restart.
"""

__version__ = "1.0.0"
