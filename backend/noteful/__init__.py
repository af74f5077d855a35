"""
Noteful Backend — Application Package Initializer
==================================================

What: Marks the `noteful` directory as a Python package.
Why:  Enables module imports like `from noteful.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │     Middleware (auth, request id)   │  ← Runs before any resource logic
    ├─────────────────────────────────────┤
    │       Routes (folders, notes)       │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │  Services (validation, stores,      │  ← Field checks, SQL, sanitizing
    │            serialization)           │
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
