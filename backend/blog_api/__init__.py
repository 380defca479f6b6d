"""
Blog API — Application Package Initializer
==========================================

What: Marks the `blog_api` directory as a Python package.
Who:  Used by uvicorn (`uvicorn blog_api.main:app`), pytest, and the app modules.

Architecture Note:
    The service follows a layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (PostService, PostStore) │  ← Validation, persistence gateway
    ├─────────────────────────────────────┤
    │  Serialization (storage → wire)     │  ← Pure mapping functions
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
