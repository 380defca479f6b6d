"""
Blog API — Pydantic Request/Response Schemas
=============================================

What:  Pydantic models defining the wire contract of the /posts resource.
How:   FastAPI validates request bodies against these models, serializes
       responses through them, and builds the OpenAPI docs from them.
When:  Validated on every request (input) and serialized on every response (output).

Wire vs storage:
    Requests carry the structured author ({"firstName", "lastName"}).
    Responses carry the flattened display string ("First Last"), produced
    by `blog_api.services.serialization`.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models: What clients send
# ══════════════════════════════════════════════════════════════════════════


class AuthorIn(BaseModel):
    """Structured author as accepted on create and update."""
    first_name: str = Field(alias="firstName", min_length=1, description="Author first name")
    last_name: str = Field(alias="lastName", min_length=1, description="Author last name")

    model_config = {"populate_by_name": True}


class PostCreate(BaseModel):
    """
    What:  Body of POST /posts.

    Field order matters: when several fields are missing, the first one
    reported (author, title, content) is the one named in the 400 message.
    `created` is optional and defaults to the insert time.
    """
    author: AuthorIn = Field(description="Structured author name")
    title: str = Field(min_length=1, description="Post title")
    content: str = Field(min_length=1, description="Post body")
    created: Optional[datetime] = Field(
        default=None,
        description="Creation timestamp (ISO 8601). Defaults to now.",
    )


class PostUpdate(BaseModel):
    """
    What:  Body of PUT /posts/{id}.

    Every field is optional. `id`, when present, must match the path id.
    Only title, content and author are applied; anything else is ignored.
    """
    id: Optional[str] = Field(default=None, description="Must equal the path id when given")
    title: Optional[str] = Field(default=None, min_length=1, description="New title")
    content: Optional[str] = Field(default=None, description="New body")
    author: Optional[AuthorIn] = Field(default=None, description="Replacement author")

    model_config = {"extra": "ignore"}


# ══════════════════════════════════════════════════════════════════════════
# Response Models: What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class PostResponse(BaseModel):
    """
    What:  Serialized Post, returned by every /posts endpoint that has a body.

    Example:
        {
            "id": "3f2b0c7e-1a54-4c1e-9f3a-2d8e5b7c9a10",
            "author": "Ada Lovelace",
            "title": "Notes on the Analytical Engine",
            "content": "...",
            "created": "2024-01-15T12:00:00.000Z"
        }
    """
    id: str = Field(description="Unique post identifier")
    author: str = Field(description="Author display name: 'First Last'")
    title: str = Field(description="Post title")
    content: str = Field(description="Post body")
    created: str = Field(description="Creation instant (UTC ISO 8601, millisecond precision)")


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models: Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
