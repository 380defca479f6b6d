"""
Blog API — Posts Route Handlers
================================

What:  The /posts resource: list, get, create, update, delete.
How:   Resolves a PostStore for the request, delegates to PostService, and
       sets status codes and headers.
Who:   Any HTTP client; the integration tests drive these through httpx.

Endpoints:
    GET    /posts        → 200, array of Serialized Post (+ X-Total-Count)
    GET    /posts/{id}   → 200 | 404
    POST   /posts        → 201 | 400
    PUT    /posts/{id}   → 200 | 400 | 404
    DELETE /posts/{id}   → 204

Path ids are plain strings here, not UUIDs: id parsing belongs to the store,
which reports unparseable ids as MalformedIdentifierError (→ 500).
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.database import get_db_session
from blog_api.schemas.post import (
    ErrorResponse,
    PostCreate,
    PostResponse,
    PostUpdate,
)
from blog_api.services.post_service import post_service
from blog_api.services.post_store import PostStore

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/posts", tags=["Posts"])


def get_post_store(db: AsyncSession = Depends(get_db_session)) -> PostStore:
    """Resolve the per-request PostStore bound to this request's session."""
    return PostStore(db)


@router.get(
    "",
    response_model=List[PostResponse],
    responses={
        200: {"description": "Every stored post"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all blog posts",
)
async def list_posts(
    response: Response,
    store: PostStore = Depends(get_post_store),
) -> List[dict]:
    """
    List every post.

    X-Total-Count carries the store's count so clients can check it
    against the body length without a second request.
    """
    posts = await post_service.list_posts(store)
    response.headers["X-Total-Count"] = str(await post_service.count_posts(store))
    return posts


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={
        404: {"description": "Post not found", "model": ErrorResponse},
        500: {"description": "Server error or malformed id", "model": ErrorResponse},
    },
    summary="Get a single blog post",
)
async def get_post(
    post_id: str,
    store: PostStore = Depends(get_post_store),
) -> dict:
    return await post_service.get_post(store, post_id)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing or empty field", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a blog post",
)
async def create_post(
    payload: PostCreate,
    store: PostStore = Depends(get_post_store),
) -> dict:
    """
    Create a post from a structured author, title and content.

    Example request:
        POST /posts
        {
            "author": {"firstName": "Ada", "lastName": "Lovelace"},
            "title": "Notes",
            "content": "...",
            "created": "2024-01-15T12:00:00Z"
        }
    """
    return await post_service.create_post(store, payload)


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    responses={
        400: {"description": "Path and body ids differ", "model": ErrorResponse},
        404: {"description": "Post not found", "model": ErrorResponse},
        500: {"description": "Server error or malformed id", "model": ErrorResponse},
    },
    summary="Update a blog post",
)
async def update_post(
    post_id: str,
    payload: PostUpdate,
    store: PostStore = Depends(get_post_store),
) -> dict:
    """Update title, content and/or author of an existing post."""
    return await post_service.update_post(store, post_id, payload)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        500: {"description": "Server error or malformed id", "model": ErrorResponse},
    },
    summary="Delete a blog post",
)
async def delete_post(
    post_id: str,
    store: PostStore = Depends(get_post_store),
) -> Response:
    """
    Delete a post. Answers 204 whether or not the post existed.

    An id the store cannot parse is surfaced as a server fault rather than
    treated as "already gone".
    """
    await post_service.delete_post(store, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
