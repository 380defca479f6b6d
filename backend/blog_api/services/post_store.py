"""
Blog API — Post Store (Persistence Gateway)
============================================

What:  The only component that touches the `posts` table.
Why:   Keeps SQL and driver errors out of the service and routes.
How:   Wraps an injected AsyncSession with the record-level operations the
       service needs: insert, find, count, update, delete.
Who:   Built per request by the `get_post_store` dependency; used by PostService
       and by the test suite for seeding and teardown.

Error Handling Strategy:
    - Ids that are not UUIDs raise MalformedIdentifierError before any query
    - Missing records are not errors: find/update return None, delete returns False
    - Any SQLAlchemy or connection failure is logged and wrapped in StorageError
    - Writes are flushed, not committed; `get_db_session` owns the transaction
"""

import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Sequence, Union

from sqlalchemy import delete, desc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.exceptions import MalformedIdentifierError, StorageError
from blog_api.models.post import Post

logger = logging.getLogger(__name__)

# Fields an update may touch; id and created are never writable
MUTABLE_FIELDS = ("title", "content", "author")

PostId = Union[str, uuid.UUID]


def parse_post_id(value: PostId) -> uuid.UUID:
    """Convert a wire id into the store's key type, or raise MalformedIdentifierError."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (ValueError, AttributeError, TypeError):
        raise MalformedIdentifierError(identifier=str(value))


def _normalize_created(value: Optional[datetime]) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class PostStore:
    """
    Persistence gateway for Post Records.

    One instance per request; holds nothing but the session it was given.

    Example:
        store = PostStore(session)
        post = await store.insert_one({"author": {...}, "title": "...", "content": "..."})
        same = await store.find_by_id(str(post.id))
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _storage_errors(self, operation: str, **context: Any) -> AsyncIterator[None]:
        try:
            yield
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                "Storage error during %s: %s", operation, str(e), exc_info=True
            )
            raise StorageError(
                context={"operation": operation, "error_type": type(e).__name__, **context},
            ) from e

    # ── Create ────────────────────────────────────────────────────────────

    async def insert_many(self, records: Sequence[Mapping[str, Any]]) -> List[Post]:
        """
        Insert a batch of posts and return them with ids assigned.

        Each record needs author (firstName/lastName), title and content;
        `created` defaults to now when missing.
        """
        posts = [
            Post(
                author={
                    "firstName": record["author"]["firstName"],
                    "lastName": record["author"]["lastName"],
                },
                title=record["title"],
                content=record.get("content", ""),
                created=_normalize_created(record.get("created")),
            )
            for record in records
        ]
        async with self._storage_errors("insert_many", batch_size=len(posts)):
            self.session.add_all(posts)
            await self.session.flush()
        logger.debug("Inserted %d post(s)", len(posts))
        return posts

    async def insert_one(self, record: Mapping[str, Any]) -> Post:
        """Insert a single post."""
        posts = await self.insert_many([record])
        return posts[0]

    # ── Read ──────────────────────────────────────────────────────────────

    async def find_all(self) -> List[Post]:
        """All posts, newest first."""
        async with self._storage_errors("find_all"):
            result = await self.session.execute(
                select(Post).order_by(desc(Post.created))
            )
            return list(result.scalars().all())

    async def count(self) -> int:
        async with self._storage_errors("count"):
            result = await self.session.execute(select(func.count(Post.id)))
            return result.scalar() or 0

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """The post with this id, or None."""
        pk = parse_post_id(post_id)
        async with self._storage_errors("find_by_id", post_id=str(pk)):
            return await self.session.get(Post, pk)

    # ── Update ────────────────────────────────────────────────────────────

    async def update_by_id(
        self, post_id: PostId, changes: Mapping[str, Any]
    ) -> Optional[Post]:
        """
        Apply the mutable fields present in `changes` and return the post.

        Keys outside title/content/author are ignored. Returns None when no
        post has this id.
        """
        pk = parse_post_id(post_id)
        async with self._storage_errors("update_by_id", post_id=str(pk)):
            post = await self.session.get(Post, pk)
            if post is None:
                return None

            for field in MUTABLE_FIELDS:
                if field not in changes:
                    continue
                value = changes[field]
                if field == "author":
                    value = {"firstName": value["firstName"], "lastName": value["lastName"]}
                setattr(post, field, value)

            await self.session.flush()
            await self.session.refresh(post)
        logger.debug("Updated post %s fields=%s", pk, sorted(set(changes) & set(MUTABLE_FIELDS)))
        return post

    # ── Delete ────────────────────────────────────────────────────────────

    async def delete_by_id(self, post_id: PostId) -> bool:
        """Remove the post; True if one existed."""
        pk = parse_post_id(post_id)
        async with self._storage_errors("delete_by_id", post_id=str(pk)):
            result = await self.session.execute(delete(Post).where(Post.id == pk))
        return (result.rowcount or 0) > 0

    async def drop_all(self) -> int:
        """
        Remove every post and return how many were deleted.

        Test teardown only; never wired to a route.
        """
        async with self._storage_errors("drop_all"):
            result = await self.session.execute(delete(Post))
        removed = result.rowcount or 0
        logger.debug("Dropped %d post(s)", removed)
        return removed


def mutable_changes(changes: Mapping[str, Any]) -> Dict[str, Any]:
    """Restrict an arbitrary mapping to the fields an update may write."""
    return {key: value for key, value in changes.items() if key in MUTABLE_FIELDS}
