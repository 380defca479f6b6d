"""
Blog API — Post SQLAlchemy Model
=================================

What:  ORM model representing the `posts` table (the Post Record).
How:   Inherits from SQLAlchemy's DeclarativeBase; `init_models()` creates the table.
Who:   Used by PostStore for every storage operation.

Table Design:
    - UUID primary key, generated on insert, never reassigned
    - author: nested JSON document {"firstName": ..., "lastName": ...},
      always written whole (no partial author)
    - title / content: TEXT
    - created: timezone-aware timestamp, stored in UTC; never touched by updates

    Index on created DESC backs the default list ordering.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict

from sqlalchemy import JSON, DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """
    Represents one blog post in the database.

    Lifecycle:
        1. Created by POST /posts (or bulk seeding in tests)
        2. Updated in place by PUT /posts/{id} (title, content, author only)
        3. Removed by DELETE /posts/{id} or a full-store teardown
    """

    __tablename__ = "posts"

    # ── Primary Key ───────────────────────────────────────────────────────
    # Generic Uuid type: native UUID on PostgreSQL, CHAR(32) on SQLite
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier, assigned on insert",
    )

    # ── Author ────────────────────────────────────────────────────────────
    author: Mapped[Dict[str, str]] = mapped_column(
        JSON,
        nullable=False,
        comment="Nested author document: firstName, lastName",
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Post title",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Post body (long-form text)",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="When the post was created (UTC)",
    )

    __table_args__ = (
        Index("idx_posts_created", created.desc()),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title='{self.title}', created='{self.created}')>"
