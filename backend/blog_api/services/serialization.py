"""
Blog API — Post Serialization
==============================

What:  Storage → wire mapping for Post Records.
Why:   One place decides what clients see of a stored post.
How:   Plain functions over the stored values; no session, no HTTP objects.
Who:   PostService calls `serialize_post` for every record it returns.

Mapping:
    author  {"firstName": "Ada", "lastName": "Lovelace"}  →  "Ada Lovelace"
    created datetime                                      →  "2024-01-15T12:00:00.000Z"
    id      UUID                                          →  canonical string
    title, content                                        →  unchanged

The mapping is one-directional. Create receives the structured author,
so nothing ever splits a display name back into parts.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping


def author_display_name(author: Mapping[str, str]) -> str:
    """Join a stored author document into its "First Last" display form."""
    return f"{author['firstName']} {author['lastName']}"


def format_timestamp(value: datetime) -> str:
    """
    Render a timestamp as a UTC ISO-8601 instant with millisecond precision.

    Naive datetimes are taken to be UTC already (SQLite drops the offset
    on the way back out).
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def serialize_post(post: Any) -> Dict[str, str]:
    """
    Build the Serialized Post for a stored record.

    Args:
        post: Any object exposing id, author, title, content, created
              (a `Post` row in practice).

    Returns:
        Dict with exactly the keys id, author, title, content, created.
    """
    return {
        "id": str(post.id),
        "author": author_display_name(post.author),
        "title": post.title,
        "content": post.content,
        "created": format_timestamp(post.created),
    }
