"""
Blog API — Post Service (Resource Handler Logic)
=================================================

What:  Validate → persist → serialize for each /posts operation.
Why:   Business rules stay independent of HTTP and of the storage driver.
How:   Works against a PostStore it receives per call; returns Serialized
       Post dicts ready for the response model.
Who:   Called by the route handlers in `blog_api.routes.posts`.

Flow per request:
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌─────────────┐
    │  Route   │───▶│  Validate   │───▶│  PostStore   │───▶│  Serialize  │
    │  (HTTP)  │    │  (service)  │    │  (one call)  │    │  (pure fn)  │
    └──────────┘    └─────────────┘    └──────────────┘    └─────────────┘

    Validation failures raise before the store is touched, and each
    operation performs at most one storage mutation.

PostService holds no state: the store arrives as an argument, so the same
instance serves every request.
"""

import logging
from typing import Dict, List

from blog_api.exceptions import MalformedIdentifierError, NotFoundError, ValidationError
from blog_api.schemas.post import PostCreate, PostUpdate
from blog_api.services.post_store import PostStore, mutable_changes, parse_post_id
from blog_api.services.serialization import serialize_post

logger = logging.getLogger(__name__)

SerializedPost = Dict[str, str]


def same_post_id(path_id: str, body_id: str) -> bool:
    """Compare two wire ids as identifiers, so spelling variants of one UUID match."""
    try:
        return parse_post_id(path_id) == parse_post_id(body_id)
    except MalformedIdentifierError:
        return path_id == body_id


class PostService:
    """
    Business logic for the /posts resource.

    Responsibilities:
        - list_posts(): every post, serialized
        - get_post(): one post or NotFoundError
        - create_post(): single insert from a validated body
        - update_post(): id-match check, partial update, NotFoundError on absent
        - delete_post(): idempotent removal
    """

    async def list_posts(self, store: PostStore) -> List[SerializedPost]:
        posts = await store.find_all()
        return [serialize_post(post) for post in posts]

    async def count_posts(self, store: PostStore) -> int:
        return await store.count()

    async def get_post(self, store: PostStore, post_id: str) -> SerializedPost:
        """
        Retrieve a single post by id.

        Raises:
            NotFoundError: No post has this id (→ 404)
            MalformedIdentifierError: id is not a valid identifier (→ 500)
        """
        post = await store.find_by_id(post_id)
        if post is None:
            raise NotFoundError(resource="post", resource_id=post_id)
        return serialize_post(post)

    async def create_post(self, store: PostStore, payload: PostCreate) -> SerializedPost:
        """
        Insert one post built from a validated create body.

        Required fields are enforced by the PostCreate schema before this
        runs; the checks here cover callers that build the model by hand
        (model_construct) and must still never reach the store.

        Raises:
            ValidationError: A required field is missing or empty (→ 400)
            StorageError: The insert failed (→ 500)
        """
        record = payload.model_dump(by_alias=True)
        for field in ("title", "content"):
            if not record.get(field):
                raise ValidationError(
                    message=f"Missing `{field}` in request body", field=field
                )
        author = record.get("author") or {}
        for part in ("firstName", "lastName"):
            if not author.get(part):
                raise ValidationError(
                    message=f"Missing `author.{part}` in request body",
                    field=f"author.{part}",
                )

        post = await store.insert_one(record)
        logger.info("Post created: %s", post.id)
        return serialize_post(post)

    async def update_post(
        self, store: PostStore, post_id: str, payload: PostUpdate
    ) -> SerializedPost:
        """
        Apply a partial update to an existing post.

        Only title, content and author are forwarded; id and created are
        never written.

        Raises:
            ValidationError: Body id differs from path id (→ 400)
            NotFoundError: No post has this id (→ 404)
            MalformedIdentifierError: id is not a valid identifier (→ 500)
        """
        if payload.id is not None and not same_post_id(post_id, payload.id):
            raise ValidationError(
                message=(
                    f"Request path id ({post_id}) and request body id "
                    f"({payload.id}) must match"
                ),
                field="id",
                context={"path_id": post_id, "body_id": payload.id},
            )

        # Explicit nulls mean "leave as is"; every stored field is NOT NULL
        changes = {
            key: value
            for key, value in mutable_changes(
                payload.model_dump(by_alias=True, exclude_unset=True)
            ).items()
            if value is not None
        }
        post = await store.update_by_id(post_id, changes)
        if post is None:
            raise NotFoundError(resource="post", resource_id=post_id)

        logger.info("Post %s updated: %s", post_id, ", ".join(sorted(changes)) or "no fields")
        return serialize_post(post)

    async def delete_post(self, store: PostStore, post_id: str) -> bool:
        """
        Remove a post. Missing posts are not an error.

        Raises:
            MalformedIdentifierError: id is not a valid identifier (→ 500)
        """
        deleted = await store.delete_by_id(post_id)
        if deleted:
            logger.info("Post %s deleted", post_id)
        else:
            logger.info("Delete requested for missing post %s", post_id)
        return deleted


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()
