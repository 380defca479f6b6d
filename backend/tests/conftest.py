"""
Blog API — Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_store: AsyncMock standing in for PostStore (service unit tests)
    ├── mock_db_session: AsyncMock standing in for AsyncSession (store failures)
    ├── db_session: Real AsyncSession on the test database; drops every post
    │               and disposes the engine afterwards
    ├── seeded_posts: 10 Faker-generated posts inserted through PostStore
    ├── post_data / sample_post: one random create body, one fake stored row
    ├── open_store: Factory for PostStores on fresh sessions (read-back checks)
    └── test_client: HTTPX AsyncClient wired to the FastAPI app

Seeding and teardown are test-only collaborators; no route exposes them.
"""

import os
import tempfile
from datetime import timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio
from faker import Faker
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Point the app at the test database BEFORE the engine is built
os.environ.setdefault(
    "TEST_DATABASE_URL",
    "sqlite+aiosqlite:///"
    + os.path.join(tempfile.mkdtemp(prefix="blog_api_test_"), "test-blog.db"),
)
os.environ["LOG_LEVEL"] = "WARNING"

from blog_api.config import settings  # noqa: E402

settings.database_url = settings.test_database_url

from blog_api.database import async_session_factory, dispose_engine, init_models  # noqa: E402
from blog_api.services.post_store import PostStore  # noqa: E402

fake = Faker()

SEED_COUNT = 10


# ══════════════════════════════════════════════════════════════════════════
# Test Data Factory
# ══════════════════════════════════════════════════════════════════════════

def generate_content() -> str:
    return " ".join(fake.sentence() for _ in range(20))


def generate_post_data() -> dict:
    """
    One random post in the create-body shape.

    `created` lies somewhere in the past year and is timezone-aware.
    """
    return {
        "author": {
            "firstName": fake.first_name(),
            "lastName": fake.last_name(),
        },
        "title": fake.sentence(nb_words=4),
        "content": generate_content(),
        "created": fake.date_time_between(
            start_date="-1y", end_date="now", tzinfo=timezone.utc
        ),
    }


@pytest.fixture
def post_data():
    """A fresh random post payload (Python datetime for `created`)."""
    return generate_post_data()


# ══════════════════════════════════════════════════════════════════════════
# Unit-Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_store():
    """
    Provides a mock PostStore.

    Usage:
        async def test_get_post(mock_store):
            mock_store.find_by_id.return_value = post
            result = await post_service.get_post(mock_store, str(post.id))
    """
    store = MagicMock(spec=PostStore)
    store.insert_many = AsyncMock()
    store.insert_one = AsyncMock()
    store.find_all = AsyncMock(return_value=[])
    store.count = AsyncMock(return_value=0)
    store.find_by_id = AsyncMock(return_value=None)
    store.update_by_id = AsyncMock(return_value=None)
    store.delete_by_id = AsyncMock(return_value=False)
    return store


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_storage_failure(mock_db_session):
            mock_db_session.execute.side_effect = OperationalError(...)
            await PostStore(mock_db_session).find_all()
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add_all = MagicMock()
    return session


@pytest.fixture
def sample_post():
    """A stand-in for a stored Post row."""
    post = MagicMock()
    post.id = uuid4()
    post.author = {"firstName": "Ada", "lastName": "Lovelace"}
    post.title = "Notes on the Analytical Engine"
    post.content = "The engine weaves algebraic patterns."
    post.created = fake.date_time_between(start_date="-1y", end_date="now", tzinfo=timezone.utc)
    return post


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

async def tear_down_db() -> None:
    async with async_session_factory() as session:
        await PostStore(session).drop_all()
        await session.commit()


@pytest_asyncio.fixture
async def db_session():
    """
    Real session on the test database.

    Tables are created on entry; every post is dropped and the engine
    disposed on exit, so each test starts from an empty store.
    """
    await init_models()
    async with async_session_factory() as session:
        yield session
    await tear_down_db()
    await dispose_engine()


@pytest_asyncio.fixture
async def seeded_posts(db_session):
    """Insert SEED_COUNT random posts and commit them."""
    store = PostStore(db_session)
    posts = await store.insert_many([generate_post_data() for _ in range(SEED_COUNT)])
    await db_session.commit()
    return posts


@pytest_asyncio.fixture
async def open_store(db_session):
    """
    Factory returning a PostStore on a brand-new session.

    Read-backs go through a fresh session so they see what the app
    committed rather than db_session's identity map.
    """
    sessions = []

    def _open() -> PostStore:
        session = async_session_factory()
        sessions.append(session)
        return PostStore(session)

    yield _open

    for session in sessions:
        await session.close()


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/posts")
            assert response.status_code == 200
    """
    from blog_api.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
