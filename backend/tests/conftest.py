"""
Noteful Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Endpoint tests need a real database with foreign keys and a client
       that carries (or deliberately omits) the bearer token.
How:   Each test gets a fresh in-memory SQLite database (aiosqlite), the
       app's session dependency is overridden to use it, and requests go
       through HTTPX's ASGITransport without a running server.

Fixture Hierarchy (all function-scoped):
    db_engine ─── session_factory ─┬─ db_session       store-level tests
                                   ├─ test_client      HTTP-level tests
                                   └─ seeded_folders ── seeded_notes
    auth_headers                   Authorization header with the test token
    malicious_folder / malicious_note   XSS payloads and their sanitized form
"""

import os
from datetime import datetime

# Override settings for testing BEFORE any noteful imports
# Why: keeps tests off the production database and pins the bearer token
TEST_API_TOKEN = "test-api-token"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["API_TOKEN"] = TEST_API_TOKEN
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from noteful.database import Base, enable_sqlite_foreign_keys, get_db_session
from noteful.main import create_app
from noteful.models import Folder, Note


def parse_timestamp(value: str) -> datetime:
    """'2029-01-22T16:28:32.615Z' → aware datetime."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


# ══════════════════════════════════════════════════════════════════════════
# Test Data
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def folders_data():
    """Two folders, as the API is expected to return them."""
    return [
        {"id": 1, "name": "Best Folder"},
        {"id": 2, "name": "Another Folder"},
    ]


@pytest.fixture
def notes_data():
    """Four notes spread over folders 1 and 2, as the API returns them."""
    return [
        {
            "id": 1,
            "name": "Dogs",
            "modified": "2029-01-22T16:28:32.615Z",
            "folder_id": 1,
            "content": "Dogs are cool",
        },
        {
            "id": 2,
            "name": "Cats",
            "modified": "2100-05-22T16:28:32.615Z",
            "folder_id": 1,
            "content": "Cats are cute",
        },
        {
            "id": 3,
            "name": "Woo",
            "modified": "1919-12-22T16:28:32.615Z",
            "folder_id": 2,
            "content": "WOOOOOOO",
        },
        {
            "id": 4,
            "name": "Ahh",
            "modified": "1919-12-22T16:28:32.615Z",
            "folder_id": 2,
            "content": "AAAAHHHHH",
        },
    ]


@pytest.fixture
def malicious_folder():
    """A folder whose name carries a script tag, and its sanitized form."""
    malicious = {
        "id": 911,
        "name": 'Naughty naughty very naughty <script>alert("xss");</script>',
    }
    expected = {
        **malicious,
        "name": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
    }
    return malicious, expected


@pytest.fixture
def malicious_note():
    """
    A note with a script tag in its name and an event handler in its
    content, and its sanitized form. `modified` is omitted from both;
    tests compare it separately.
    """
    malicious = {
        "id": 911,
        "name": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "folder_id": 1,
        "content": (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        ),
    }
    expected = {
        **malicious,
        "name": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
        "content": (
            'Bad image <img src="https://url.to.file.which/does-not.exist">. '
            "But not <strong>all</strong> bad."
        ),
    }
    return malicious, expected


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    A fresh in-memory SQLite database with the full schema.

    StaticPool keeps the single in-memory connection alive across
    sessions; without it every session would see an empty database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """A session for tests that drive the stores directly."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_folders(session_factory, folders_data):
    """Inserts `folders_data` and returns it."""
    async with session_factory() as session:
        session.add_all([Folder(**folder) for folder in folders_data])
        await session.commit()
    return folders_data


@pytest_asyncio.fixture
async def seeded_notes(session_factory, seeded_folders, notes_data):
    """Inserts `notes_data` (after its folders) and returns it."""
    async with session_factory() as session:
        session.add_all([
            Note(**{**note, "modified": parse_timestamp(note["modified"])})
            for note in notes_data
        ])
        await session.commit()
    return notes_data


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_API_TOKEN}"}


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient talking to a fresh app instance.
    How:     `get_db_session` is overridden so every request uses the
             per-test in-memory database.

    Usage:
        async def test_list(test_client, auth_headers):
            response = await test_client.get("/api/folders", headers=auth_headers)
            assert response.status_code == 200
    """
    app = create_app(api_token=TEST_API_TOKEN)

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
