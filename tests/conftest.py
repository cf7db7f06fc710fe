"""
Shared pytest fixtures.

Two kinds of client are provided:
- `fake_client`: routes run against `RecordingDatabase`, no Postgres needed.
- `client`: the real app against the Postgres at TEST_DATABASE_URL, reseeded
  before every test. Skipped when that database is not reachable.
"""

import asyncio
import os
from datetime import datetime

import asyncpg
import pytest
from fastapi.testclient import TestClient

from core.db import get_db
from main import app

DEFAULT_IMG_URL = "https://images.pexels.com/photos/97050/pexels-photo-97050.jpeg?w=700&h=700"

SCHEMA_SQL = f"""
DROP TABLE IF EXISTS comments, articles, users, topics;

CREATE TABLE topics (
  slug VARCHAR PRIMARY KEY,
  description VARCHAR NOT NULL
);

CREATE TABLE users (
  username VARCHAR PRIMARY KEY,
  name VARCHAR NOT NULL,
  avatar_url VARCHAR
);

CREATE TABLE articles (
  article_id SERIAL PRIMARY KEY,
  title VARCHAR NOT NULL,
  topic VARCHAR NOT NULL REFERENCES topics(slug) ON DELETE CASCADE,
  author VARCHAR NOT NULL REFERENCES users(username) ON DELETE CASCADE,
  body VARCHAR NOT NULL,
  created_at TIMESTAMP DEFAULT NOW(),
  votes INT DEFAULT 0 NOT NULL,
  article_img_url VARCHAR DEFAULT '{DEFAULT_IMG_URL}'
);

CREATE TABLE comments (
  comment_id SERIAL PRIMARY KEY,
  body VARCHAR NOT NULL,
  article_id INT NOT NULL REFERENCES articles(article_id) ON DELETE CASCADE,
  author VARCHAR NOT NULL REFERENCES users(username) ON DELETE CASCADE,
  votes INT DEFAULT 0 NOT NULL,
  created_at TIMESTAMP DEFAULT NOW()
);
"""

TOPICS = [
    ("mitch", "The man, the Mitch, the legend"),
    ("cats", "Not dogs"),
    ("paper", "what books are made of"),
]

USERS = [
    ("butter_bridge", "jonny", "https://avatars.example.com/butter_bridge.png"),
    ("icellusedkars", "sam", "https://avatars.example.com/icellusedkars.png"),
    ("rogersop", "paul", "https://avatars.example.com/rogersop.png"),
    ("lurker", "do_nothing", "https://avatars.example.com/lurker.png"),
]

# 12 articles, one per day of January 2020; only article 5 is about cats.
ARTICLES = [
    (
        f"Article {i}",
        "cats" if i == 5 else "mitch",
        "butter_bridge" if i % 2 else "icellusedkars",
        f"Body of article {i}",
        datetime(2020, 1, i),
        100 if i == 1 else 0,
        f"https://images.example.com/{i}.jpg",
    )
    for i in range(1, 13)
]

# (body, article_id, author, votes); comment i is created on 2020-03-i.
COMMENTS = [
    ("Oh, I've got compassion running out of my nose, pal!", 1, "butter_bridge", 16),
    ("The beautiful thing about treasure is that it exists.", 1, "icellusedkars", 14),
    ("Replacing the quiet elegance of the dark suit and tie.", 1, "icellusedkars", 100),
    ("I hate streaming noses", 1, "butter_bridge", -100),
    ("Lobster pot", 3, "icellusedkars", 0),
    ("Delicious crackerbreads", 3, "icellusedkars", 1),
    ("Fruit pastilles", 5, "butter_bridge", 4),
]


class RecordingDatabase:
    """
    In-memory stand-in for `core.db.Database`.

    Results are queued per method and consumed in order; a queued exception
    is raised instead of returned. Every call is recorded as
    `(method, normalised_sql, args)`.
    """

    _defaults = {"fetch_one": None, "fetch_all": [], "fetch_value": 0, "execute": None}

    def __init__(self):
        self.calls = []
        self._results = {name: [] for name in self._defaults}

    def queue(self, method, *results):
        self._results[method].extend(results)

    async def _call(self, method, sql, args):
        self.calls.append((method, " ".join(sql.split()), list(args)))
        pending = self._results[method]
        result = pending.pop(0) if pending else self._defaults[method]
        if isinstance(result, BaseException):
            raise result
        return result

    async def fetch_one(self, sql, *args):
        return await self._call("fetch_one", sql, args)

    async def fetch_all(self, sql, *args):
        return await self._call("fetch_all", sql, args)

    async def fetch_value(self, sql, *args):
        return await self._call("fetch_value", sql, args)

    async def execute(self, sql, *args):
        return await self._call("execute", sql, args)


@pytest.fixture
def fake_db():
    return RecordingDatabase()


@pytest.fixture
def fake_client(fake_db):
    app.dependency_overrides[get_db] = lambda: fake_db
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()


async def _create_schema(url):
    conn = await asyncpg.connect(url, timeout=5)
    try:
        await conn.execute(SCHEMA_SQL)
    finally:
        await conn.close()


async def _seed(url):
    conn = await asyncpg.connect(url)
    try:
        await conn.execute("TRUNCATE topics, users, articles, comments RESTART IDENTITY CASCADE")
        await conn.executemany("INSERT INTO topics (slug, description) VALUES ($1, $2)", TOPICS)
        await conn.executemany("INSERT INTO users (username, name, avatar_url) VALUES ($1, $2, $3)", USERS)
        await conn.executemany(
            """
            INSERT INTO articles (title, topic, author, body, created_at, votes, article_img_url)
            VALUES ($1, $2, $3, $4, $5, $6, $7)
            """,
            ARTICLES,
        )
        await conn.executemany(
            """
            INSERT INTO comments (body, article_id, author, votes, created_at)
            VALUES ($1, $2, $3, $4, $5)
            """,
            [(*comment, datetime(2020, 3, i)) for i, comment in enumerate(COMMENTS, start=1)],
        )
    finally:
        await conn.close()


@pytest.fixture(scope="session")
def database_url():
    """Postgres used by the integration tests; created fresh per session."""
    url = os.environ.get("TEST_DATABASE_URL", "").strip()
    if not url:
        pytest.skip("TEST_DATABASE_URL not set")
    try:
        asyncio.run(_create_schema(url))
    except (OSError, asyncio.TimeoutError, asyncpg.PostgresError) as exc:
        pytest.skip(f"PostgreSQL not available: {exc}")
    return url


@pytest.fixture
def client(database_url, monkeypatch):
    asyncio.run(_seed(database_url))
    monkeypatch.setenv("DATABASE_URL", database_url)
    with TestClient(app) as test_client:
        yield test_client
