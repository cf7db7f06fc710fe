"""
Topic persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database


async def list_topics(db: Database) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT slug, description
        FROM topics
        ORDER BY slug ASC
        """
    )


async def insert_topic(db: Database, *, slug: str | None, description: str | None) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO topics (slug, description)
        VALUES ($1, $2)
        RETURNING slug, description
        """,
        slug,
        description,
    )
    if row is None:
        raise RuntimeError("Failed to insert topic.")
    return row


async def delete_topic(db: Database, slug: str) -> dict | None:
    """
    Delete a topic; its articles go with it (ON DELETE CASCADE).
    Returns the deleted slug, or None when no such topic exists.
    """
    return await db.fetch_one(
        """
        DELETE FROM topics
        WHERE slug = $1
        RETURNING slug
        """,
        slug,
    )
