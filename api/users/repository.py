"""
User persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database

_USER_SELECT = """
        SELECT
          u.username,
          u.name,
          u.avatar_url,
          COUNT(c.comment_id)::INT AS comment_count
        FROM users u
        LEFT JOIN comments c ON c.author = u.username
"""


async def list_users(db: Database) -> list[dict]:
    return await db.fetch_all(
        _USER_SELECT
        + """
        GROUP BY u.username
        ORDER BY u.username ASC
        """
    )


async def select_user_by_username(db: Database, username: str) -> dict | None:
    return await db.fetch_one(
        _USER_SELECT
        + """
        WHERE u.username = $1
        GROUP BY u.username
        """,
        username,
    )


async def delete_user(db: Database, username: str) -> dict | None:
    return await db.fetch_one(
        """
        DELETE FROM users
        WHERE username = $1
        RETURNING username
        """,
        username,
    )
