"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.pagination import COMMENT_SORT_COLUMNS, PageParams
from core.query_builder import Listing, build_count_query, build_page_query, column

COMMENTS = Listing(
    select="""
SELECT c.comment_id, c.votes, c.created_at, c.author, c.body, c.article_id
FROM comments c""",
    count_from="FROM comments c",
    sort_columns={name: column("c", name) for name in COMMENT_SORT_COLUMNS},
    tiebreak=column("c", "comment_id"),
    filters={
        "author": column("c", "author"),
        "article_id": column("c", "article_id"),
    },
)


def _filter(*, username: str | None, article_id: int | None) -> tuple[str, Any] | None:
    if username is not None:
        return ("author", username)
    if article_id is not None:
        return ("article_id", article_id)
    return None


async def select_comments(
    db: Database,
    params: PageParams,
    *,
    username: str | None = None,
    article_id: int | None = None,
) -> list[dict]:
    sql, args = build_page_query(
        COMMENTS,
        params,
        filter_by=_filter(username=username, article_id=article_id),
    )
    return await db.fetch_all(sql, *args)


async def count_comments(
    db: Database,
    *,
    username: str | None = None,
    article_id: int | None = None,
) -> int:
    sql, args = build_count_query(COMMENTS, filter_by=_filter(username=username, article_id=article_id))
    total = await db.fetch_value(sql, *args)
    return int(total or 0)


async def select_comment_by_id(db: Database, comment_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT comment_id, votes, created_at, author, body, article_id
        FROM comments
        WHERE comment_id = $1
        """,
        comment_id,
    )


async def insert_comment(db: Database, *, article_id: int, username: str | None, body: str | None) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO comments (author, body, article_id)
        VALUES ($1, $2, $3)
        RETURNING comment_id, votes, created_at, author, body, article_id
        """,
        username,
        body,
        article_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert comment.")
    return row


async def increment_votes(db: Database, comment_id: int, inc_votes: int) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE comments
        SET votes = votes + $1
        WHERE comment_id = $2
        RETURNING comment_id, votes, created_at, author, body, article_id
        """,
        inc_votes,
        comment_id,
    )


async def delete_comment(db: Database, comment_id: int) -> dict | None:
    return await db.fetch_one(
        """
        DELETE FROM comments
        WHERE comment_id = $1
        RETURNING comment_id
        """,
        comment_id,
    )
