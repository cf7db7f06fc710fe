"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database
from core.pagination import ARTICLE_SORT_COLUMNS, PageParams
from core.query_builder import Listing, build_count_query, build_page_query, column, quote_ident

_ARTICLE_COLUMNS = """
    a.author,
    a.title,
    a.article_id,
    a.topic,
    a.created_at,
    a.votes,
    a.article_img_url,
    COUNT(c.comment_id)::INT AS comment_count"""

ARTICLES = Listing(
    select=f"""
SELECT {_ARTICLE_COLUMNS}
FROM articles a
LEFT JOIN comments c ON c.article_id = a.article_id""",
    count_from="FROM articles a",
    sort_columns={
        name: quote_ident(name) if name == "comment_count" else column("a", name)
        for name in ARTICLE_SORT_COLUMNS
    },
    tiebreak=column("a", "article_id"),
    filters={"topic": column("a", "topic")},
    group_by=column("a", "article_id"),
)


async def select_article_by_id(db: Database, article_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_ARTICLE_COLUMNS},
            a.body
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        WHERE a.article_id = $1
        GROUP BY a.article_id
        """,
        article_id,
    )


async def select_articles(db: Database, params: PageParams, *, topic: str | None = None) -> list[dict]:
    sql, args = build_page_query(ARTICLES, params, filter_by=("topic", topic))
    return await db.fetch_all(sql, *args)


async def count_articles(db: Database, *, topic: str | None = None) -> int:
    sql, args = build_count_query(ARTICLES, filter_by=("topic", topic))
    total = await db.fetch_value(sql, *args)
    return int(total or 0)


async def insert_article(
    db: Database,
    *,
    author: str | None,
    title: str | None,
    body: str | None,
    topic: str | None,
    article_img_url: str,
) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO articles (author, title, body, topic, article_img_url)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING article_id
        """,
        author,
        title,
        body,
        topic,
        article_img_url,
    )
    if row is None:
        raise RuntimeError("Failed to insert article.")
    return int(row["article_id"])


async def increment_votes(db: Database, article_id: int, inc_votes: int) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE articles
        SET votes = votes + $1
        WHERE article_id = $2
        RETURNING article_id, title, topic, author, body, created_at, votes, article_img_url
        """,
        inc_votes,
        article_id,
    )


async def delete_article(db: Database, article_id: int) -> dict | None:
    """
    Delete an article; its comments go with it (ON DELETE CASCADE).
    """
    return await db.fetch_one(
        """
        DELETE FROM articles
        WHERE article_id = $1
        RETURNING article_id
        """,
        article_id,
    )
