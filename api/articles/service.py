"""
Article business logic.
"""

from __future__ import annotations

import logging

from core import pagination
from core.db import Database
from core.errors import NotFound
from core.lookups import check_exists, gather_reads

from . import repository, schemas

logger = logging.getLogger(__name__)

DEFAULT_ARTICLE_IMG_URL = "https://images.pexels.com/photos/97050/pexels-photo-97050.jpeg?w=700&h=700"


async def get_article(db: Database, article_id: int) -> dict:
    article = await repository.select_article_by_id(db, article_id)
    if article is None:
        raise NotFound("Article")
    return article


async def list_articles(
    db: Database,
    *,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
    limit: str | None = None,
    page: str | None = None,
) -> dict:
    # `?topic=` is the same as no topic filter.
    topic = topic or None
    params = pagination.parse_page_params(
        sort_by,
        order,
        limit,
        page,
        sortable=pagination.ARTICLE_SORT_COLUMNS,
    )

    # Independent reads; the existence check raises before we page.
    article_count, _ = await gather_reads(
        repository.count_articles(db, topic=topic),
        check_exists(db, "topics", "slug", topic, "Topic"),
    )
    pagination.ensure_page_exists(params, article_count)

    articles = await repository.select_articles(db, params, topic=topic)
    return {"articles": articles, "article_count": article_count}


async def create_article(db: Database, payload: schemas.ArticleCreate) -> dict:
    article_id = await repository.insert_article(
        db,
        author=payload.author,
        title=payload.title,
        body=payload.body,
        topic=payload.topic,
        article_img_url=payload.article_img_url or DEFAULT_ARTICLE_IMG_URL,
    )
    logger.info("Created article %d", article_id)
    return await get_article(db, article_id)


async def update_article_votes(db: Database, article_id: int, inc_votes: int) -> dict:
    # No floor: votes may go negative.
    article = await repository.increment_votes(db, article_id, inc_votes)
    if article is None:
        raise NotFound("Article")
    return article


async def delete_article(db: Database, article_id: int) -> None:
    row = await repository.delete_article(db, article_id)
    if row is None:
        raise NotFound("Article")
    logger.info("Deleted article %d", article_id)
