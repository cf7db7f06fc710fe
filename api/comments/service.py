"""
Comment business logic.

One listing operation serves all three comment collections: every comment,
the comments on one article, and the comments written by one user.
"""

from __future__ import annotations

import logging

from core import pagination
from core.db import Database
from core.errors import BadRequest, NotFound
from core.lookups import check_exists, gather_reads

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_comments(
    db: Database,
    *,
    article_id: int | None = None,
    username: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
    limit: str | None = None,
    page: str | None = None,
) -> list[dict]:
    params = pagination.parse_page_params(
        sort_by,
        order,
        limit,
        page,
        sortable=pagination.COMMENT_SORT_COLUMNS,
    )

    total, _, _ = await gather_reads(
        repository.count_comments(db, username=username, article_id=article_id),
        check_exists(db, "articles", "article_id", article_id, "Article"),
        check_exists(db, "users", "username", username, "User"),
    )
    pagination.ensure_page_exists(params, total)

    return await repository.select_comments(db, params, username=username, article_id=article_id)


async def get_comment(db: Database, comment_id: int) -> dict:
    comment = await repository.select_comment_by_id(db, comment_id)
    if comment is None:
        raise NotFound("Comment")
    return comment


async def create_comment(db: Database, article_id: int, payload: schemas.CommentCreate) -> dict:
    # Checked first so an empty body is a 400 whatever else is wrong.
    if payload.body == "":
        raise BadRequest()

    await check_exists(db, "articles", "article_id", article_id, "Article")
    # An unknown username fails the author foreign key and surfaces as 400.
    comment = await repository.insert_comment(
        db,
        article_id=article_id,
        username=payload.username,
        body=payload.body,
    )
    logger.info("Created comment %d on article %d", comment["comment_id"], article_id)
    return comment


async def update_comment_votes(db: Database, comment_id: int, inc_votes: int) -> dict:
    comment = await repository.increment_votes(db, comment_id, inc_votes)
    if comment is None:
        raise NotFound("Comment")
    return comment


async def delete_comment(db: Database, comment_id: int) -> None:
    row = await repository.delete_comment(db, comment_id)
    if row is None:
        raise NotFound("Comment")
    logger.info("Deleted comment %d", comment_id)
