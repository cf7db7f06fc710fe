"""
Article API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/api/articles")
async def get_articles(
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
    # Kept as strings: the pagination validator owns the numeric checks.
    limit: str | None = None,
    page: str | None = Query(default=None, alias="p"),
    db: Database = Depends(get_db),
) -> dict:
    return await service.list_articles(
        db,
        topic=topic,
        sort_by=sort_by,
        order=order,
        limit=limit,
        page=page,
    )


@router.post("/api/articles", status_code=status.HTTP_201_CREATED)
async def post_article(payload: schemas.ArticleCreate, db: Database = Depends(get_db)) -> dict:
    article = await service.create_article(db, payload)
    return {"article": article}


@router.get("/api/articles/{article_id}")
async def get_article(article_id: int, db: Database = Depends(get_db)) -> dict:
    article = await service.get_article(db, article_id)
    return {"article": article}


@router.patch("/api/articles/{article_id}")
async def patch_article(
    article_id: int,
    payload: schemas.VotesUpdate,
    db: Database = Depends(get_db),
) -> dict:
    article = await service.update_article_votes(db, article_id, payload.inc_votes)
    return {"article": article}


@router.delete("/api/articles/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(article_id: int, db: Database = Depends(get_db)) -> Response:
    await service.delete_article(db, article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
