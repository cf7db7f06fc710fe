"""
Comment API endpoints, including the nested article/user collections.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/api/comments")
async def get_comments(
    sort_by: str | None = None,
    order: str | None = None,
    limit: str | None = None,
    page: str | None = Query(default=None, alias="p"),
    db: Database = Depends(get_db),
) -> dict:
    comments = await service.list_comments(db, sort_by=sort_by, order=order, limit=limit, page=page)
    return {"comments": comments}


@router.get("/api/articles/{article_id}/comments")
async def get_article_comments(
    article_id: int,
    sort_by: str | None = None,
    order: str | None = None,
    limit: str | None = None,
    page: str | None = Query(default=None, alias="p"),
    db: Database = Depends(get_db),
) -> dict:
    comments = await service.list_comments(
        db,
        article_id=article_id,
        sort_by=sort_by,
        order=order,
        limit=limit,
        page=page,
    )
    return {"comments": comments}


@router.post("/api/articles/{article_id}/comments", status_code=status.HTTP_201_CREATED)
async def post_article_comment(
    article_id: int,
    payload: schemas.CommentCreate,
    db: Database = Depends(get_db),
) -> dict:
    comment = await service.create_comment(db, article_id, payload)
    return {"comment": comment}


@router.get("/api/users/{username}/comments")
async def get_user_comments(
    username: str,
    sort_by: str | None = None,
    order: str | None = None,
    limit: str | None = None,
    page: str | None = Query(default=None, alias="p"),
    db: Database = Depends(get_db),
) -> dict:
    comments = await service.list_comments(
        db,
        username=username,
        sort_by=sort_by,
        order=order,
        limit=limit,
        page=page,
    )
    return {"comments": comments}


@router.get("/api/comments/{comment_id}")
async def get_comment(comment_id: int, db: Database = Depends(get_db)) -> dict:
    comment = await service.get_comment(db, comment_id)
    return {"comment": comment}


@router.patch("/api/comments/{comment_id}")
async def patch_comment(
    comment_id: int,
    payload: schemas.VotesUpdate,
    db: Database = Depends(get_db),
) -> dict:
    comment = await service.update_comment_votes(db, comment_id, payload.inc_votes)
    return {"comment": comment}


@router.delete("/api/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: int, db: Database = Depends(get_db)) -> Response:
    await service.delete_comment(db, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
