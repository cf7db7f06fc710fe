"""
Topic API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/api/topics")
async def get_topics(db: Database = Depends(get_db)) -> dict:
    topics = await service.list_topics(db)
    return {"topics": topics}


@router.post("/api/topics", status_code=status.HTTP_201_CREATED)
async def post_topic(payload: schemas.TopicCreate, db: Database = Depends(get_db)) -> dict:
    topic = await service.create_topic(db, payload)
    return {"topic": topic}


@router.delete("/api/topics/{slug}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_topic(slug: str, db: Database = Depends(get_db)) -> Response:
    await service.delete_topic(db, slug)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
