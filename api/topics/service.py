"""
Topic business logic.
"""

from __future__ import annotations

import logging

from core.db import Database
from core.errors import NotFound

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_topics(db: Database) -> list[dict]:
    return await repository.list_topics(db)


async def create_topic(db: Database, payload: schemas.TopicCreate) -> dict:
    topic = await repository.insert_topic(db, slug=payload.slug, description=payload.description)
    logger.info("Created topic %s", topic["slug"])
    return topic


async def delete_topic(db: Database, slug: str) -> None:
    row = await repository.delete_topic(db, slug)
    if row is None:
        raise NotFound("Topic")
    logger.info("Deleted topic %s", slug)
