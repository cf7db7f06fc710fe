"""
User business logic.
"""

from __future__ import annotations

import logging

from core.db import Database
from core.errors import NotFound

from . import repository

logger = logging.getLogger(__name__)


async def list_users(db: Database) -> list[dict]:
    return await repository.list_users(db)


async def get_user(db: Database, username: str) -> dict:
    user = await repository.select_user_by_username(db, username)
    if user is None:
        raise NotFound("User")
    return user


async def delete_user(db: Database, username: str) -> None:
    row = await repository.delete_user(db, username)
    if row is None:
        raise NotFound("User")
    logger.info("Deleted user %s", username)
