"""
User API endpoints.

`/api/users/{username}/comments` lives with the other comment collections
in `comments/router.py`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database, get_db

from . import service

router = APIRouter()


@router.get("/api/users")
async def get_users(db: Database = Depends(get_db)) -> dict:
    users = await service.list_users(db)
    return {"users": users}


@router.get("/api/users/{username}")
async def get_user(username: str, db: Database = Depends(get_db)) -> dict:
    user = await service.get_user(db, username)
    return {"user": user}


@router.delete("/api/users/{username}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(username: str, db: Database = Depends(get_db)) -> Response:
    await service.delete_user(db, username)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
