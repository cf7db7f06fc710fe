"""
Comment request schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, StrictInt


class CommentCreate(BaseModel):
    username: str | None = None
    body: str | None = None


class VotesUpdate(BaseModel):
    # StrictInt: JSON booleans and numeric strings are rejected.
    inc_votes: StrictInt
