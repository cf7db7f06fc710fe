"""
Article request schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, StrictInt


class ArticleCreate(BaseModel):
    # Required columns are enforced by the database (NOT NULL / foreign keys).
    author: str | None = None
    title: str | None = None
    body: str | None = None
    topic: str | None = None
    article_img_url: str | None = None


class VotesUpdate(BaseModel):
    # StrictInt: JSON booleans and numeric strings are rejected.
    inc_votes: StrictInt
