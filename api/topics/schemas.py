"""
Topic request schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class TopicCreate(BaseModel):
    # Missing fields are left for the database NOT NULL constraints to reject.
    slug: str | None = None
    description: str | None = None
