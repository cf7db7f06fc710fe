"""
Generic existence check and concurrent-read helper shared by every resource.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import Any

from .db import Database
from .errors import NotFound
from .query_builder import quote_ident


async def check_exists(db: Database, table: str, column: str, value: Any, resource: str) -> None:
    """
    Raise `NotFound(resource)` unless a row with `column = value` exists.

    A `None` value means the route has nothing to check, so it passes
    without touching the database.
    """
    if value is None:
        return None

    row = await db.fetch_one(
        f"""
        SELECT 1 AS ok
        FROM {quote_ident(table)}
        WHERE {quote_ident(column)} = $1
        LIMIT 1
        """,
        value,
    )
    if row is None:
        raise NotFound(resource)


async def gather_reads(*reads: Awaitable[Any]) -> list[Any]:
    """
    Run independent reads concurrently and return their results in order.

    If one fails, the others are cancelled and awaited before the error
    propagates, so no task is left running or unretrieved.
    """
    tasks = [asyncio.ensure_future(read) for read in reads]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
