"""
SQL composition for paginated, sortable, filterable collections.

Every user-supplied value is bound as a parameter, including LIMIT and
OFFSET. The sort column and direction cannot be bound, so they are taken
from lookup tables keyed by already-validated names, never from the
request text itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .pagination import PageParams


def quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def column(table: str, name: str) -> str:
    return f"{quote_ident(table)}.{quote_ident(name)}"


@dataclass(frozen=True)
class Listing:
    """
    How one resource collection is selected.

    `select` is the SELECT ... FROM ... [JOIN ...] text, `count_from` the
    FROM clause used for the total-count query. `sort_columns` maps each
    whitelisted `sort_by` value to its SQL expression and `filters` maps
    each filter name to the column it compares.
    """

    select: str
    count_from: str
    sort_columns: Mapping[str, str]
    tiebreak: str
    filters: Mapping[str, str] = field(default_factory=dict)
    group_by: str | None = None


def _where(listing: Listing, filter_by: tuple[str, Any] | None) -> tuple[str, list[Any]]:
    if filter_by is None:
        return "", []

    name, value = filter_by
    if name not in listing.filters:
        raise ValueError(f"Unknown filter: {name}")
    if value is None:
        return "", []
    return f"WHERE {listing.filters[name]} = $1", [value]


def build_page_query(
    listing: Listing,
    params: PageParams,
    *,
    filter_by: tuple[str, Any] | None = None,
) -> tuple[str, list[Any]]:
    """
    Return `(sql, args)` selecting one page of the collection.
    """
    where, args = _where(listing, filter_by)
    sort_expr = listing.sort_columns[params.sort_by]
    direction = params.direction

    parts = [listing.select]
    if where:
        parts.append(where)
    if listing.group_by:
        parts.append(f"GROUP BY {listing.group_by}")
    parts.append(f"ORDER BY {sort_expr} {direction}, {listing.tiebreak} {direction}")

    limit_placeholder = len(args) + 1
    parts.append(f"LIMIT ${limit_placeholder} OFFSET ${limit_placeholder + 1}")
    args.extend([params.limit, params.offset])
    return "\n".join(parts), args


def build_count_query(
    listing: Listing,
    *,
    filter_by: tuple[str, Any] | None = None,
) -> tuple[str, list[Any]]:
    """
    Return `(sql, args)` counting every matching row, ignoring pagination.
    """
    where, args = _where(listing, filter_by)
    parts = [f"SELECT COUNT(*)::INT AS total\n{listing.count_from}"]
    if where:
        parts.append(where)
    return "\n".join(parts), args
