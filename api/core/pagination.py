"""
Validation of the shared collection query parameters.

`sort_by`, `order`, `limit` and `p` arrive as raw strings. They are checked
here, before any SQL is built, and turned into a `PageParams`.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from .errors import BadRequest, PageNotFound

ARTICLE_SORT_COLUMNS = (
    "author",
    "title",
    "article_id",
    "topic",
    "created_at",
    "votes",
    "article_img_url",
    "comment_count",
)

COMMENT_SORT_COLUMNS = (
    "comment_id",
    "votes",
    "created_at",
    "author",
    "body",
    "article_id",
)

ORDER_DIRECTIONS = {"asc": "ASC", "desc": "DESC"}

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class PageParams:
    sort_by: str
    order: str
    limit: int
    page: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def direction(self) -> str:
        return ORDER_DIRECTIONS[self.order]


def _positive_int(value: str | int | None, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        raise BadRequest()
    if isinstance(value, str):
        # ASCII digits only: rejects "45;SELECT * FROM articles;", "1_0", " 5 ".
        if not (value.isascii() and value.isdigit()):
            raise BadRequest()
    elif not isinstance(value, int):
        raise BadRequest()
    number = int(value)
    if number <= 0:
        raise BadRequest()
    return number


def ensure_page_exists(params: PageParams, total: int) -> None:
    if params.offset > total:
        raise PageNotFound()


def parse_page_params(
    sort_by: str | None,
    order: str | None,
    limit: str | int | None,
    page: str | int | None,
    *,
    sortable: Collection[str],
    default_sort: str = "created_at",
    default_order: str = "desc",
    default_limit: int = DEFAULT_LIMIT,
    total: int | None = None,
) -> PageParams:
    """
    Validate collection query parameters.

    `None` means the parameter was not supplied and its default applies.
    Raises `BadRequest` for anything outside the whitelist or not a positive
    integer, and `PageNotFound` when `total` is given and the page starts
    past it.
    """
    sort_by = default_sort if sort_by is None else sort_by
    if sort_by not in sortable:
        raise BadRequest()

    order = (default_order if order is None else order).lower()
    if order not in ORDER_DIRECTIONS:
        raise BadRequest()

    params = PageParams(
        sort_by=sort_by,
        order=order,
        limit=_positive_int(limit, default_limit),
        page=_positive_int(page, 1),
    )
    if total is not None:
        ensure_page_exists(params, total)
    return params
