import pytest

from articles.repository import ARTICLES
from comments.repository import COMMENTS
from core.pagination import PageParams
from core.query_builder import build_count_query, build_page_query, quote_ident


def test_quote_ident_escapes_embedded_quotes():
    assert quote_ident("votes") == '"votes"'
    assert quote_ident('we"ird') == '"we""ird"'


def test_page_query_binds_limit_and_offset():
    sql, args = build_page_query(ARTICLES, PageParams("votes", "desc", 10, 3))

    assert args == [10, 20]
    assert "WHERE" not in sql
    assert 'GROUP BY "a"."article_id"' in sql
    assert 'ORDER BY "a"."votes" DESC, "a"."article_id" DESC' in sql
    assert sql.rstrip().endswith("LIMIT $1 OFFSET $2")


def test_page_query_binds_the_filter_first():
    sql, args = build_page_query(ARTICLES, PageParams("title", "asc", 5, 1), filter_by=("topic", "cats"))

    assert args == ["cats", 5, 0]
    assert 'WHERE "a"."topic" = $1' in sql
    assert "LIMIT $2 OFFSET $3" in sql
    assert "cats" not in sql


def test_filter_with_no_value_is_ignored():
    sql, args = build_page_query(COMMENTS, PageParams("created_at", "desc", 10, 1), filter_by=("author", None))

    assert "WHERE" not in sql
    assert args == [10, 0]


def test_unknown_filter_is_a_programming_error():
    with pytest.raises(ValueError):
        build_page_query(COMMENTS, PageParams("created_at", "desc", 10, 1), filter_by=("topic", "cats"))


def test_comment_count_sorts_on_the_aggregate_alias():
    sql, _ = build_page_query(ARTICLES, PageParams("comment_count", "asc", 10, 1))
    assert 'ORDER BY "comment_count" ASC, "a"."article_id" ASC' in sql


def test_comments_have_no_group_by():
    sql, _ = build_page_query(COMMENTS, PageParams("votes", "desc", 10, 1), filter_by=("article_id", 3))

    assert "GROUP BY" not in sql
    assert 'WHERE "c"."article_id" = $1' in sql
    assert 'ORDER BY "c"."votes" DESC, "c"."comment_id" DESC' in sql


def test_count_query_ignores_pagination():
    sql, args = build_count_query(ARTICLES, filter_by=("topic", "mitch"))

    assert sql.startswith("SELECT COUNT(*)::INT AS total")
    assert "FROM articles a" in sql
    assert 'WHERE "a"."topic" = $1' in sql
    assert "LIMIT" not in sql
    assert args == ["mitch"]
