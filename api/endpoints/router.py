"""
Static description of the API, served at `GET /api`.
"""

from __future__ import annotations

from fastapi import APIRouter

from core.pagination import ARTICLE_SORT_COLUMNS, COMMENT_SORT_COLUMNS

router = APIRouter()

_PAGE_QUERIES = ["order", "limit", "p"]

ENDPOINTS: dict[str, dict] = {
    "GET /api": {
        "description": "serves a json representation of all the available endpoints of the api",
    },
    "GET /api/topics": {
        "description": "serves an array of all topics",
        "queries": [],
        "exampleResponse": {
            "topics": [{"slug": "football", "description": "Footie!"}],
        },
    },
    "POST /api/topics": {
        "description": "adds a topic and serves it",
        "exampleRequest": {"slug": "cooking", "description": "Hey good looking, what you got cooking?"},
        "exampleResponse": {
            "topic": {"slug": "cooking", "description": "Hey good looking, what you got cooking?"},
        },
    },
    "DELETE /api/topics/:slug": {
        "description": "deletes a topic and every article filed under it",
    },
    "GET /api/articles": {
        "description": "serves a page of articles with the total number of matching articles",
        "queries": ["topic", "sort_by", *_PAGE_QUERIES],
        "sortBy": list(ARTICLE_SORT_COLUMNS),
        "exampleResponse": {
            "articles": [
                {
                    "author": "weegembump",
                    "title": "Seafood substitutions are increasing",
                    "article_id": 33,
                    "topic": "cooking",
                    "created_at": "2018-05-30T15:59:13.341Z",
                    "votes": 0,
                    "article_img_url": "https://images.pexels.com/photos/97050/pexels-photo-97050.jpeg?w=700&h=700",
                    "comment_count": 6,
                }
            ],
            "article_count": 1,
        },
    },
    "POST /api/articles": {
        "description": "adds an article and serves it; article_img_url is optional",
        "exampleRequest": {
            "author": "weegembump",
            "title": "Seafood substitutions are increasing",
            "body": "Text from the article..",
            "topic": "cooking",
        },
    },
    "GET /api/articles/:article_id": {
        "description": "serves the article with its body and comment_count",
    },
    "PATCH /api/articles/:article_id": {
        "description": "adds inc_votes (may be negative) to the article's votes and serves the article",
        "exampleRequest": {"inc_votes": 1},
    },
    "DELETE /api/articles/:article_id": {
        "description": "deletes an article and its comments",
    },
    "GET /api/articles/:article_id/comments": {
        "description": "serves a page of the comments on an article, newest first by default",
        "queries": ["sort_by", *_PAGE_QUERIES],
        "sortBy": list(COMMENT_SORT_COLUMNS),
    },
    "POST /api/articles/:article_id/comments": {
        "description": "adds a comment to an article and serves it",
        "exampleRequest": {"username": "butter_bridge", "body": "What a read."},
    },
    "GET /api/comments": {
        "description": "serves a page of all comments",
        "queries": ["sort_by", *_PAGE_QUERIES],
        "sortBy": list(COMMENT_SORT_COLUMNS),
    },
    "GET /api/comments/:comment_id": {
        "description": "serves a single comment",
    },
    "PATCH /api/comments/:comment_id": {
        "description": "adds inc_votes (may be negative) to the comment's votes and serves the comment",
        "exampleRequest": {"inc_votes": -1},
    },
    "DELETE /api/comments/:comment_id": {
        "description": "deletes a comment",
    },
    "GET /api/users": {
        "description": "serves an array of all users with their comment_count",
    },
    "GET /api/users/:username": {
        "description": "serves a user with their comment_count",
    },
    "DELETE /api/users/:username": {
        "description": "deletes a user",
    },
    "GET /api/users/:username/comments": {
        "description": "serves a page of the comments written by a user",
        "queries": ["sort_by", *_PAGE_QUERIES],
        "sortBy": list(COMMENT_SORT_COLUMNS),
    },
}


@router.get("/api")
def get_endpoints() -> dict:
    return {"endpoints": ENDPOINTS}
