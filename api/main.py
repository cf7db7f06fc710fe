import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles import router as articles_router
from comments import router as comments_router
from core.db import Database
from core.errors import register_exception_handlers
from endpoints import router as endpoints_router
from topics import router as topics_router
from users import router as users_router

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO")
logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return DEFAULT_CORS_ORIGINS
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One DB pool per process, handed to routes through `get_db`.
    database = Database.from_env()
    await database.connect()
    app.state.db = database
    logger.info("News API started")
    try:
        yield
    finally:
        await database.close()
        logger.info("News API stopped")


app = FastAPI(title="News API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(endpoints_router.router, tags=["api"])
app.include_router(topics_router.router, tags=["topics"])
app.include_router(articles_router.router, tags=["articles"])
app.include_router(comments_router.router, tags=["comments"])
app.include_router(users_router.router, tags=["users"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
