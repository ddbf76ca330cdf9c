"""FastAPI application entry point"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from article_insight.api import analyses, history
from article_insight.api.deps import SESSION_HEADER
from article_insight.config import get_settings
from article_insight.services.session_service import SessionRegistry
from article_insight.utils.logger import setup_logging

APP_VERSION = "1.0.0"

settings = get_settings()
logger = logging.getLogger(__name__)

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle.

    Session histories live in memory only and are dropped on shutdown.
    """
    logger.info("Starting application...")
    if not settings.llm_api_key:
        logger.warning("LLM_API_KEY is not set; analysis requests will fail")
    logger.info(
        "Analysis models: text=%s search=%s",
        settings.llm_model,
        settings.llm_search_model,
    )

    yield

    logger.info("Shutting down application...")
    SessionRegistry.get_instance().clear()
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Article Insight",
    description="Structured article analysis: summary, sentiment, entities and tags",
    version=APP_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
    debug=settings.debug,
)

# The browser front-end may be served from any origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,  # must be False with "*"
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[SESSION_HEADER],
)


@app.get("/health")
async def health_check():
    """Health check"""
    return {
        "status": "healthy",
        "version": APP_VERSION,
        "models": {
            "text": settings.llm_model,
            "search": settings.llm_search_model,
        },
        "active_sessions": SessionRegistry.get_instance().count(),
    }


app.include_router(analyses.router, prefix="/api/v1/analyses", tags=["analyses"])
app.include_router(history.router, prefix="/api/v1/history", tags=["history"])
