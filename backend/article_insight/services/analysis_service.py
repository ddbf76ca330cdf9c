"""Analysis submission flow"""
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from article_insight.analyzers.article import ArticleAnalyzer
from article_insight.schemas.analysis import AnalysisMode, HistoryEntry
from article_insight.services.session_service import AnalysisSession
from article_insight.utils.logger import get_logger

logger = get_logger(__name__)

PASTED_TEXT_LABEL = "Pasted Text"


class AnalysisService:
    """Run one analysis for a session and record it on success.

    A failed analysis raises and leaves the session history untouched.
    """

    def __init__(self, analyzer: Optional[ArticleAnalyzer] = None):
        self.analyzer = analyzer or ArticleAnalyzer()

    async def submit(self, session: AnalysisSession, content: str, mode: AnalysisMode) -> HistoryEntry:
        with session.in_flight_guard():
            result = await self.analyzer.analyze(content, mode)

        entry = HistoryEntry(
            id=uuid4().hex,
            label=content.strip() if mode == AnalysisMode.URL else PASTED_TEXT_LABEL,
            created_at=datetime.now(timezone.utc),
            result=result,
        )
        session.history.record(entry)
        logger.info(
            "Recorded analysis %s for session %s (%s entries)",
            entry.id,
            session.session_id,
            len(session.history),
        )
        return entry
