"""API dependencies."""
from functools import lru_cache
from typing import Optional

from fastapi import Header, Response

from article_insight.services.analysis_service import AnalysisService
from article_insight.services.session_service import AnalysisSession, SessionRegistry

SESSION_HEADER = "X-Session-ID"


def get_session(
    response: Response,
    x_session_id: str | None = Header(default=None, max_length=128),
) -> AnalysisSession:
    """Resolve or start the caller's session; the id is echoed in X-Session-ID."""
    session = SessionRegistry.get_instance().get_or_create(x_session_id)
    response.headers[SESSION_HEADER] = session.session_id
    return session


def find_session(
    x_session_id: str | None = Header(default=None, max_length=128),
) -> Optional[AnalysisSession]:
    """Look up the caller's session without creating one."""
    return SessionRegistry.get_instance().get(x_session_id)


@lru_cache
def get_analysis_service() -> AnalysisService:
    return AnalysisService()
