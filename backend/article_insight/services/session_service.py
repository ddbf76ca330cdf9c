"""Per-session analysis state"""
from collections import OrderedDict
from contextlib import contextmanager
from typing import Iterator, Optional
from uuid import uuid4

from article_insight.config import get_settings
from article_insight.services.history import HistoryCache
from article_insight.utils.logger import get_logger

logger = get_logger(__name__)


class SessionBusyError(Exception):
    """An analysis is already in flight for this session."""


class AnalysisSession:
    """History plus the single in-flight analysis slot of one client session"""

    def __init__(self, session_id: str, capacity: int):
        self.session_id = session_id
        self.history = HistoryCache(capacity)
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @contextmanager
    def in_flight_guard(self) -> Iterator[None]:
        # Check-and-set without an await in between; safe on one event loop
        if self._in_flight:
            raise SessionBusyError(f"An analysis is already running for session {self.session_id}")
        self._in_flight = True
        try:
            yield
        finally:
            self._in_flight = False


class SessionRegistry:
    """
    Session registry - singleton

    Sessions are created by a submission and kept in least-recently-used
    order; past max_sessions the oldest idle session is dropped.
    """

    _instance: Optional["SessionRegistry"] = None

    def __init__(self, capacity: Optional[int] = None, max_sessions: Optional[int] = None):
        settings = get_settings()
        self.capacity = capacity or settings.history_capacity
        self.max_sessions = max_sessions or settings.max_sessions
        self._sessions: "OrderedDict[str, AnalysisSession]" = OrderedDict()

    @classmethod
    def get_instance(cls) -> "SessionRegistry":
        """Return the process-wide registry"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get(self, session_id: Optional[str]) -> Optional[AnalysisSession]:
        session_id = (session_id or "").strip()
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def get_or_create(self, session_id: Optional[str] = None) -> AnalysisSession:
        """Return the session, creating it (with a fresh id when none is given)."""
        session = self.get(session_id)
        if session is not None:
            return session

        session_id = (session_id or "").strip() or uuid4().hex
        session = AnalysisSession(session_id, self.capacity)
        self._sessions[session_id] = session
        logger.info("Created session %s", session_id)
        self._evict(keep=session_id)
        return session

    def _evict(self, keep: str) -> None:
        # A session with an analysis in flight is never dropped
        for session_id in list(self._sessions):
            if len(self._sessions) <= self.max_sessions:
                break
            if session_id == keep or self._sessions[session_id].in_flight:
                continue
            del self._sessions[session_id]
            logger.info("Evicted idle session %s", session_id)

    def count(self) -> int:
        return len(self._sessions)

    def clear(self) -> None:
        self._sessions.clear()
