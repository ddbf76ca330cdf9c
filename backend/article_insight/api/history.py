"""History API"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from article_insight.analyzers.mermaid import MermaidGenerator
from article_insight.api.deps import find_session
from article_insight.config import get_settings
from article_insight.schemas import HistoryEntry, HistoryListResponse, MindmapResponse
from article_insight.services.session_service import AnalysisSession

router = APIRouter()


def _get_entry(session: Optional[AnalysisSession], entry_id: str) -> HistoryEntry:
    entry = session.history.get(entry_id) if session is not None else None
    if entry is None:
        raise HTTPException(status_code=404, detail="History entry not found")
    return entry


@router.get("", response_model=HistoryListResponse)
async def list_history(session: Optional[AnalysisSession] = Depends(find_session)):
    """Recent analyses, most recent first"""
    if session is None:
        return HistoryListResponse(total=0, capacity=get_settings().history_capacity, data=[])
    entries = session.history.list()
    return HistoryListResponse(
        total=len(entries),
        capacity=session.history.capacity,
        data=list(entries),
    )


@router.delete("")
async def clear_history(session: Optional[AnalysisSession] = Depends(find_session)):
    if session is not None:
        session.history.clear()
    return {"status": "cleared"}


@router.get("/{entry_id}", response_model=HistoryEntry)
async def get_history_entry(entry_id: str, session: Optional[AnalysisSession] = Depends(find_session)):
    """Fetch one past analysis for redisplay"""
    return _get_entry(session, entry_id)


@router.get("/{entry_id}/mindmap", response_model=MindmapResponse)
async def get_history_mindmap(entry_id: str, session: Optional[AnalysisSession] = Depends(find_session)):
    entry = _get_entry(session, entry_id)
    return MindmapResponse(
        entry_id=entry.id,
        mermaid_code=MermaidGenerator().build_safe_mindmap(entry.result),
    )
