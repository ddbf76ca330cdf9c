"""API request/response models"""
from article_insight.schemas.analysis import (
    AnalysisMode,
    AnalysisResult,
    AnalyzeRequest,
    Complexity,
    Entities,
    HistoryEntry,
    HistoryListResponse,
    MindmapResponse,
    Sentiment,
)

__all__ = [
    "AnalysisMode",
    "AnalysisResult",
    "AnalyzeRequest",
    "Complexity",
    "Entities",
    "HistoryEntry",
    "HistoryListResponse",
    "MindmapResponse",
    "Sentiment",
]
