"""Article analysis"""
from article_insight.analyzers.article import ArticleAnalyzer
from article_insight.analyzers.errors import (
    AnalysisError,
    RequestError,
    SchemaError,
    ValidationError,
)
from article_insight.analyzers.llm_client import LLMClient
from article_insight.analyzers.mermaid import MermaidGenerator

__all__ = [
    "AnalysisError",
    "ArticleAnalyzer",
    "LLMClient",
    "MermaidGenerator",
    "RequestError",
    "SchemaError",
    "ValidationError",
]
