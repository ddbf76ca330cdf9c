"""Analysis result and history models"""
from datetime import datetime
from enum import Enum
from typing import List, Tuple

from pydantic import AliasGenerator, BaseModel, Field
from pydantic.alias_generators import to_camel


class AnalysisMode(str, Enum):
    """Input discriminator: a URL to fetch, or literal article text"""
    URL = "url"
    TEXT = "text"


class Sentiment(str, Enum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class Complexity(str, Enum):
    SIMPLE = "Simple"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class Entities(BaseModel):
    """Named entities mentioned in the article"""
    people: Tuple[str, ...] = ()
    locations: Tuple[str, ...] = ()
    organizations: Tuple[str, ...] = ()

    class Config:
        frozen = True


class AnalysisResult(BaseModel):
    """Structured analysis of one article.

    Parsed from the camelCase keys declared in the response schema,
    serialized with the snake_case field names.
    """
    title: str
    summary: str
    key_takeaways: Tuple[str, ...]
    sentiment: Sentiment
    sentiment_score: float = Field(..., ge=0, le=100)
    category: str
    tags: Tuple[str, ...]
    reading_time: str
    entities: Entities
    complexity: Complexity

    class Config:
        frozen = True
        populate_by_name = True
        alias_generator = AliasGenerator(validation_alias=to_camel)


class HistoryEntry(BaseModel):
    """A successful analysis kept in the session history"""
    id: str
    label: str
    created_at: datetime
    result: AnalysisResult

    class Config:
        frozen = True


class AnalyzeRequest(BaseModel):
    """Submit an article for analysis"""
    content: str = Field(..., max_length=200000, description="Article URL or pasted article text")
    mode: AnalysisMode = Field(default=AnalysisMode.URL, description="How to interpret content")

    class Config:
        json_schema_extra = {
            "example": {
                "content": "https://mpelembe.net/articles/some-news-piece",
                "mode": "url",
            }
        }


class HistoryListResponse(BaseModel):
    """Session history, most recent first"""
    total: int
    capacity: int
    data: List[HistoryEntry]


class MindmapResponse(BaseModel):
    entry_id: str
    mermaid_code: str
