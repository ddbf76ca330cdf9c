"""Article analyzer: one structured LLM request per article"""
import json
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from article_insight.analyzers.errors import SchemaError, ValidationError
from article_insight.analyzers.llm_client import LLMClient
from article_insight.analyzers.llm_validators import validate_analysis_response
from article_insight.config import get_settings
from article_insight.prompts.analysis_prompts import (
    ANALYSIS_JSON_SCHEMA,
    ANALYSIS_SYSTEM_PROMPT,
    PROMPT_VERSION,
    build_text_prompt,
    build_url_prompt,
)
from article_insight.schemas.analysis import AnalysisMode, AnalysisResult
from article_insight.utils.logger import get_logger

logger = get_logger(__name__)


class ArticleAnalyzer:
    """Analyze an article given by URL or as pasted text.

    Stateless: the same instance can serve concurrent calls. Only the
    structure of the response is validated, not its factual accuracy.
    """

    def __init__(self, llm: Optional[LLMClient] = None):
        settings = get_settings()
        self.llm = llm or LLMClient()
        self.source_name = settings.source_name
        self.source_domain = settings.source_domain
        self.max_content_chars = settings.max_content_chars
        self.max_url_chars = settings.max_url_chars
        self.temperature = settings.llm_temperature
        self.max_tokens = settings.llm_max_tokens

    def build_prompt(self, content: str, mode: AnalysisMode) -> str:
        if mode == AnalysisMode.URL:
            return build_url_prompt(content, self.source_name, self.source_domain)
        if len(content) > self.max_content_chars:
            content = content[:self.max_content_chars] + "..."
        return build_text_prompt(content, self.source_name)

    async def analyze(self, content: str, mode: AnalysisMode) -> AnalysisResult:
        if not isinstance(content, str) or not content.strip():
            raise ValidationError("Content must not be empty")
        content = content.strip()
        try:
            mode = AnalysisMode(mode)
        except ValueError:
            raise ValidationError(f"Unknown analysis mode: {mode}")
        if mode == AnalysisMode.URL and len(content) > self.max_url_chars:
            raise ValidationError(f"URL must be at most {self.max_url_chars} characters")

        prompt = self.build_prompt(content, mode)
        logger.info(
            "Analyzing article: mode=%s content_len=%s prompt=%s",
            mode.value,
            len(content),
            PROMPT_VERSION,
        )

        try:
            data = await self.llm.analyze_structured(
                prompt=prompt,
                system_prompt=ANALYSIS_SYSTEM_PROMPT,
                json_schema=ANALYSIS_JSON_SCHEMA,
                validator=validate_analysis_response,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                web_search=mode == AnalysisMode.URL,
            )
        except SchemaError as exc:
            logger.warning("Invalid analysis response: %s raw=%r", exc, (exc.raw or "")[:500])
            raise

        try:
            return AnalysisResult.model_validate(data)
        except PydanticValidationError as exc:
            raw = json.dumps(data)
            logger.warning("Invalid analysis response: %s raw=%r", exc, raw[:500])
            raise SchemaError(str(exc), raw=raw) from exc
