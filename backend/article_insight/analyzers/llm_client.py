"""LLM client wrapper"""
import asyncio
import json
from typing import Any, Callable, Dict, List, Optional, Tuple

from openai import OpenAI, OpenAIError

from article_insight.analyzers.errors import RequestError, SchemaError
from article_insight.config import get_settings
from article_insight.utils.logger import get_logger

logger = get_logger(__name__)


class LLMClient:
    """OpenAI-compatible chat completions client.

    Makes exactly one attempt per call: the SDK's own retries are disabled.
    """

    def __init__(self, client: Optional[Any] = None):
        settings = get_settings()
        self.api_key = settings.llm_api_key
        self.base_url = settings.llm_api_base_url
        self.model = settings.llm_model
        self.search_model = settings.llm_search_model
        self.timeout = settings.llm_timeout_seconds
        self.client = client or OpenAI(
            api_key=self.api_key,
            base_url=self.base_url or None,
            timeout=self.timeout,
            max_retries=0,
        )

    def _chat_sync(self, payload: Dict[str, Any]) -> str:
        response = self.client.chat.completions.create(**payload)
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    def _safe_json_loads(self, raw: str) -> Tuple[Optional[Dict[str, Any]], str]:
        try:
            return json.loads(raw), ""
        except (TypeError, ValueError) as exc:
            return None, f"JSON parse error: {type(exc).__name__}: {exc}"

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.7,
        max_tokens: int = 2000,
        json_schema: Optional[Dict[str, Any]] = None,
        web_search: bool = False,
    ) -> str:
        if not self.api_key:
            raise RequestError("LLM API key is not configured")

        payload: Dict[str, Any] = {
            "model": self.search_model if web_search else self.model,
            "messages": messages,
            "max_tokens": max_tokens,
        }

        # Search models reject sampling parameters
        if web_search:
            payload["web_search_options"] = {}
        else:
            payload["temperature"] = temperature

        if json_schema is not None:
            payload["response_format"] = {"type": "json_schema", "json_schema": json_schema}

        try:
            return await asyncio.to_thread(self._chat_sync, payload)
        except OpenAIError as exc:
            logger.warning("LLM request failed: model=%s error=%s", payload["model"], exc)
            raise RequestError(f"{type(exc).__name__}: {exc}") from exc

    async def analyze_structured(
        self,
        prompt: str,
        system_prompt: str,
        json_schema: Dict[str, Any],
        validator: Callable[[Any], Tuple[bool, str]],
        temperature: float = 0.7,
        max_tokens: int = 2000,
        web_search: bool = False,
    ) -> Dict[str, Any]:
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ]
        response = await self.chat(
            messages,
            temperature=temperature,
            max_tokens=max_tokens,
            json_schema=json_schema,
            web_search=web_search,
        )
        data, error = self._safe_json_loads(response.strip())
        if data is None:
            raise SchemaError(error, raw=response)
        valid, verror = validator(data)
        if not valid:
            raise SchemaError(verror, raw=response)
        return data
