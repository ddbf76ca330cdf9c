"""Validation helpers for LLM outputs."""
from typing import Any, List, Tuple

from article_insight.prompts.analysis_prompts import (
    ANALYSIS_FIELDS,
    COMPLEXITY_LEVELS,
    ENTITY_FIELDS,
    SENTIMENT_LABELS,
)

STRING_FIELDS = ("title", "summary", "category", "readingTime")
STRING_LIST_FIELDS = ("keyTakeaways", "tags")


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def validate_analysis_response(data: Any) -> Tuple[bool, str]:
    if not isinstance(data, dict):
        return False, "Root must be an object."
    missing = [name for name in ANALYSIS_FIELDS if name not in data]
    if missing:
        return False, f"Missing required fields: {', '.join(missing)}."
    for name in STRING_FIELDS:
        if not isinstance(data[name], str):
            return False, f'"{name}" must be a string.'
    for name in STRING_LIST_FIELDS:
        if not _is_string_list(data[name]):
            return False, f'"{name}" must be a list of strings.'
    if data["sentiment"] not in SENTIMENT_LABELS:
        return False, f'"sentiment" must be one of {", ".join(SENTIMENT_LABELS)}.'
    score = data["sentimentScore"]
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return False, '"sentimentScore" must be a number.'
    if not (0 <= score <= 100):
        return False, '"sentimentScore" must be in [0,100].'
    if data["complexity"] not in COMPLEXITY_LEVELS:
        return False, f'"complexity" must be one of {", ".join(COMPLEXITY_LEVELS)}.'
    entities = data["entities"]
    if not isinstance(entities, dict):
        return False, '"entities" must be an object.'
    for name in ENTITY_FIELDS:
        if name not in entities:
            return False, f'"entities.{name}" is required.'
        if not _is_string_list(entities[name]):
            return False, f'"entities.{name}" must be a list of strings.'
    return True, ""


def validate_mermaid_output(code: str) -> Tuple[bool, str]:
    if not isinstance(code, str):
        return False, "Mermaid output must be a string."
    lines = [line.rstrip() for line in code.splitlines() if line.strip()]
    if not lines:
        return False, "Mermaid output is empty."
    if lines[0].strip() != "mindmap":
        return False, 'First line must be "mindmap".'
    root_lines = [line for line in lines if line.startswith("  ") and line.strip().startswith("root((")]
    if len(root_lines) != 1:
        return False, 'Expected exactly one root node "root((title))".'

    branches: List[str] = [
        line.strip() for line in lines
        if line.startswith("    ") and not line.startswith("      ")
    ]
    if "Sentiment" not in branches:
        return False, 'Expected a "Sentiment" branch under root.'
    sentiment_index = lines.index("    Sentiment")
    following = lines[sentiment_index + 1:sentiment_index + 2]
    if not following or not following[0].startswith("      "):
        return False, 'Expected a sentiment label under "Sentiment".'
    if len(branches) < 2:
        return False, "Expected at least 2 branches under root."
    return True, ""
