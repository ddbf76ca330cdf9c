"""Mermaid mindmap generator"""
from typing import Iterable, List

from article_insight.schemas.analysis import AnalysisResult


class MermaidGenerator:
    """Render an analysis result as a Mermaid mindmap"""

    def build_safe_mindmap(self, result: AnalysisResult) -> str:
        title = self._sanitize_label(result.title, max_len=40) or "Article"
        lines = [
            "mindmap",
            f"  root(({title}))",
            "    Sentiment",
            f"      {result.sentiment.value}",
            f"      {round(result.sentiment_score)} percent positive",
        ]
        lines.extend(self._branch("Category", [result.category], limit=1))
        lines.extend(self._branch("Key Takeaways", result.key_takeaways, limit=5))
        lines.extend(self._branch("People", result.entities.people))
        lines.extend(self._branch("Locations", result.entities.locations))
        lines.extend(self._branch("Organizations", result.entities.organizations))
        lines.extend(self._branch("Tags", result.tags, limit=6))
        return "\n".join(lines)

    def _branch(self, title: str, items: Iterable[str], limit: int = 4) -> List[str]:
        labels = [self._sanitize_label(item) for item in items]
        labels = [label for label in labels if label][:limit]
        if not labels:
            return []
        return [f"    {title}"] + [f"      {label}" for label in labels]

    def _sanitize_label(self, label: str, max_len: int = 30) -> str:
        if not isinstance(label, str):
            return ""
        cleaned = label.replace("\n", " ").replace("\r", " ").strip()
        for ch in ['"', "'", "(", ")", "[", "]", "{", "}", ":", ";", "|", "#"]:
            cleaned = cleaned.replace(ch, " ")
        cleaned = " ".join(cleaned.split())
        return cleaned[:max_len].strip()
