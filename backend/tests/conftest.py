"""Shared fixtures. Settings are read from the environment on first use."""
import copy
import json
import os
import tempfile
from types import SimpleNamespace

import pytest

os.environ.setdefault("LLM_API_KEY", "test-key")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="article-insight-logs-"))


SAMPLE_ANALYSIS = {
    "title": "Lusaka schools adopt solar power",
    "summary": (
        "Several Lusaka schools have installed solar panels. "
        "The project is funded by a regional education trust. "
        "Teachers report fewer disruptions during load shedding."
    ),
    "keyTakeaways": [
        "Twelve schools now run on solar power",
        "Funding came from a regional trust",
        "Load shedding no longer interrupts lessons",
    ],
    "sentiment": "Positive",
    "sentimentScore": 78,
    "category": "Education",
    "tags": ["solar", "schools", "Zambia"],
    "readingTime": "4 min",
    "entities": {
        "people": ["Mary Banda"],
        "locations": ["Lusaka"],
        "organizations": ["Zambia Education Trust"],
    },
    "complexity": "Simple",
}


class FakeOpenAI:
    """Stands in for openai.OpenAI; records every chat.completions.create call."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **payload):
        self.calls.append(payload)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def sample_analysis():
    return copy.deepcopy(SAMPLE_ANALYSIS)


@pytest.fixture
def fake_openai():
    return FakeOpenAI(content=json.dumps(SAMPLE_ANALYSIS))
