import asyncio
import json

import openai
import pytest

from article_insight.analyzers.article import ArticleAnalyzer
from article_insight.analyzers.errors import RequestError, SchemaError, ValidationError
from article_insight.analyzers.llm_client import LLMClient
from article_insight.schemas import AnalysisMode, AnalysisResult
from article_insight.services.analysis_service import PASTED_TEXT_LABEL, AnalysisService
from article_insight.services.session_service import (
    AnalysisSession,
    SessionBusyError,
    SessionRegistry,
)

from conftest import FakeOpenAI


def _service(fake: FakeOpenAI) -> AnalysisService:
    return AnalysisService(ArticleAnalyzer(llm=LLMClient(client=fake)))


def test_url_submission_is_recorded_with_its_address(fake_openai):
    session = AnalysisSession("s1", capacity=10)
    entry = asyncio.run(_service(fake_openai).submit(session, " https://mpelembe.net/a ", AnalysisMode.URL))

    assert entry.label == "https://mpelembe.net/a"
    assert entry.created_at.tzinfo is not None
    assert session.history.list() == (entry,)
    assert not session.in_flight


def test_text_submission_is_labelled_pasted_text(fake_openai):
    session = AnalysisSession("s1", capacity=10)
    entry = asyncio.run(_service(fake_openai).submit(session, "Some article body", AnalysisMode.TEXT))
    assert entry.label == PASTED_TEXT_LABEL


def test_entry_ids_are_unique(fake_openai):
    session = AnalysisSession("s1", capacity=10)
    service = _service(fake_openai)
    for _ in range(5):
        asyncio.run(service.submit(session, "text", AnalysisMode.TEXT))
    ids = [entry.id for entry in session.history.list()]
    assert len(set(ids)) == 5


def test_eleven_submissions_keep_the_latest_ten(fake_openai):
    session = AnalysisSession("s1", capacity=10)
    service = _service(fake_openai)
    entries = [
        asyncio.run(service.submit(session, f"https://example.com/{i}", AnalysisMode.URL))
        for i in range(11)
    ]

    listed = session.history.list()
    assert len(listed) == 10
    assert listed[0] is entries[10]
    assert entries[0].id not in {entry.id for entry in listed}
    assert len(fake_openai.calls) == 11


@pytest.mark.parametrize(
    "fake, content, error",
    [
        (FakeOpenAI(content=json.dumps({"title": "X"})), "https://example.com/a", SchemaError),
        (FakeOpenAI(content="not json"), "https://example.com/a", SchemaError),
        (FakeOpenAI(error=openai.OpenAIError("down")), "https://example.com/a", RequestError),
        (FakeOpenAI(content="{}"), "   ", ValidationError),
    ],
)
def test_failures_leave_history_untouched(fake, content, error):
    session = AnalysisSession("s1", capacity=10)
    with pytest.raises(error):
        asyncio.run(_service(fake).submit(session, content, AnalysisMode.URL))
    assert len(session.history) == 0
    assert not session.in_flight


class _BlockingAnalyzer:
    def __init__(self, result: AnalysisResult):
        self.result = result
        self.release = None
        self.calls = 0

    async def analyze(self, content, mode):
        self.calls += 1
        await self.release.wait()
        return self.result


def test_second_submission_while_in_flight_is_refused(sample_analysis):
    analyzer = _BlockingAnalyzer(AnalysisResult.model_validate(sample_analysis))
    service = AnalysisService(analyzer)
    session = AnalysisSession("s1", capacity=10)

    async def scenario():
        analyzer.release = asyncio.Event()
        first = asyncio.create_task(service.submit(session, "https://example.com/a", AnalysisMode.URL))
        await asyncio.sleep(0)
        assert session.in_flight
        with pytest.raises(SessionBusyError):
            await service.submit(session, "https://example.com/b", AnalysisMode.URL)
        analyzer.release.set()
        return await first

    entry = asyncio.run(scenario())
    assert analyzer.calls == 1
    assert session.history.list() == (entry,)
    assert not session.in_flight


def test_registry_creates_sessions_on_demand():
    registry = SessionRegistry(capacity=3)
    assert registry.get("abc") is None
    assert registry.get(None) is None
    assert registry.count() == 0

    session = registry.get_or_create("abc")
    assert session.history.capacity == 3
    assert registry.get("abc") is session
    assert registry.get_or_create(" abc ") is session
    assert registry.count() == 1

    registry.clear()
    assert registry.count() == 0


def test_sessions_without_an_id_get_fresh_ids():
    registry = SessionRegistry()
    first = registry.get_or_create(None)
    second = registry.get_or_create("  ")

    assert first is not second
    assert first.session_id != second.session_id
    assert registry.get(first.session_id) is first


def test_registry_stays_within_max_sessions():
    registry = SessionRegistry(max_sessions=5)
    for i in range(2000):
        registry.get_or_create(f"client-{i}")
        assert registry.count() <= 5

    assert registry.get("client-0") is None
    assert registry.get("client-1999") is not None


def test_least_recently_used_session_is_evicted_first():
    registry = SessionRegistry(max_sessions=2)
    first = registry.get_or_create("first")
    registry.get_or_create("second")
    assert registry.get("first") is first

    registry.get_or_create("third")
    assert registry.get("second") is None
    assert registry.get("first") is first
    assert registry.get("third") is not None


def test_busy_sessions_are_not_evicted():
    registry = SessionRegistry(max_sessions=1)
    busy = registry.get_or_create("busy")
    with busy.in_flight_guard():
        registry.get_or_create("other")
        assert registry.get("busy") is busy

    registry.get_or_create("later")
    assert registry.count() == 1
    assert registry.get("later") is not None
