"""제안 상세 가이드 테스트."""

import json
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from repo_pilot.analyzers.details import SuggestionDetailer, extract_sources
from repo_pilot.errors import InvalidRepositoryUrl, MalformedAiResponse
from repo_pilot.models import Complexity, Suggestion

DETAIL_PAYLOAD = {
    "howToStart": ["Clone the repo", "Run npm test"],
    "filesToEdit": ["lib/core/Axios.js"],
    "skillsNeeded": ["JavaScript", "HTTP"],
    "estimatedHours": 4,
}


def _grounded_response(text: str, chunks: list[Any] | None = None) -> SimpleNamespace:
    metadata = SimpleNamespace(grounding_chunks=chunks)
    return SimpleNamespace(
        text=text,
        candidates=[SimpleNamespace(grounding_metadata=metadata)],
    )


def _web_chunk(uri: str, title: str | None) -> SimpleNamespace:
    return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title))


@pytest.fixture
def suggestion() -> Suggestion:
    """테스트용 제안을 반환한다."""
    return Suggestion(
        title="Improve timeout errors",
        description="Distinguish connection and response timeouts.",
        complexity=Complexity.medium,
        tags=["error-handling"],
    )


def _detailer(response: SimpleNamespace) -> tuple[SuggestionDetailer, MagicMock]:
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=response)
    return SuggestionDetailer(client, model="test-model"), client


class TestExtractSources:
    """extract_sources 테스트."""

    def test_web_chunks(self) -> None:
        """web 항목이 있는 chunk만 출처로 만든다."""
        response = _grounded_response(
            "",
            [
                _web_chunk("https://axios-http.com/docs", "Axios Docs"),
                SimpleNamespace(web=None),
                _web_chunk("https://example.com", None),
            ],
        )
        sources = extract_sources(response)
        assert [(s.uri, s.title) for s in sources] == [
            ("https://axios-http.com/docs", "Axios Docs"),
            ("https://example.com", ""),
        ]

    def test_no_metadata(self) -> None:
        assert extract_sources(SimpleNamespace(text="", candidates=None)) == []
        assert extract_sources(_grounded_response("", None)) == []


class TestSuggestionDetailer:
    """SuggestionDetailer 테스트."""

    @pytest.mark.asyncio
    async def test_explain(self, suggestion: Suggestion) -> None:
        """설명 문장 사이의 JSON을 추출하고 출처를 붙인다."""
        text = f"Sure! Here you go:\n```json\n{json.dumps(DETAIL_PAYLOAD)}\n```"
        detailer, client = _detailer(
            _grounded_response(text, [_web_chunk("https://axios-http.com", "Axios")])
        )

        detail = await detailer.explain(suggestion, "https://github.com/axios/axios")

        assert detail.how_to_start == ["Clone the repo", "Run npm test"]
        assert detail.files_to_edit == ["lib/core/Axios.js"]
        assert detail.skills_needed == ["JavaScript", "HTTP"]
        assert detail.estimated_hours == 4
        assert detail.sources is not None
        assert detail.sources[0].uri == "https://axios-http.com"

        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert "axios/axios" in kwargs["contents"]
        assert suggestion.title in kwargs["contents"]
        config = kwargs["config"]
        assert config.tools and config.tools[0].google_search is not None
        assert config.response_schema is None

    @pytest.mark.asyncio
    async def test_no_sources(self, suggestion: Suggestion) -> None:
        """출처가 없으면 sources 필드를 생략한다."""
        detailer, _ = _detailer(_grounded_response(json.dumps(DETAIL_PAYLOAD), []))

        detail = await detailer.explain(suggestion, "https://github.com/axios/axios")

        assert detail.sources is None
        assert "sources" not in detail.model_dump(exclude_none=True)

    @pytest.mark.asyncio
    async def test_not_cached(self, suggestion: Suggestion) -> None:
        """같은 제안을 다시 요청하면 API를 다시 호출한다."""
        detailer, client = _detailer(_grounded_response(json.dumps(DETAIL_PAYLOAD)))

        await detailer.explain(suggestion, "https://github.com/axios/axios")
        await detailer.explain(suggestion, "https://github.com/axios/axios")

        assert client.aio.models.generate_content.await_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "text",
        [
            "I could not find anything.",
            '{"howToStart": ["a"]',
            '{"howToStart": "not a list", "filesToEdit": [], '
            '"skillsNeeded": [], "estimatedHours": 1}',
        ],
    )
    async def test_malformed(self, suggestion: Suggestion, text: str) -> None:
        """JSON이 없거나 형태가 다르면 MalformedAiResponse를 던진다."""
        detailer, _ = _detailer(_grounded_response(text))
        with pytest.raises(MalformedAiResponse):
            await detailer.explain(suggestion, "https://github.com/axios/axios")

    @pytest.mark.asyncio
    async def test_invalid_repo_url(self, suggestion: Suggestion) -> None:
        """잘못된 저장소 URL이면 API를 호출하지 않는다."""
        detailer, client = _detailer(_grounded_response(json.dumps(DETAIL_PAYLOAD)))
        with pytest.raises(InvalidRepositoryUrl):
            await detailer.explain(suggestion, "https://example.com/axios/axios")
        client.aio.models.generate_content.assert_not_called()
