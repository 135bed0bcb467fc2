"""제안 상세 가이드 생성 모듈."""

import logging
from typing import Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import ValidationError

from repo_pilot.config import settings
from repo_pilot.errors import AnalysisError, MalformedAiResponse
from repo_pilot.models import GroundingSource, Suggestion, SuggestionDetail
from repo_pilot.sources import parse_repo_url
from repo_pilot.utils.json_text import extract_json_object

logger = logging.getLogger(__name__)


def extract_sources(response: Any) -> list[GroundingSource]:
    """응답의 grounding metadata에서 웹 출처를 추출한다."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []

    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    sources = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        if web is None or not getattr(web, "uri", None):
            continue
        sources.append(GroundingSource(uri=web.uri, title=web.title or ""))
    return sources


class SuggestionDetailer:
    """Google 검색 그라운딩으로 제안별 상세 가이드를 만든다.

    검색 그라운딩과 구조화 출력(response_schema)은 같이 쓸 수 없으므로
    응답 텍스트에서 JSON 객체를 직접 추출한다. 결과는 캐시하지 않는다.
    """

    def __init__(self, client: genai.Client, model: str | None = None) -> None:
        """
        Args:
            client: Gemini 클라이언트
            model: 모델 이름. None이면 설정값 사용.
        """
        self.client = client
        self.model = model or settings.gemini_model

    def _build_prompt(self, suggestion: Suggestion, repo_name: str) -> str:
        return f"""Write a practical guide for a new contributor who wants to work on the following task in the GitHub repository '{repo_name}'.

- Task title: {suggestion.title}
- Task description: {suggestion.description}
- Repository: {repo_name}

Respond with a single JSON object and nothing else: no markdown fences, no text before or after it. Use exactly these keys:
- "howToStart": 2-4 concrete, actionable first steps
- "filesToEdit": 1-3 file paths that most likely need changes, as specific as possible
- "skillsNeeded": 2-4 essential skills or technologies
- "estimatedHours": a rough number of hours this would take a junior developer"""

    async def explain(self, suggestion: Suggestion, repo_url: str) -> SuggestionDetail:
        """제안 하나에 대한 상세 가이드를 생성한다.

        Raises:
            InvalidRepositoryUrl: repo_url이 GitHub 저장소 URL이 아닌 경우
            AnalysisError: Gemini 호출 실패
            MalformedAiResponse: 응답에서 올바른 JSON 객체를 찾지 못한 경우
        """
        identity = parse_repo_url(repo_url)
        prompt = self._build_prompt(suggestion, identity.full_name)

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    tools=[types.Tool(google_search=types.GoogleSearch())],
                ),
            )
        except genai_errors.APIError as e:
            raise AnalysisError(f"Gemini request failed: {e}") from e

        payload = extract_json_object(response.text)
        payload.pop("sources", None)
        try:
            detail = SuggestionDetail.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Unexpected suggestion detail shape: {response.text!r}")
            raise MalformedAiResponse(
                "The AI returned suggestion details in an unexpected shape."
            ) from e

        sources = extract_sources(response)
        if sources:
            detail.sources = sources
        return detail
