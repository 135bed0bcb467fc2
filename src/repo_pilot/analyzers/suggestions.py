"""Gemini 기반 기여 제안 생성 모듈."""

import asyncio
import logging
from typing import TypeVar

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import BaseModel, ValidationError

from repo_pilot.analyzers.schemas import ContributionAnalysisV1, IssueTriageV1
from repo_pilot.config import settings
from repo_pilot.errors import AnalysisError
from repo_pilot.models import (
    CategorizedSuggestions,
    Complexity,
    RepositorySnapshot,
    Suggestion,
)

logger = logging.getLogger(__name__)

ContractT = TypeVar("ContractT", bound=BaseModel)


def merge_suggestions(
    triaged: CategorizedSuggestions | None,
    ideas: list[Suggestion],
) -> CategorizedSuggestions:
    """이슈 분류 결과에 AI 아이디어를 합친다.

    같은 제목이 이미 있으면 추가하지 않으므로, 같은 아이디어로 여러 번
    합쳐도 제목은 결과 안에서 유일하다.
    """
    merged = CategorizedSuggestions()
    seen: set[str] = set()

    def _add(suggestion: Suggestion, complexity: Complexity) -> None:
        if suggestion.title in seen:
            return
        if suggestion.complexity != complexity:
            suggestion = suggestion.model_copy(update={"complexity": complexity})
        merged.bucket(complexity).append(suggestion)
        seen.add(suggestion.title)

    if triaged is not None:
        for complexity in Complexity:
            for suggestion in triaged.bucket(complexity):
                _add(suggestion, complexity)

    for idea in ideas:
        _add(idea, idea.complexity)

    return merged


def _excerpt(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


class SuggestionGenerator:
    """저장소 스냅샷으로 기여 가이드와 난이도별 제안을 만든다."""

    def __init__(
        self,
        client: genai.Client,
        model: str | None = None,
        temperature: float | None = None,
    ) -> None:
        """
        Args:
            client: Gemini 클라이언트
            model: 모델 이름. None이면 설정값 사용.
            temperature: 생성 temperature. None이면 설정값 사용.
        """
        self.client = client
        self.model = model or settings.gemini_model
        self.temperature = (
            settings.gemini_temperature if temperature is None else temperature
        )

    def _languages_text(self, snapshot: RepositorySnapshot) -> str:
        return ", ".join(lang.name for lang in snapshot.languages_used) or "Unknown"

    def _build_analysis_prompt(self, snapshot: RepositorySnapshot) -> str:
        """기여 가이드 + 아이디어 프롬프트를 생성한다."""
        limit = settings.readme_excerpt_chars
        readme = _excerpt(snapshot.readme_text, limit) or "Not provided."
        contributing = _excerpt(snapshot.contributing_text, limit) or "Not provided."
        recent_issues = (
            "\n".join(
                f"- {issue.get('title', '')}"
                for issue in snapshot.open_issues[: settings.context_issue_count]
            )
            or "None"
        )

        return f"""You are helping a new open-source contributor find ways to contribute to a GitHub repository.

## Repository
- Name: {snapshot.repo_name}
- Description: {snapshot.description or "No description"}
- Languages: {self._languages_text(snapshot)}

## README.md (excerpt)
{readme}

## CONTRIBUTING.md (excerpt)
{contributing}

## Recent open issues (context only, do not copy them)
{recent_issues}

## Task
1. contributionGuidelines: summarize how to contribute as short, ordered steps.
   If CONTRIBUTING.md is not provided, give the standard steps
   (fork, create a branch, commit, push, open a pull request).
2. lowHangingFruit: propose 3-5 specific, actionable contribution ideas for a
   newcomer. They must be creative and based on the repository's purpose, not
   restatements of the open issues (e.g. documentation improvements, a missing
   test case, a small refactor). Give each a complexity of Easy, Medium or Hard."""

    def _build_triage_prompt(self, snapshot: RepositorySnapshot) -> str:
        """열린 이슈 난이도 분류 프롬프트를 생성한다."""
        issue_parts = []
        for i, issue in enumerate(snapshot.open_issues[: settings.triage_issue_limit]):
            body = _excerpt(issue.get("body") or "", settings.issue_body_chars)
            issue_parts.append(
                f"{i + 1}. Title: {issue.get('title', '')}\n"
                f"   URL: {issue.get('html_url', '')}\n"
                f"   Body: {body or 'No description'}"
            )
        issues_text = "\n\n".join(issue_parts)

        return f"""Categorize the following open GitHub issues by difficulty.

## Repository
- Name: {snapshot.repo_name}
- Languages: {self._languages_text(snapshot)}

## Open issues
{issues_text}

## Difficulty levels
- Easy: simple bug fixes, documentation updates, UI tweaks, tests for existing features
- Medium: feature additions, refactoring, moderately complex bugs, API changes
- Hard: architecture changes, complex algorithms, major refactors, security issues

Return the top 3-5 issues for EACH level when available; return an empty array
for a level with no matching issues. For each issue give:
- title: the original issue title, unchanged
- description: what needs to be done, 2-3 sentences at most
- complexity: Easy, Medium or Hard
- tags: e.g. Bug, Documentation, Feature, UI, Backend
- issueUrl: the original issue URL"""

    async def _generate_structured(
        self,
        prompt: str,
        contract: type[ContractT],
    ) -> ContractT:
        """구조화 출력 모드로 호출하고 계약 모델로 검증한다."""
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    response_mime_type="application/json",
                    response_schema=contract,
                ),
            )
        except genai_errors.APIError as e:
            raise AnalysisError(f"Gemini request failed: {e}") from e

        if not response.text:
            raise AnalysisError(f"Gemini returned an empty {contract.__name__} response")

        try:
            return contract.model_validate_json(response.text)
        except ValidationError as e:
            logger.error(f"Gemini response failed {contract.__name__} validation: {e}")
            raise AnalysisError(
                f"Gemini returned an invalid {contract.__name__} response"
            ) from e

    async def _triage(self, snapshot: RepositorySnapshot) -> CategorizedSuggestions:
        triage = await self._generate_structured(
            self._build_triage_prompt(snapshot), IssueTriageV1
        )
        logger.info(
            f"Categorized issues: easy={len(triage.easy)}, "
            f"medium={len(triage.medium)}, hard={len(triage.hard)}"
        )
        return CategorizedSuggestions(
            easy=[item.to_suggestion() for item in triage.easy],
            medium=[item.to_suggestion() for item in triage.medium],
            hard=[item.to_suggestion() for item in triage.hard],
        )

    async def generate(
        self,
        snapshot: RepositorySnapshot,
    ) -> tuple[list[str], CategorizedSuggestions]:
        """기여 가이드와 난이도별 제안을 생성한다.

        열린 이슈가 있으면 두 프롬프트를 병렬로 호출하고, 없으면 이슈 분류
        호출은 하지 않는다. 어느 쪽이든 실패하면 부분 결과 없이 예외를 낸다.

        Raises:
            AnalysisError: Gemini 호출 실패 또는 응답 검증 실패
        """
        analysis_prompt = self._build_analysis_prompt(snapshot)

        triaged: CategorizedSuggestions | None = None
        if snapshot.open_issues:
            analysis, triaged = await asyncio.gather(
                self._generate_structured(analysis_prompt, ContributionAnalysisV1),
                self._triage(snapshot),
            )
        else:
            logger.info("No open issues, skipping issue triage")
            analysis = await self._generate_structured(
                analysis_prompt, ContributionAnalysisV1
            )

        ideas = [idea.to_suggestion() for idea in analysis.low_hanging_fruit]
        suggestions = merge_suggestions(triaged, ideas)
        return analysis.contribution_guidelines, suggestions
