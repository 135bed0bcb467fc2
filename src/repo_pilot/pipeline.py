"""저장소 분석 파이프라인."""

import logging

from repo_pilot.analyzers import SuggestionGenerator
from repo_pilot.models import RepoAnalysis
from repo_pilot.sources import Source, parse_repo_url

logger = logging.getLogger(__name__)


class RepoAnalyzer:
    """URL 파싱 -> GitHub 수집 -> Gemini 제안 생성을 순서대로 실행한다."""

    def __init__(self, source: Source, generator: SuggestionGenerator) -> None:
        self.source = source
        self.generator = generator

    async def analyze(self, repo_url: str) -> RepoAnalysis:
        """저장소 URL을 분석한다.

        앞 단계가 실패하면 뒤 단계는 호출하지 않는다. URL이 잘못되면
        네트워크 요청도 없다.
        """
        identity = parse_repo_url(repo_url)

        logger.info(f"Fetching GitHub data for {identity.full_name}")
        snapshot = await self.source.fetch(identity)

        logger.info(f"Generating suggestions for {snapshot.repo_name}")
        guidelines, suggestions = await self.generator.generate(snapshot)

        logger.info(
            f"Analysis completed: {len(suggestions.easy)} easy, "
            f"{len(suggestions.medium)} medium, {len(suggestions.hard)} hard"
        )
        return RepoAnalysis(
            snapshot=snapshot,
            contribution_guidelines=guidelines,
            suggestions=suggestions,
        )
