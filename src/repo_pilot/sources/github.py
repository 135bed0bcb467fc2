"""GitHub 저장소 메타데이터 수집."""

import asyncio
import logging
from typing import Any

import httpx

from repo_pilot.config import settings
from repo_pilot.enrichers import ReadmeEnricher
from repo_pilot.errors import InvalidRepositoryUrl, RepositoryNotFound
from repo_pilot.github_api import (
    GITHUB_HEADERS,
    last_page,
    raise_for_github_status,
    request_json,
)
from repo_pilot.models import (
    Contributor,
    LanguageUsage,
    RepositoryIdentity,
    RepositorySnapshot,
)

logger = logging.getLogger(__name__)

GITHUB_HOST = "github.com"
TOP_CONTRIBUTORS = 10
ISSUES_PER_PAGE = 100


def parse_repo_url(url: str) -> RepositoryIdentity:
    """GitHub 저장소 URL을 owner/repo로 분해한다.

    Raises:
        InvalidRepositoryUrl: GitHub 저장소 URL 형식이 아닌 경우
    """
    try:
        parsed = httpx.URL(url.strip())
    except httpx.InvalidURL as e:
        raise InvalidRepositoryUrl(url) from e

    if parsed.scheme not in ("http", "https") or parsed.host != GITHUB_HOST:
        raise InvalidRepositoryUrl(url)

    segments = [s for s in parsed.path.split("/") if s]
    if len(segments) < 2:
        raise InvalidRepositoryUrl(url)

    owner, repo = segments[0], segments[1].removesuffix(".git")
    if not repo:
        raise InvalidRepositoryUrl(url)

    return RepositoryIdentity(owner=owner, repo=repo)


def compute_language_usage(byte_map: dict[str, Any] | None) -> list[LanguageUsage]:
    """언어별 바이트 수를 소수점 한 자리 비율로 변환한다.

    최대 잉여 반올림(largest remainder)으로 합계를 정확히 100.0으로 맞추고,
    비율 내림차순으로 정렬한다. 동률이면 API 응답 순서를 유지한다.
    """
    counts = {
        name: size
        for name, size in (byte_map or {}).items()
        if isinstance(size, int) and not isinstance(size, bool) and size >= 0
    }
    total = sum(counts.values())
    if total == 0:
        return []

    # 0.1% 단위 정수로 계산
    tenths: dict[str, int] = {}
    remainders: dict[str, int] = {}
    for name, size in counts.items():
        tenths[name], remainders[name] = divmod(size * 1000, total)

    leftover = 1000 - sum(tenths.values())
    for name in sorted(remainders, key=remainders.__getitem__, reverse=True)[:leftover]:
        tenths[name] += 1

    usage = [LanguageUsage(name=name, percentage=tenths[name] / 10) for name in counts]
    usage.sort(key=lambda u: u.percentage, reverse=True)
    return usage


def _parse_contributors(items: list[dict[str, Any]] | None) -> list[Contributor]:
    contributors = []
    for item in (items or [])[:TOP_CONTRIBUTORS]:
        login = item.get("login")
        if not login:
            continue
        contributors.append(
            Contributor(
                login=login,
                avatar_url=item.get("avatar_url") or "",
                profile_url=item.get("html_url") or "",
            )
        )
    return contributors


def filter_pull_requests(items: list[dict[str, Any]] | None) -> list[dict[str, Any]]:
    """issues 응답에서 PR을 제외한다 (PR은 pull_request 필드를 가진다)."""
    return [item for item in (items or []) if "pull_request" not in item]


class GitHubRepositorySource:
    """GitHub REST API에서 저장소 스냅샷을 만든다."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        enricher: ReadmeEnricher | None = None,
    ) -> None:
        """
        Args:
            base_url: API 주소. None이면 설정값 사용.
            timeout: HTTP 요청 타임아웃 (초). None이면 설정값 사용.
            transport: httpx 전송 계층 (테스트용 주입)
            enricher: README/CONTRIBUTING 조회기
        """
        self.base_url = base_url or settings.github_api_url
        self.timeout = timeout or settings.http_timeout
        self.transport = transport
        self.enricher = enricher or ReadmeEnricher()

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=GITHUB_HEADERS,
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        )

    async def _count_contributors(
        self,
        client: httpx.AsyncClient,
        identity: RepositoryIdentity,
        fallback: int,
    ) -> int:
        """per_page=1 요청의 Link 헤더로 전체 기여자 수를 구한다."""
        endpoint = f"/repos/{identity.owner}/{identity.repo}/contributors"
        response = await client.get(endpoint, params={"per_page": 1, "anon": 1})
        if response.status_code not in (204, 404):
            raise_for_github_status(response, endpoint)

        total = last_page(response)
        return total if total else fallback

    async def fetch(self, identity: RepositoryIdentity) -> RepositorySnapshot:
        """저장소 메타데이터, 언어, 기여자, 이슈, 문서를 모아 스냅샷을 만든다.

        Raises:
            RepositoryNotFound: 저장소가 없거나 비공개인 경우
            RateLimitExceeded: 요청 한도를 초과한 경우
            HostingApiError: 그 외 실패 응답
        """
        base = f"/repos/{identity.owner}/{identity.repo}"

        async with self._client() as client:
            details, languages, contributors, issues = await asyncio.gather(
                request_json(client, base),
                request_json(client, f"{base}/languages"),
                request_json(
                    client, f"{base}/contributors", {"per_page": TOP_CONTRIBUTORS}
                ),
                request_json(
                    client,
                    f"{base}/issues",
                    {"state": "open", "per_page": ISSUES_PER_PAGE},
                ),
            )

            if details is None:
                raise RepositoryNotFound(identity.full_name)

            contributor_items = contributors or []
            documents, total_contributors = await asyncio.gather(
                self.enricher.fetch_documents(client, identity),
                self._count_contributors(client, identity, len(contributor_items)),
            )

        open_issues = filter_pull_requests(issues)
        logger.info(
            f"Fetched {identity.full_name}: {len(open_issues)} open issues, "
            f"{total_contributors} contributors"
        )

        return RepositorySnapshot(
            repo_name=details.get("full_name") or identity.full_name,
            description=details.get("description"),
            stars=details.get("stargazers_count", 0),
            forks=details.get("forks_count", 0),
            total_open_issues=len(open_issues),
            total_contributors=total_contributors,
            languages_used=compute_language_usage(languages),
            top_contributors=_parse_contributors(contributor_items),
            readme_text=documents["readme"],
            contributing_text=documents["contributing"],
            open_issues=open_issues,
        )
