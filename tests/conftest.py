"""공용 테스트 픽스처."""

import base64
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from repo_pilot.models import RepositorySnapshot

Route = tuple[int, Any, dict[str, str]]


def github_transport(
    routes: dict[str, Route],
    calls: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """경로별 응답을 돌려주는 가짜 GitHub API 전송 계층을 만든다.

    contributors 개수 조회(per_page=1)는 "<path>?count" 키로 구분한다.
    등록되지 않은 경로는 404를 돌려준다.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        key = request.url.path
        if key.endswith("/contributors") and request.url.params.get("per_page") == "1":
            key += "?count"
        if key not in routes:
            return httpx.Response(404, json={"message": "Not Found"})
        status, body, headers = routes[key]
        if body is None:
            return httpx.Response(status, headers=headers)
        return httpx.Response(status, json=body, headers=headers)

    return httpx.MockTransport(handler)


def encoded(text: str) -> dict[str, str]:
    """contents API 형식의 base64 본문을 만든다."""
    return {"encoding": "base64", "content": base64.b64encode(text.encode()).decode()}


@pytest.fixture
def axios_routes() -> dict[str, Route]:
    """axios/axios 저장소의 정상 응답 목록을 반환한다."""
    base = "/repos/axios/axios"
    link = (
        '<https://api.github.com/repositories/1/contributors?per_page=1&anon=1&page=2>; '
        'rel="next", '
        '<https://api.github.com/repositories/1/contributors?per_page=1&anon=1&page=558>; '
        'rel="last"'
    )
    return {
        base: (
            200,
            {
                "full_name": "axios/axios",
                "description": "Promise based HTTP client",
                "stargazers_count": 105234,
                "forks_count": 10842,
            },
            {},
        ),
        f"{base}/languages": (200, {"JavaScript": 942, "TypeScript": 58}, {}),
        f"{base}/contributors": (
            200,
            [
                {
                    "login": f"user{i}",
                    "avatar_url": f"https://avatars.example/{i}",
                    "html_url": f"https://github.com/user{i}",
                }
                for i in range(10)
            ],
            {},
        ),
        f"{base}/contributors?count": (200, [{"login": "user0"}], {"link": link}),
        f"{base}/issues": (
            200,
            [
                {
                    "title": "Docs typo",
                    "html_url": "https://github.com/axios/axios/issues/1",
                    "body": "Fix typo",
                },
                {
                    "title": "Add feature",
                    "html_url": "https://github.com/axios/axios/pull/2",
                    "pull_request": {"url": "https://api.github.com/pulls/2"},
                },
                {
                    "title": "Timeout bug",
                    "html_url": "https://github.com/axios/axios/issues/3",
                    "body": None,
                },
            ],
            {},
        ),
        f"{base}/contents/README.md": (200, encoded("# axios\n"), {}),
        f"{base}/contents/CONTRIBUTING.md": (200, encoded("Fork and PR"), {}),
    }


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """github_transport 함수를 반환한다."""
    return github_transport


@pytest.fixture
def snapshot() -> RepositorySnapshot:
    """열린 이슈가 있는 스냅샷을 반환한다."""
    return RepositorySnapshot(
        repo_name="axios/axios",
        description="Promise based HTTP client",
        stars=100,
        forks=10,
        total_open_issues=2,
        total_contributors=5,
        readme_text="# axios",
        open_issues=[
            {
                "title": "Docs typo",
                "html_url": "https://github.com/axios/axios/issues/1",
                "body": "Fix typo",
            },
            {
                "title": "Timeout bug",
                "html_url": "https://github.com/axios/axios/issues/3",
                "body": None,
            },
        ],
    )


@pytest.fixture
def encode_content() -> Callable[[str], dict[str, str]]:
    """encoded 함수를 반환한다."""
    return encoded
