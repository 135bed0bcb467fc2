"""GitHub REST API 공통 요청 처리."""

import logging
from datetime import datetime
from typing import Any

import httpx

from repo_pilot.errors import HostingApiError, RateLimitExceeded

logger = logging.getLogger(__name__)

GITHUB_HEADERS = {"Accept": "application/vnd.github.v3+json"}


def _reset_time(response: httpx.Response) -> datetime | None:
    """x-ratelimit-reset 헤더(epoch 초)를 로컬 시각으로 변환한다."""
    raw = response.headers.get("x-ratelimit-reset")
    if not raw:
        return None
    try:
        return datetime.fromtimestamp(int(raw))
    except (ValueError, OverflowError, OSError):
        return None


def is_rate_limited(response: httpx.Response) -> bool:
    """응답이 요청 한도 초과를 뜻하는지 확인한다."""
    if response.status_code == 429:
        return True
    if response.status_code != 403:
        return False
    if response.headers.get("x-ratelimit-remaining") == "0":
        return True
    return "rate limit" in response.text.lower()


def raise_for_github_status(response: httpx.Response, endpoint: str) -> None:
    """실패 응답을 도메인 예외로 변환한다. 404는 호출자가 처리한다."""
    if response.is_success:
        return
    if is_rate_limited(response):
        reset_at = _reset_time(response)
        logger.warning(f"GitHub rate limit exceeded (reset at {reset_at})")
        raise RateLimitExceeded(reset_at)
    raise HostingApiError(endpoint, response.status_code, response.reason_phrase)


async def request_json(
    client: httpx.AsyncClient,
    endpoint: str,
    params: dict[str, str | int] | None = None,
) -> Any | None:
    """GET 요청 후 JSON을 반환한다.

    404와 204(빈 저장소의 contributors 등)는 None을 반환한다.
    """
    response = await client.get(endpoint, params=params)
    if response.status_code in (204, 404):
        return None
    raise_for_github_status(response, endpoint)
    return response.json()


def last_page(response: httpx.Response) -> int | None:
    """Link 헤더의 rel="last" 링크에서 페이지 번호를 꺼낸다."""
    url = response.links.get("last", {}).get("url")
    if not url:
        return None
    page = httpx.URL(url).params.get("page")
    if page and page.isdigit():
        return int(page)
    return None
