"""README / CONTRIBUTING 문서 enrichment 모듈."""

import asyncio
import base64
import binascii
import logging
from typing import TypedDict

import httpx

from repo_pilot.errors import HostingApiError
from repo_pilot.github_api import request_json
from repo_pilot.models import RepositoryIdentity

logger = logging.getLogger(__name__)


class DocumentsResult(TypedDict):
    """문서 조회 결과 타입."""

    readme: str
    contributing: str


def decode_content(content: str) -> str:
    """contents API의 base64 본문을 문자열로 디코딩한다."""
    try:
        raw = base64.b64decode(content)
    except (binascii.Error, ValueError):
        logger.warning("Failed to decode base64 file content")
        return ""
    return raw.decode("utf-8", errors="replace")


class ReadmeEnricher:
    """저장소의 README와 CONTRIBUTING 문서를 가져온다."""

    README_PATH = "README.md"
    CONTRIBUTING_PATH = "CONTRIBUTING.md"

    async def _fetch_file(
        self,
        client: httpx.AsyncClient,
        identity: RepositoryIdentity,
        path: str,
    ) -> str:
        """contents API로 파일을 가져온다. 없으면 빈 문자열."""
        endpoint = f"/repos/{identity.owner}/{identity.repo}/contents/{path}"
        try:
            data = await request_json(client, endpoint)
        except HostingApiError as e:
            # 선택 문서이므로 요청 한도 초과 외의 실패는 분석을 막지 않는다
            logger.warning(f"Skipping {path} for {identity.full_name}: {e}")
            return ""

        if not isinstance(data, dict) or not data.get("content"):
            return ""
        return decode_content(data["content"])

    async def fetch_documents(
        self,
        client: httpx.AsyncClient,
        identity: RepositoryIdentity,
    ) -> DocumentsResult:
        """README와 CONTRIBUTING을 병렬로 가져온다."""
        readme, contributing = await asyncio.gather(
            self._fetch_file(client, identity, self.README_PATH),
            self._fetch_file(client, identity, self.CONTRIBUTING_PATH),
        )
        return DocumentsResult(readme=readme, contributing=contributing)
