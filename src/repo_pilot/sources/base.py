"""소스 프로토콜 정의."""

from typing import Protocol

from repo_pilot.models import RepositoryIdentity, RepositorySnapshot


class Source(Protocol):
    """저장소 데이터 소스 프로토콜."""

    async def fetch(self, identity: RepositoryIdentity) -> RepositorySnapshot:
        """저장소 스냅샷을 가져온다."""
        ...
