"""예외 정의."""

from datetime import datetime


class RepoPilotError(Exception):
    """repo-pilot 예외의 기본 클래스."""


class InvalidRepositoryUrl(RepoPilotError):
    """GitHub 저장소 URL 형식이 아닌 입력."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(
            "Invalid GitHub repository URL. "
            "Please use a format like https://github.com/owner/repo"
        )


class RepositoryNotFound(RepoPilotError):
    """저장소가 없거나 비공개인 경우."""

    def __init__(self, repo_name: str) -> None:
        self.repo_name = repo_name
        super().__init__(f"Repository {repo_name} not found or is private.")


class RateLimitExceeded(RepoPilotError):
    """GitHub API 요청 한도를 초과한 경우."""

    def __init__(self, reset_at: datetime | None = None) -> None:
        """
        Args:
            reset_at: 한도가 초기화되는 시각. 헤더가 없으면 None.
        """
        self.reset_at = reset_at
        super().__init__(
            "GitHub API rate limit exceeded. "
            f"Please try again after {self.reset_time}."
        )

    @property
    def reset_time(self) -> str:
        """사람이 읽을 수 있는 초기화 시각을 반환한다."""
        if self.reset_at is None:
            return "later"
        return self.reset_at.strftime("%H:%M:%S")


class HostingApiError(RepoPilotError):
    """그 외 GitHub API 실패 응답."""

    def __init__(self, endpoint: str, status_code: int, reason: str) -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        self.reason = reason
        super().__init__(
            f"GitHub API request failed for {endpoint}: {status_code} {reason}"
        )


class AnalysisError(RepoPilotError):
    """Gemini 호출 실패 또는 응답 검증 실패."""


class MalformedAiResponse(RepoPilotError):
    """Gemini 응답에서 JSON 객체를 찾거나 파싱하지 못한 경우."""
