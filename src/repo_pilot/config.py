"""설정 관리 모듈."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gemini
    gemini_api_key: str | None = Field(default=None, description="Gemini API 키")
    gemini_model: str = Field(
        default="gemini-2.5-flash",
        description="사용할 Gemini 모델",
    )
    gemini_temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="구조화 응답 생성 temperature",
    )

    # GitHub
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub REST API 주소",
    )
    http_timeout: float = Field(default=10.0, gt=0, description="HTTP 타임아웃 (초)")

    # 프롬프트 크기 제한
    readme_excerpt_chars: int = Field(
        default=2000, ge=0, description="프롬프트에 넣을 README/CONTRIBUTING 길이"
    )
    issue_body_chars: int = Field(
        default=300, ge=0, description="이슈 본문 요약 길이"
    )
    context_issue_count: int = Field(
        default=10, ge=0, description="분석 프롬프트에 참고용으로 넣을 이슈 수"
    )
    triage_issue_limit: int = Field(
        default=100, ge=1, description="난이도 분류 프롬프트에 넣을 최대 이슈 수"
    )


settings = Settings()
