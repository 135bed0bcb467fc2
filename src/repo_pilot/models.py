"""데이터 모델 정의."""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator


# docstring이 Gemini 응답 스키마의 설명으로 쓰인다
class Complexity(str, Enum):
    """Estimated contribution complexity: 'Easy', 'Medium', or 'Hard'."""

    easy = "Easy"
    medium = "Medium"
    hard = "Hard"

    @classmethod
    def _missing_(cls, value: object) -> "Complexity | None":
        # "easy", " HARD " 같은 입력 허용
        if isinstance(value, str):
            normalized = value.strip().capitalize()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


def _coerce_complexity(value: object) -> object:
    if isinstance(value, str):
        return Complexity(value)
    return value


# 대소문자가 다른 난이도 문자열도 허용하는 필드 타입
ComplexityField = Annotated[Complexity, BeforeValidator(_coerce_complexity)]


class RepositoryIdentity(BaseModel):
    """URL에서 추출한 저장소 식별자."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(description="저장소 소유자")
    repo: str = Field(description="저장소 이름")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}"


class LanguageUsage(BaseModel):
    """언어별 사용 비율."""

    name: str = Field(description="언어 이름")
    percentage: float = Field(ge=0, description="바이트 기준 비율 (%)")


class Contributor(BaseModel):
    """기여자 정보."""

    login: str = Field(description="GitHub 로그인")
    avatar_url: str = Field(default="", description="아바타 이미지 URL")
    profile_url: str = Field(default="", description="프로필 URL")


class RepositorySnapshot(BaseModel):
    """분석 시점의 저장소 메타데이터 집계."""

    repo_name: str = Field(description="저장소 전체 이름 (owner/repo)")
    description: str | None = Field(default=None, description="저장소 설명")
    stars: int = Field(default=0, description="스타 수")
    forks: int = Field(default=0, description="포크 수")
    total_open_issues: int = Field(default=0, description="PR을 제외한 열린 이슈 수")
    total_contributors: int = Field(default=0, description="전체 기여자 수")
    languages_used: list[LanguageUsage] = Field(
        default_factory=list,
        description="비율 내림차순 언어 목록",
    )
    top_contributors: list[Contributor] = Field(
        default_factory=list,
        max_length=10,
        description="상위 기여자 (최대 10명)",
    )
    readme_text: str = Field(default="", description="README 내용")
    contributing_text: str = Field(default="", description="CONTRIBUTING 내용")
    open_issues: list[dict[str, Any]] = Field(
        default_factory=list,
        description="PR을 제외한 열린 이슈 원본",
    )


class Suggestion(BaseModel):
    """기여 제안."""

    title: str = Field(description="제목")
    description: str = Field(description="설명")
    complexity: ComplexityField = Field(description="난이도")
    tags: list[str] = Field(default_factory=list, description="태그")
    issue_url: str | None = Field(
        default=None,
        description="원본 이슈 URL (AI가 만든 아이디어면 None)",
    )

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, tags: list[str]) -> list[str]:
        return list(dict.fromkeys(tags))

    @property
    def is_issue(self) -> bool:
        """실제 열린 이슈에서 나온 제안인지 여부."""
        return self.issue_url is not None


class CategorizedSuggestions(BaseModel):
    """난이도별로 분류된 제안 목록."""

    easy: list[Suggestion] = Field(default_factory=list)
    medium: list[Suggestion] = Field(default_factory=list)
    hard: list[Suggestion] = Field(default_factory=list)

    def bucket(self, complexity: Complexity) -> list[Suggestion]:
        """난이도에 해당하는 목록을 반환한다."""
        return {
            Complexity.easy: self.easy,
            Complexity.medium: self.medium,
            Complexity.hard: self.hard,
        }[complexity]

    @property
    def low_hanging_fruit(self) -> list[Suggestion]:
        """난이도별 상위 2개씩 합친 목록 (이전 화면 호환용)."""
        return self.easy[:2] + self.medium[:2] + self.hard[:2]


class RepoAnalysis(BaseModel):
    """저장소 분석 결과."""

    snapshot: RepositorySnapshot = Field(description="저장소 메타데이터")
    contribution_guidelines: list[str] = Field(
        default_factory=list,
        description="기여 가이드 단계",
    )
    suggestions: CategorizedSuggestions = Field(
        default_factory=CategorizedSuggestions,
        description="난이도별 제안",
    )


class GroundingSource(BaseModel):
    """검색 그라운딩 출처."""

    uri: str
    title: str = ""


class SuggestionDetail(BaseModel):
    """제안 하나에 대한 상세 가이드."""

    model_config = ConfigDict(populate_by_name=True)

    how_to_start: list[str] = Field(alias="howToStart", description="시작 단계")
    files_to_edit: list[str] = Field(alias="filesToEdit", description="수정할 파일")
    skills_needed: list[str] = Field(alias="skillsNeeded", description="필요 기술")
    estimated_hours: float = Field(
        alias="estimatedHours", ge=0, description="예상 소요 시간"
    )
    sources: list[GroundingSource] | None = Field(
        default=None,
        description="그라운딩 출처 (없으면 None)",
    )
