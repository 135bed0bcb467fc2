"""Gemini 구조화 응답 계약.

Gemini에 `response_schema`로 넘기는 동시에, 응답 텍스트를 직접 검증하는 데
사용한다. 형태가 바뀌면 새 버전 클래스를 추가한다.
"""

from pydantic import BaseModel, ConfigDict, Field

from repo_pilot.models import ComplexityField, Suggestion


class GeneratedIdeaV1(BaseModel):
    """AI가 만든 기여 아이디어."""

    title: str = Field(description="A short, descriptive title for the contribution idea.")
    description: str = Field(
        description=(
            "A detailed but concise explanation of the task, why it's needed, "
            "and what the outcome should be. Around 2-3 sentences."
        )
    )
    complexity: ComplexityField
    tags: list[str] = Field(
        description=(
            "Relevant tags, like 'Documentation', 'Bug Fix', 'UI', 'Refactor', "
            "or a primary programming language."
        )
    )

    def to_suggestion(self) -> Suggestion:
        return Suggestion(
            title=self.title,
            description=self.description,
            complexity=self.complexity,
            tags=self.tags,
        )


class ContributionAnalysisV1(BaseModel):
    """기여 가이드 + 아이디어 응답."""

    model_config = ConfigDict(populate_by_name=True)

    contribution_guidelines: list[str] = Field(
        alias="contributionGuidelines",
        description=(
            "A step-by-step list summarizing how to contribute, based on "
            "CONTRIBUTING.md and general best practices."
        ),
    )
    low_hanging_fruit: list[GeneratedIdeaV1] = Field(
        alias="lowHangingFruit",
        description="3-5 specific, actionable contribution ideas for new contributors.",
    )


class TriagedIssueV1(BaseModel):
    """난이도가 매겨진 열린 이슈."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str
    complexity: ComplexityField
    tags: list[str]
    issue_url: str = Field(alias="issueUrl")

    def to_suggestion(self) -> Suggestion:
        return Suggestion(
            title=self.title,
            description=self.description,
            complexity=self.complexity,
            tags=self.tags,
            issue_url=self.issue_url,
        )


class IssueTriageV1(BaseModel):
    """난이도별 이슈 분류 응답. 해당 난이도가 없으면 빈 배열."""

    easy: list[TriagedIssueV1] = Field(
        description="Top 3-5 easy issues suitable for beginners"
    )
    medium: list[TriagedIssueV1] = Field(description="Top 3-5 medium difficulty issues")
    hard: list[TriagedIssueV1] = Field(description="Top 3-5 hard/challenging issues")
