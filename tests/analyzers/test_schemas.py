"""Gemini 응답 계약 테스트."""

import pytest
from pydantic import BaseModel

from repo_pilot.analyzers.schemas import (
    ContributionAnalysisV1,
    GeneratedIdeaV1,
    IssueTriageV1,
    TriagedIssueV1,
)


class TestComplexitySchema:
    """난이도 필드의 JSON 스키마 테스트."""

    @pytest.mark.parametrize("contract", [GeneratedIdeaV1, TriagedIssueV1])
    def test_guidance_on_enum(self, contract: type[BaseModel]) -> None:
        """난이도 안내는 enum 정의에만 있고 필드에는 따로 두지 않는다."""
        schema = contract.model_json_schema()

        assert "description" not in schema["properties"]["complexity"]
        enum = schema["$defs"]["Complexity"]
        assert enum["enum"] == ["Easy", "Medium", "Hard"]
        for level in ("Easy", "Medium", "Hard"):
            assert level in enum["description"]

    @pytest.mark.parametrize("contract", [ContributionAnalysisV1, IssueTriageV1])
    def test_nested_contracts(self, contract: type[BaseModel]) -> None:
        """중첩 계약도 같은 난이도 정의를 참조한다."""
        enum = contract.model_json_schema()["$defs"]["Complexity"]
        assert enum["description"].startswith("Estimated contribution complexity")
