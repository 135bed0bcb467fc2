"""데이터 모델 테스트."""

import pytest
from pydantic import ValidationError

from repo_pilot.demo import DEMO_ANALYSIS
from repo_pilot.models import Complexity, Suggestion, SuggestionDetail


class TestSuggestion:
    """Suggestion 테스트."""

    @pytest.mark.parametrize("value", ["Easy", "easy", " EASY "])
    def test_complexity_normalized(self, value: str) -> None:
        """난이도 문자열은 대소문자를 구분하지 않는다."""
        suggestion = Suggestion(title="t", description="d", complexity=value)
        assert suggestion.complexity is Complexity.easy

    def test_unknown_complexity(self) -> None:
        with pytest.raises(ValidationError):
            Suggestion(title="t", description="d", complexity="Trivial")

    def test_tags_deduplicated(self) -> None:
        """태그는 처음 나온 순서대로 중복 없이 유지한다."""
        suggestion = Suggestion(
            title="t", description="d", complexity="Hard", tags=["a", "b", "a"]
        )
        assert suggestion.tags == ["a", "b"]


class TestSuggestionDetail:
    """SuggestionDetail 테스트."""

    def test_camel_case_keys(self) -> None:
        """Gemini 응답의 camelCase 키를 받는다."""
        detail = SuggestionDetail.model_validate(
            {
                "howToStart": ["a"],
                "filesToEdit": ["b"],
                "skillsNeeded": ["c"],
                "estimatedHours": "2.5",
            }
        )
        assert detail.estimated_hours == 2.5
        assert detail.sources is None


class TestDemoAnalysis:
    """예제 분석 결과 테스트."""

    def test_fixture_shape(self) -> None:
        """예제 데이터가 모델 불변식을 만족한다."""
        snapshot = DEMO_ANALYSIS.snapshot
        assert snapshot.repo_name == "axios/axios"
        assert abs(sum(lang.percentage for lang in snapshot.languages_used) - 100) <= 0.1
        assert len(snapshot.top_contributors) <= 10

        suggestions = DEMO_ANALYSIS.suggestions
        assert suggestions.easy and suggestions.medium and suggestions.hard
        titles = [s.title for s in suggestions.easy + suggestions.medium + suggestions.hard]
        assert len(titles) == len(set(titles))
        assert len(suggestions.low_hanging_fruit) == 6
