"""Gemini 분석 모듈."""

from repo_pilot.analyzers.details import SuggestionDetailer
from repo_pilot.analyzers.suggestions import SuggestionGenerator, merge_suggestions

__all__ = ["SuggestionDetailer", "SuggestionGenerator", "merge_suggestions"]
