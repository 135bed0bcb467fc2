"""문서 enrichment 모듈."""

from repo_pilot.enrichers.readme import ReadmeEnricher

__all__ = ["ReadmeEnricher"]
