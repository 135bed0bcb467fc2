"""데이터 소스 모듈."""

from repo_pilot.sources.base import Source
from repo_pilot.sources.github import GitHubRepositorySource, parse_repo_url

__all__ = ["GitHubRepositorySource", "Source", "parse_repo_url"]
