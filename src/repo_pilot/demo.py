"""네트워크 없이 보여주는 예제 분석 결과 (axios/axios)."""

from repo_pilot.models import (
    CategorizedSuggestions,
    Complexity,
    Contributor,
    LanguageUsage,
    RepoAnalysis,
    RepositorySnapshot,
    Suggestion,
)

DEMO_REPO_URL = "https://github.com/axios/axios"


def _contributor(login: str, user_id: int) -> Contributor:
    return Contributor(
        login=login,
        avatar_url=f"https://avatars.githubusercontent.com/u/{user_id}?v=4",
        profile_url=f"https://github.com/{login}",
    )


def _easy(title: str, description: str, *tags: str) -> Suggestion:
    return Suggestion(
        title=title, description=description, complexity=Complexity.easy, tags=list(tags)
    )


def _medium(title: str, description: str, *tags: str) -> Suggestion:
    return Suggestion(
        title=title, description=description, complexity=Complexity.medium, tags=list(tags)
    )


def _hard(title: str, description: str, *tags: str) -> Suggestion:
    return Suggestion(
        title=title, description=description, complexity=Complexity.hard, tags=list(tags)
    )


DEMO_ANALYSIS = RepoAnalysis(
    snapshot=RepositorySnapshot(
        repo_name="axios/axios",
        description="Promise based HTTP client for the browser and node.js",
        stars=105234,
        forks=10842,
        total_open_issues=234,
        total_contributors=558,
        languages_used=[
            LanguageUsage(name="JavaScript", percentage=94.2),
            LanguageUsage(name="TypeScript", percentage=5.8),
        ],
        top_contributors=[
            _contributor("jasonsaayman", 4814473),
            _contributor("mzabriskie", 199035),
            _contributor("nickuraltsev", 6316432),
            _contributor("DigitalBrainJS", 12586868),
            _contributor("chinesedfan", 1736154),
        ],
    ),
    contribution_guidelines=[
        "Fork the repository and create a feature branch from `main`",
        "Run `npm install` to install dependencies",
        "Make your changes and add tests in the `test/` directory",
        "Run `npm test` to ensure all tests pass",
        "Update documentation if you're adding new features",
        "Submit a pull request with a clear description of changes",
    ],
    suggestions=CategorizedSuggestions(
        easy=[
            _easy(
                "Improve TypeScript type definitions for error responses",
                "Add more specific types for different error scenarios so that "
                "TypeScript projects get better help when handling errors.",
                "typescript", "types", "documentation", "good-first-issue",
            ),
            _easy(
                "Add more examples to README for common use cases",
                "Expand the README with practical examples of interceptors, "
                "request cancellation and custom instance configuration.",
                "documentation", "examples", "good-first-issue",
            ),
            _easy(
                "Fix typos and grammar in API documentation",
                "Review the documentation files and correct spelling and "
                "grammatical mistakes.",
                "documentation", "good-first-issue",
            ),
            _easy(
                "Update outdated dependencies in package.json",
                "Several dev dependencies are outdated and can be updated safely "
                "for better security and performance.",
                "maintenance", "dependencies",
            ),
        ],
        medium=[
            _medium(
                "Add support for request retry with exponential backoff",
                "Implement a configurable retry mechanism that retries failed "
                "requests with an exponential backoff strategy.",
                "enhancement", "feature", "reliability",
            ),
            _medium(
                "Improve error handling for network timeouts",
                "Make timeout errors distinguish connection timeouts from "
                "response timeouts to give clearer debugging information.",
                "error-handling", "enhancement",
            ),
            _medium(
                "Add progress tracking for file uploads",
                "Implement progress event handlers for multipart form uploads so "
                "applications can show upload progress bars.",
                "enhancement", "feature", "upload",
            ),
            _medium(
                "Create migration guide for v0.x to v1.x users",
                "Document the breaking changes between major versions with code "
                "examples to help users migrate.",
                "documentation", "migration",
            ),
        ],
        hard=[
            _hard(
                "Implement HTTP/2 support for modern browsers",
                "Add HTTP/2 support for multiplexing while keeping backward "
                "compatibility with existing adapters.",
                "enhancement", "performance", "protocol",
            ),
            _hard(
                "Refactor core adapter system for better extensibility",
                "Redesign the adapter architecture so custom adapters for other "
                "environments such as React Native or Electron are easier to write.",
                "refactoring", "architecture", "extensibility",
            ),
            _hard(
                "Add comprehensive caching layer with cache invalidation",
                "Implement a caching system with configurable TTL and LRU "
                "strategies and invalidation driven by HTTP headers.",
                "enhancement", "performance", "caching",
            ),
        ],
    ),
)
