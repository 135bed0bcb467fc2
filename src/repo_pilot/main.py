"""CLI 엔트리포인트."""

import asyncio
import logging
from enum import Enum
from typing import Annotated

import typer
from google import genai
from rich.columns import Columns
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from repo_pilot.analyzers import SuggestionDetailer, SuggestionGenerator
from repo_pilot.config import settings
from repo_pilot.demo import DEMO_ANALYSIS, DEMO_REPO_URL
from repo_pilot.errors import InvalidRepositoryUrl, RateLimitExceeded
from repo_pilot.models import (
    Complexity,
    RepoAnalysis,
    Suggestion,
    SuggestionDetail,
)
from repo_pilot.pipeline import RepoAnalyzer
from repo_pilot.sources import GitHubRepositorySource, parse_repo_url

console = Console()


class Tab(str, Enum):
    """표시할 난이도 탭."""

    all = "all"
    easy = "easy"
    medium = "medium"
    hard = "hard"


TAB_LABELS = {
    Complexity.easy: "🟢 Easy",
    Complexity.medium: "🟡 Medium",
    Complexity.hard: "🔴 Hard",
}

app = typer.Typer(
    name="repo-pilot",
    help="GitHub 저장소에서 오픈소스 기여 기회를 찾아줍니다.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _check_repo_url(repo_url: str) -> None:
    """API 키 확인이나 네트워크 요청 전에 URL 형식을 검사한다."""
    try:
        parse_repo_url(repo_url)
    except InvalidRepositoryUrl as e:
        console.print(f"[red]오류 발생: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


def _gemini_client() -> genai.Client:
    """설정된 API 키로 Gemini 클라이언트를 만든다."""
    if not settings.gemini_api_key:
        console.print(
            "[red]GEMINI_API_KEY가 설정되지 않았습니다. "
            "환경변수나 .env 파일에 추가하세요.[/red]"
        )
        raise typer.Exit(1)
    return genai.Client(api_key=settings.gemini_api_key)


def _render_stats(analysis: RepoAnalysis) -> None:
    """4개의 통계 카드를 출력한다."""
    snapshot = analysis.snapshot
    cards = [
        ("⭐ Stars", snapshot.stars),
        ("🍴 Forks", snapshot.forks),
        ("🐛 Open Issues", snapshot.total_open_issues),
        ("👥 Contributors", snapshot.total_contributors),
    ]
    console.print(
        Columns(
            [
                Panel(f"[bold]{value:,}[/bold]", title=label, border_style="cyan")
                for label, value in cards
            ],
            equal=True,
            expand=True,
        )
    )


def _render_overview(analysis: RepoAnalysis) -> None:
    """언어 비율, 상위 기여자, 기여 가이드를 출력한다."""
    snapshot = analysis.snapshot

    languages = Table(title="언어", show_header=True, header_style="bold cyan")
    languages.add_column("언어", style="bold")
    languages.add_column("비율", justify="right", width=7)
    languages.add_column("", width=20)
    for lang in snapshot.languages_used:
        bar = "█" * max(1, round(lang.percentage / 5)) if lang.percentage else ""
        languages.add_row(lang.name, f"{lang.percentage:.1f}%", f"[blue]{bar}[/blue]")

    contributors = Table(title="상위 기여자", show_header=True, header_style="bold cyan")
    contributors.add_column("#", style="dim", width=3)
    contributors.add_column("기여자")
    for i, contributor in enumerate(snapshot.top_contributors, 1):
        contributors.add_row(
            str(i), f"[link={contributor.profile_url}]{contributor.login}[/link]"
        )

    console.print(Columns([languages, contributors], expand=True))

    if analysis.contribution_guidelines:
        steps = "\n".join(
            f"{i}. {step}" for i, step in enumerate(analysis.contribution_guidelines, 1)
        )
        console.print(
            Panel(Markdown(steps), title="📋 기여 가이드", border_style="green")
        )


def _render_suggestion(index: int, suggestion: Suggestion) -> None:
    tags = " ".join(f"[magenta]#{escape(tag)}[/magenta]" for tag in suggestion.tags)
    origin = (
        f"[dim]🔗 {suggestion.issue_url}[/dim]"
        if suggestion.is_issue
        else "[dim]💡 AI 제안 아이디어[/dim]"
    )
    console.print(
        Panel(
            f"{escape(suggestion.description)}\n\n{tags}\n{origin}",
            title=f"[bold]{index}. {escape(suggestion.title)}[/bold]",
            title_align="left",
            border_style="blue",
        )
    )


def _render_suggestions(analysis: RepoAnalysis, tab: Tab) -> None:
    """난이도 탭별 제안을 출력한다."""
    for complexity in Complexity:
        if tab is not Tab.all and tab.value != complexity.value.lower():
            continue

        bucket = analysis.suggestions.bucket(complexity)
        console.rule(f"[bold]{TAB_LABELS[complexity]} ({len(bucket)})[/bold]")
        if not bucket:
            console.print("[dim]이 난이도의 제안이 없습니다.[/dim]")
        for i, suggestion in enumerate(bucket, 1):
            _render_suggestion(i, suggestion)
        console.print()


def _render_dashboard(analysis: RepoAnalysis, tab: Tab = Tab.all) -> None:
    """분석 결과 대시보드를 출력한다."""
    snapshot = analysis.snapshot

    console.print()
    console.rule(f"[bold blue]🧭 {snapshot.repo_name}[/bold blue]")
    if snapshot.description:
        console.print(f"[dim]{escape(snapshot.description)}[/dim]", justify="center")
    console.print()

    _render_stats(analysis)
    _render_overview(analysis)
    console.print()
    _render_suggestions(analysis, tab)


def _render_detail(suggestion: Suggestion, detail: SuggestionDetail) -> None:
    """제안 상세 가이드를 출력한다."""
    steps = "\n".join(f"{i}. {step}" for i, step in enumerate(detail.how_to_start, 1))
    files = "\n".join(f"- `{path}`" for path in detail.files_to_edit)
    skills = ", ".join(detail.skills_needed)

    content = (
        f"## 시작하는 방법\n{steps}\n\n"
        f"## 수정할 파일\n{files}\n\n"
        f"## 필요한 기술\n{skills}\n\n"
        f"## 예상 소요 시간\n약 {detail.estimated_hours:g}시간"
    )
    if detail.sources:
        links = "\n".join(
            f"- [{source.title or source.uri}]({source.uri})" for source in detail.sources
        )
        content += f"\n\n## 참고 자료\n{links}"

    console.print(
        Panel(
            Markdown(content),
            title=f"[bold]{escape(suggestion.title)}[/bold]",
            border_style="green",
        )
    )


async def _analyze(repo_url: str, client: genai.Client) -> RepoAnalysis:
    """저장소 분석 파이프라인을 실행한다."""
    analyzer = RepoAnalyzer(
        source=GitHubRepositorySource(),
        generator=SuggestionGenerator(client),
    )
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("GitHub 데이터 수집 및 AI 분석 중...", total=None)
        return await analyzer.analyze(repo_url)


async def _explain(
    suggestion: Suggestion, repo_url: str, client: genai.Client
) -> SuggestionDetail:
    detailer = SuggestionDetailer(client)
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("상세 가이드 생성 중 (Google 검색 포함)...", total=None)
        return await detailer.explain(suggestion, repo_url)


@app.command()
def analyze(
    repo_url: Annotated[
        str,
        typer.Argument(help="GitHub 저장소 URL (예: https://github.com/axios/axios)"),
    ],
    tab: Annotated[
        Tab,
        typer.Option("--tab", "-t", help="표시할 난이도"),
    ] = Tab.all,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="진행 로그 출력"),
    ] = False,
) -> None:
    """저장소를 분석해 난이도별 기여 제안을 보여줍니다."""
    _configure_logging(verbose)
    _check_repo_url(repo_url)
    client = _gemini_client()
    try:
        analysis = asyncio.run(_analyze(repo_url, client))
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None
    except RateLimitExceeded as e:
        console.print(
            "[red]GitHub API 요청 한도를 초과했습니다. "
            f"{e.reset_time} 이후에 다시 시도하세요.[/red]"
        )
        raise typer.Exit(1) from e
    except Exception as e:
        console.print(f"[red]오류 발생: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    _render_dashboard(analysis, tab)


@app.command()
def detail(
    repo_url: Annotated[str, typer.Argument(help="GitHub 저장소 URL")],
    title: Annotated[str, typer.Option("--title", help="제안 제목")],
    description: Annotated[str, typer.Option("--description", help="제안 설명")],
    complexity: Annotated[
        Complexity,
        typer.Option("--complexity", "-c", case_sensitive=False, help="제안 난이도"),
    ] = Complexity.easy,
    issue_url: Annotated[
        str | None,
        typer.Option("--issue-url", help="원본 이슈 URL"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="진행 로그 출력"),
    ] = False,
) -> None:
    """제안 하나에 대한 상세 가이드를 보여줍니다."""
    _configure_logging(verbose)
    suggestion = Suggestion(
        title=title,
        description=description,
        complexity=complexity,
        issue_url=issue_url,
    )
    _check_repo_url(repo_url)
    client = _gemini_client()
    try:
        result = asyncio.run(_explain(suggestion, repo_url, client))
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None
    except Exception as e:
        console.print(f"[red]오류 발생: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    _render_detail(suggestion, result)


@app.command()
def example(
    tab: Annotated[
        Tab,
        typer.Option("--tab", "-t", help="표시할 난이도"),
    ] = Tab.all,
) -> None:
    """네트워크 요청 없이 예제 분석 결과를 보여줍니다."""
    console.print(
        Panel(
            f"[bold]🎬 데모 모드[/bold]: {DEMO_REPO_URL} 의 예제 분석 결과입니다. "
            "실제 API를 호출하지 않습니다.",
            border_style="yellow",
        )
    )
    _render_dashboard(DEMO_ANALYSIS, tab)
    console.print(
        "[yellow]직접 분석하려면:[/yellow] repo-pilot analyze <GitHub 저장소 URL>"
    )


if __name__ == "__main__":
    app()
