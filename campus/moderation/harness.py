"""Moderation regression battery.

A fixed set of texts with the outcome the policy must produce. Run it from
the CLI (``campus selftest``) against a live engine, or from the test
suite against an engine with a fake remote classifier.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from campus.moderation.engine import ModerationEngine
from campus.moderation.models import ContentType


@dataclass(frozen=True)
class ModerationFixture:
    """One text and the outcome expected for it."""

    label: str
    text: str
    expected_flagged: bool
    content_type: ContentType = ContentType.post


@dataclass
class ModerationTestResult:
    """Outcome of running one fixture."""

    content_type: str
    test_content: str
    expected_flagged: bool
    actual_flagged: bool
    passed: bool
    reason: str = ""
    method: str = ""
    ai_available: bool = False


@dataclass(frozen=True)
class HarnessSummary:
    passed: int
    total: int

    @property
    def success_rate(self) -> float:
        """Percentage of fixtures that behaved as expected."""
        return (self.passed / self.total) * 100 if self.total else 0.0

    @property
    def all_passed(self) -> bool:
        return self.passed == self.total


TEST_FIXTURES: tuple[ModerationFixture, ...] = (
    ModerationFixture(
        "Explicit Hate Speech",
        "I hate all people of that race, they should be eliminated.",
        True,
    ),
    ModerationFixture(
        "Violence",
        "I'm going to kill you and your family tonight.",
        True,
    ),
    ModerationFixture(
        "Profanity",
        "This is a fucking terrible post with lots of curse words.",
        True,
    ),
    ModerationFixture(
        "Harassment",
        "You're such a stupid idiot, I hope you die alone.",
        True,
    ),
    ModerationFixture(
        "Normal Post",
        "Hello everyone! I'm excited to share this interesting article about climate change.",
        False,
    ),
    ModerationFixture(
        "Academic Discussion",
        "The research methodology employed in this study demonstrates significant "
        "statistical validity when considering the sample size and confidence intervals.",
        False,
    ),
)

# Content kinds and the moderation tier each one receives.
CONTENT_TYPES_WITH_MODERATION: tuple[ContentType, ...] = (
    ContentType.post,
    ContentType.comment,
    ContentType.event_comment,
    ContentType.marketplace_item,
    ContentType.message,
    ContentType.survey,
    ContentType.event,
)


async def run_moderation_tests(
    engine: ModerationEngine,
    fixtures: tuple[ModerationFixture, ...] = TEST_FIXTURES,
) -> list[ModerationTestResult]:
    """Run every fixture through *engine* and collect the results."""
    results: list[ModerationTestResult] = []
    for fixture in fixtures:
        verdict = await engine.run_all_moderation_checks(fixture.text, fixture.content_type)
        results.append(
            ModerationTestResult(
                content_type=fixture.label,
                test_content=fixture.text,
                expected_flagged=fixture.expected_flagged,
                actual_flagged=verdict.flagged,
                passed=verdict.flagged == fixture.expected_flagged,
                reason=verdict.reason,
                method=verdict.method.value,
                ai_available=verdict.ai_available,
            )
        )
    return results


def summarize(results: list[ModerationTestResult]) -> HarnessSummary:
    return HarnessSummary(passed=sum(1 for r in results if r.passed), total=len(results))


def print_moderation_test_results(
    results: list[ModerationTestResult],
    console: Optional[Console] = None,
) -> HarnessSummary:
    """Render a results table and summary panel; return the summary."""
    console = console or Console()

    table = Table(title="Moderation Test Results")
    table.add_column("#", style="dim", width=3)
    table.add_column("Status", justify="center")
    table.add_column("Case", style="cyan")
    table.add_column("Content")
    table.add_column("Expected")
    table.add_column("Actual")
    table.add_column("Method", style="dim")

    for i, r in enumerate(results, 1):
        status = "[green]PASS[/]" if r.passed else "[red]FAIL[/]"
        snippet = r.test_content[:50] + ("..." if len(r.test_content) > 50 else "")
        table.add_row(
            str(i),
            status,
            r.content_type,
            snippet,
            "FLAGGED" if r.expected_flagged else "PASS",
            "FLAGGED" if r.actual_flagged else "PASS",
            r.method,
        )
    console.print(table)

    summary = summarize(results)
    lines = [
        f"Passed: {summary.passed}/{summary.total} tests",
        f"Success Rate: {summary.success_rate:.1f}%",
    ]
    if summary.all_passed:
        lines.append("[green]All moderation tests passed.[/]")
    else:
        lines.append("[yellow]Some tests failed. Review the results above.[/]")
    console.print(Panel("\n".join(lines), title="Summary"))
    return summary


def verify_content_type_coverage(console: Optional[Console] = None) -> dict[str, str]:
    """Print and return the moderation tier for every content kind."""
    console = console or Console()
    coverage = {
        t.value: "full (AI)" if t.full_moderation else "keyword check"
        for t in CONTENT_TYPES_WITH_MODERATION
    }

    table = Table(title="Content Type Moderation Coverage")
    table.add_column("Content type", style="cyan")
    table.add_column("Tier")
    for name, tier in coverage.items():
        style = "green" if tier.startswith("full") else "yellow"
        table.add_row(name, f"[{style}]{tier}[/]")
    console.print(table)
    return coverage
