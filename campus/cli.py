"""Campus CLI: operator tooling for the Campus Connect moderation pipeline."""

import asyncio

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from campus import __version__

console = Console()


def _engine(offline: bool = False):
    from campus.moderation.engine import ModerationEngine
    from campus.settings import build_engine, build_moderation_config, get_settings

    settings = get_settings()
    if offline:
        return ModerationEngine(config=build_moderation_config(settings))
    return build_engine(settings)


def _flagged_log(data_dir: str | None):
    from pathlib import Path

    from campus.security.audit_log import FlaggedContentLog
    from campus.settings import get_settings

    base = Path(data_dir) if data_dir else get_settings().DATA_DIR
    return FlaggedContentLog(base / "flagged_content")


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Logging level (default: from settings)")
def main(log_level: str | None):
    """Campus Connect content moderation tools.

    Check texts against the moderation pipeline, run the regression
    battery, and inspect the flagged-content audit trail.
    """
    from campus.settings import get_settings
    from campus.utils.log import configure_logging

    configure_logging(log_level or get_settings().LOG_LEVEL)


# ── Check ────────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
@click.option(
    "--type", "content_type", default="post",
    type=click.Choice(["post", "comment", "eventComment", "marketplaceItem", "message", "survey", "event"]),
)
@click.option("--offline", is_flag=True, help="Skip the remote moderation stage")
def check(text: str, content_type: str, offline: bool):
    """Run the full moderation pipeline against TEXT."""
    engine = _engine(offline)
    verdict = asyncio.run(engine.run_all_moderation_checks(text, content_type))

    status = "[red]FLAGGED[/]" if verdict.flagged else "[green]OK[/]"
    lines = [
        f"Status: {status}",
        f"Method: {verdict.method.value}",
        f"AI available: {'yes' if verdict.ai_available else 'no'}",
    ]
    if verdict.reason:
        lines.append(f"Reason: {verdict.reason}")
    console.print(Panel("\n".join(lines), title="Moderation Verdict"))


@main.command(name="basic-check")
@click.argument("text")
def basic_check(text: str):
    """Run only the lightweight local check against TEXT."""
    result = _engine(offline=True).basic_keyword_check(text)
    if result.flagged:
        console.print(f"[red]FLAGGED[/] {result.reason}")
    else:
        console.print("[green]OK[/]")


# ── Self-test ────────────────────────────────────────────────────────


@main.command()
@click.option("--offline", is_flag=True, help="Skip the remote moderation stage")
def selftest(offline: bool):
    """Run the moderation regression battery and print a report."""
    from campus.moderation.harness import print_moderation_test_results, run_moderation_tests

    console.print("\n[bold blue]Campus[/] Running content moderation tests\n")
    results = asyncio.run(run_moderation_tests(_engine(offline)))
    summary = print_moderation_test_results(results, console)
    if not summary.all_passed:
        raise SystemExit(1)


@main.command()
def coverage():
    """Show which moderation tier each content type receives."""
    from campus.moderation.harness import verify_content_type_coverage

    verify_content_type_coverage(console)


# ── Flagged content ──────────────────────────────────────────────────


@main.group()
def flagged():
    """Inspect the flagged-content audit trail."""


@flagged.command(name="list")
@click.option("--user", "-u", default=None, help="Filter by user id")
@click.option("--type", "content_type", default=None, help="Filter by content type")
@click.option("--limit", "-n", default=50, show_default=True)
@click.option("--data-dir", "-d", default=None, help="Data directory (default: from settings)")
def list_flagged(user: str | None, content_type: str | None, limit: int, data_dir: str | None):
    """List flagged content, newest first."""
    records = _flagged_log(data_dir).get_records(user=user, content_type=content_type, limit=limit)

    if not records:
        console.print("[yellow]No flagged content.[/]")
        return

    table = Table(title=f"Flagged Content ({len(records)} records)")
    table.add_column("When", style="dim")
    table.add_column("User", style="cyan")
    table.add_column("Type")
    table.add_column("Reason")
    table.add_column("Content")

    for r in records:
        table.add_row(r.created_at[:19], r.user, r.type, r.reason, r.content[:40])

    console.print(table)


@flagged.command(name="export")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "csv"]))
@click.option("--user", "-u", default=None, help="Filter by user id")
@click.option("--type", "content_type", default=None, help="Filter by content type")
@click.option("--data-dir", "-d", default=None, help="Data directory (default: from settings)")
def export_flagged(fmt: str, user: str | None, content_type: str | None, data_dir: str | None):
    """Export flagged content as JSON or CSV to stdout."""
    click.echo(_flagged_log(data_dir).export_records(fmt, user=user, content_type=content_type))


if __name__ == "__main__":
    main()
