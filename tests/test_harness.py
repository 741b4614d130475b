"""Tests for the moderation regression battery."""

import pytest
from rich.console import Console

from campus.moderation.engine import ModerationEngine
from campus.moderation.harness import (
    TEST_FIXTURES,
    ModerationFixture,
    print_moderation_test_results,
    run_moderation_tests,
    summarize,
    verify_content_type_coverage,
)
from campus.moderation.models import ContentType


def _quiet_console() -> Console:
    return Console(record=True, width=120)


@pytest.mark.anyio
async def test_all_fixtures_pass_with_clean_remote(fake_remote):
    results = await run_moderation_tests(ModerationEngine(remote=fake_remote))
    assert len(results) == len(TEST_FIXTURES) == 6
    assert all(r.passed for r in results), [r for r in results if not r.passed]

    summary = summarize(results)
    assert summary.all_passed
    assert summary.success_rate == 100.0


@pytest.mark.anyio
async def test_all_fixtures_pass_offline():
    results = await run_moderation_tests(ModerationEngine())
    assert summarize(results).all_passed
    assert {r.method for r in results if not r.expected_flagged} == {"basic-moderation"}


@pytest.mark.anyio
async def test_failure_is_reported(fake_remote):
    fixtures = (ModerationFixture("Should flag", "Lovely weather for the picnic", True),)
    results = await run_moderation_tests(ModerationEngine(remote=fake_remote), fixtures)
    assert not results[0].passed

    console = _quiet_console()
    summary = print_moderation_test_results(results, console)
    assert summary.passed == 0
    assert summary.success_rate == 0.0
    assert "Some tests failed" in console.export_text()


@pytest.mark.anyio
async def test_print_results_renders_table(fake_remote):
    results = await run_moderation_tests(ModerationEngine(remote=fake_remote))
    console = _quiet_console()
    summary = print_moderation_test_results(results, console)

    text = console.export_text()
    assert "Moderation Test Results" in text
    assert "Passed: 6/6 tests" in text
    assert "Success Rate: 100.0%" in text
    assert summary.total == 6


def test_summary_of_nothing():
    summary = summarize([])
    assert summary.total == 0
    assert summary.success_rate == 0.0


def test_content_type_coverage():
    console = _quiet_console()
    coverage = verify_content_type_coverage(console)

    assert set(coverage) == {t.value for t in ContentType}
    assert coverage["post"] == coverage["comment"] == "full (AI)"
    for name in ("eventComment", "marketplaceItem", "message", "survey", "event"):
        assert coverage[name] == "keyword check"
    assert "Content Type Moderation Coverage" in console.export_text()
