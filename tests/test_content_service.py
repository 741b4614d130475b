"""Tests for content creation behind the moderation gate."""

import logging

import pytest

from campus.content.service import ContentService
from campus.content.store import JsonDocumentStore
from campus.errors import ContentBlockedError
from campus.moderation.engine import KEYWORD_REASON, ModerationEngine
from campus.moderation.models import RemoteClassification
from campus.security.audit_log import FlaggedContentLog


@pytest.fixture
def store(tmp_path):
    return JsonDocumentStore(tmp_path / "documents")


@pytest.fixture
def flagged_log(tmp_path):
    return FlaggedContentLog(tmp_path / "flagged")


def _service(store, flagged_log, remote=None):
    return ContentService(ModerationEngine(remote=remote), store, flagged_log)


# --- Comments ---


@pytest.mark.anyio
async def test_flagged_comment_is_recorded_and_not_stored(store, flagged_log, fake_remote):
    service = _service(store, flagged_log, fake_remote)
    with pytest.raises(ContentBlockedError) as excinfo:
        await service.create_comment("user-1", "post-1", "  you stupid idiot  ")

    err = excinfo.value
    assert err.status_code == 422
    assert err.code == "CONTENT_BLOCKED"
    assert err.reason == f"Comment blocked: {KEYWORD_REASON}"
    assert err.method == "keyword-filter"

    records = flagged_log.get_records()
    assert len(records) == 1
    assert records[0].content == "you stupid idiot"
    assert records[0].type == "comment"
    assert records[0].user == "user-1"
    assert records[0].reason == f"{KEYWORD_REASON} (via keyword-filter)"
    assert store.fetch("comment") == []


@pytest.mark.anyio
async def test_clean_comment_is_stored(store, flagged_log, fake_remote):
    service = _service(store, flagged_log, fake_remote)
    doc = await service.create_comment("user-1", "post-1", "Great notes, thanks!", parent_comment_id="c-9")

    assert doc["_type"] == "comment"
    assert doc["author"] == {"_type": "reference", "_ref": "user-1"}
    assert doc["post"]["_ref"] == "post-1"
    assert doc["parentComment"]["_ref"] == "c-9"
    assert store.get("comment", doc["_id"]) == doc
    assert flagged_log.get_records() == []


@pytest.mark.anyio
async def test_top_level_comment_has_no_parent(store, flagged_log, fake_remote):
    doc = await _service(store, flagged_log, fake_remote).create_comment("u", "p", "Nice post")
    assert "parentComment" not in doc


# --- Posts ---


@pytest.mark.anyio
async def test_post_moderates_title_and_body_together(store, flagged_log, fake_remote):
    service = _service(store, flagged_log, fake_remote)
    doc = await service.create_post("user-1", "cs-101", " Study group ", " Meet at the library at 6. ")

    assert fake_remote.calls == ["Study group Meet at the library at 6."]
    assert doc["title"] == "Study group"
    assert doc["content"] == "Meet at the library at 6."
    assert doc["subreddit"]["_ref"] == "cs-101"
    assert doc["upvotes"] == 0 and doc["downvotes"] == 0
    assert "image" not in doc


@pytest.mark.anyio
async def test_post_flagged_by_remote(store, flagged_log, make_remote):
    remote = make_remote(result=RemoteClassification(flagged=True, categories=frozenset({"hate"})))
    service = _service(store, flagged_log, remote)

    with pytest.raises(ContentBlockedError) as excinfo:
        await service.create_post("user-2", "cs-101", "Heads up", "Those people ruin everything")

    assert excinfo.value.reason.startswith("Your post was blocked for inappropriate content. Reason: ")
    assert excinfo.value.method == "openai-moderation"
    record = flagged_log.get_records()[0]
    assert record.content == "Title: Heads up\nContent: Those people ruin everything"
    assert record.reason.endswith("(via openai-moderation)")
    assert store.fetch("post") == []


@pytest.mark.anyio
async def test_degraded_mode_stores_and_warns(store, flagged_log, make_remote, caplog):
    service = _service(store, flagged_log, make_remote(error=RuntimeError("boom")))
    with caplog.at_level(logging.WARNING, logger="campus.content.service"):
        doc = await service.create_post("user-3", "cs-101", "Exam tips", "Review the lecture slides twice.")

    assert doc["_id"]
    assert "basic moderation only" in caplog.text
    assert "user-3" in caplog.text


# --- Lightweight content ---


def test_lightweight_message_flagged(store, flagged_log):
    service = _service(store, flagged_log)
    with pytest.raises(ContentBlockedError) as excinfo:
        service.create_lightweight("message", "user-4", "you are a moron")

    assert excinfo.value.reason == KEYWORD_REASON
    assert excinfo.value.method == "basic-keyword-check"
    record = flagged_log.get_records()[0]
    assert record.type == "message"
    assert record.reason == f"{KEYWORD_REASON} (via basic-keyword-check)"
    assert store.fetch("message") == []


def test_lightweight_listing_stored_with_fields(store, flagged_log):
    service = _service(store, flagged_log)
    doc = service.create_lightweight(
        "marketplaceItem",
        "user-5",
        "Selling a used calculus textbook",
        fields={"price": 20, "_type": "post", "author": "someone-else"},
    )
    assert doc["_type"] == "marketplaceItem"
    assert doc["price"] == 20
    assert doc["author"]["_ref"] == "user-5"


@pytest.mark.parametrize("content_type", ["post", "comment"])
def test_lightweight_refuses_fully_moderated_types(store, flagged_log, content_type):
    with pytest.raises(ValueError):
        _service(store, flagged_log).create_lightweight(content_type, "u", "hello")


def test_lightweight_rejects_unknown_type(store, flagged_log):
    with pytest.raises(ValueError):
        _service(store, flagged_log).create_lightweight("poll", "u", "hello")
