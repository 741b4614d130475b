"""Tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from campus.content.store import JsonDocumentStore
from campus.moderation.engine import ModerationEngine
from campus.moderation.models import RemoteClassification
from campus.security.audit_log import FlaggedContentLog
from web.backend.app.deps import get_document_store, get_flagged_log, get_moderation_engine
from web.backend.app.main import app

AUTH = {"X-User-Id": "user-42"}


@pytest.fixture
def remote(make_remote):
    return make_remote()


@pytest.fixture
def client(tmp_path, remote):
    store = JsonDocumentStore(tmp_path / "documents")
    flagged_log = FlaggedContentLog(tmp_path / "flagged")
    engine = ModerationEngine(remote=remote)

    app.dependency_overrides[get_moderation_engine] = lambda: engine
    app.dependency_overrides[get_flagged_log] = lambda: flagged_log
    app.dependency_overrides[get_document_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["name"] == "Campus Connect API"


# --- Moderation endpoints ---


def test_check_flags_keyword(client):
    resp = client.post("/api/moderation/check", json={"text": "you stupid idiot", "content_type": "comment"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["flagged"] is True
    assert body["method"] == "keyword-filter"
    assert body["ai_available"] is True


def test_check_clean_text(client, remote):
    resp = client.post("/api/moderation/check", json={"text": "See you in the lab"})
    body = resp.json()
    assert body == {"flagged": False, "reason": "", "method": "ai-moderation", "ai_available": True}
    assert remote.calls == ["See you in the lab"]


def test_check_strips_text(client, remote):
    resp = client.post("/api/moderation/check", json={"text": "  See you in the lab \n"})
    assert resp.json()["flagged"] is False
    assert remote.calls == ["See you in the lab"]


def test_check_out_of_scope_type(client, remote):
    resp = client.post("/api/moderation/check", json={"text": "you stupid idiot", "content_type": "message"})
    assert resp.json()["method"] == "no-moderation-needed"
    assert resp.json()["flagged"] is False
    assert remote.calls == []


def test_check_rejects_unknown_type(client):
    resp = client.post("/api/moderation/check", json={"text": "hi", "content_type": "poll"})
    assert resp.status_code == 422


def test_basic_check(client, remote):
    assert client.post("/api/moderation/basic-check", json={"text": "total moron"}).json()["flagged"]
    assert not client.post("/api/moderation/basic-check", json={"text": "See you there"}).json()["flagged"]
    assert remote.calls == []


# --- Content endpoints ---


def test_create_post(client):
    resp = client.post(
        "/api/posts",
        json={"community_id": "cs-101", "title": "Study group", "body": "Library, room 2"},
        headers=AUTH,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["type"] == "post"
    assert body["id"]
    assert body["document"]["author"]["_ref"] == "user-42"


def test_create_post_requires_user(client):
    resp = client.post("/api/posts", json={"community_id": "cs-101", "title": "Hello"})
    assert resp.status_code == 401


def test_blocked_comment_returns_422_and_is_listed(client):
    resp = client.post(
        "/api/comments",
        json={"post_id": "p-1", "content": "you stupid idiot"},
        headers=AUTH,
    )
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "CONTENT_BLOCKED"
    assert body["error"].startswith("Comment blocked: ")
    assert body["details"]["method"] == "keyword-filter"

    flagged = client.get("/api/moderation/flagged", params={"user": "user-42"}).json()
    assert len(flagged) == 1
    assert flagged[0]["type"] == "comment"
    assert flagged[0]["reason"].endswith("(via keyword-filter)")


def test_blocked_post_by_remote(client, remote):
    remote.result = RemoteClassification(flagged=True, categories=frozenset({"violence"}))
    resp = client.post(
        "/api/posts",
        json={"community_id": "cs-101", "title": "Friday", "body": "See everyone at the quad"},
        headers=AUTH,
    )
    assert resp.status_code == 422
    assert resp.json()["details"]["method"] == "openai-moderation"
    assert client.get("/api/moderation/flagged", params={"type": "post"}).json()[0]["user"] == "user-42"


def test_create_lightweight_content(client):
    resp = client.post(
        "/api/content",
        json={"content_type": "survey", "content": "Which lab slot works best?", "fields": {"options": ["A", "B"]}},
        headers=AUTH,
    )
    assert resp.status_code == 201
    assert resp.json()["document"]["options"] == ["A", "B"]

    blocked = client.post(
        "/api/content",
        json={"content_type": "message", "content": "you moron"},
        headers=AUTH,
    )
    assert blocked.status_code == 422
    assert blocked.json()["details"]["method"] == "basic-keyword-check"


def test_lightweight_endpoint_refuses_posts(client):
    resp = client.post("/api/content", json={"content_type": "post", "content": "hello"}, headers=AUTH)
    assert resp.status_code == 422
