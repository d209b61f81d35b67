"""Error mapping done by the handlers in app.main."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.main import app
from app.modules.posts.api import router as posts_router


@pytest.fixture
def lenient_client():
    # unhandled exceptions become responses instead of being re-raised in the test
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def test_database_failure_is_plain_500(client, make_user, headers_for, monkeypatch):
    def broken(db):
        raise OperationalError("SELECT 1", {}, Exception("database is gone"))

    monkeypatch.setattr(posts_router, "list_posts", broken)

    response = client.get("/api/post", headers=headers_for(make_user().id))

    assert response.status_code == 500
    assert response.text == "Server error"


def test_unexpected_error_is_plain_500(lenient_client, make_user, headers_for, monkeypatch):
    def broken(db):
        raise RuntimeError("boom")

    monkeypatch.setattr(posts_router, "list_posts", broken)

    response = lenient_client.get("/api/post", headers=headers_for(make_user().id))

    assert response.status_code == 500
    assert response.text == "Server error"


def test_malformed_json_is_400(client, make_user, headers_for):
    headers = {**headers_for(make_user().id), "Content-Type": "application/json"}

    response = client.post("/api/post", content="{not json", headers=headers)

    assert response.status_code == 400
    assert "errors" in response.json()


def test_root_reports_version(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "DevConnect API running"
