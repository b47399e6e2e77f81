"""Tests for serving the public asset directory."""

from pathlib import Path

from fastapi.testclient import TestClient

from exercise_tracker.api.app import create_app
from exercise_tracker.config import Settings
from exercise_tracker.containers import build_container


def test_public_dir_served_alongside_api(tmp_path: Path) -> None:
    (tmp_path / "index.html").write_text("<h1>Exercise Tracker</h1>")
    settings = Settings(public_dir=str(tmp_path))
    client = TestClient(create_app(build_container(settings)))

    page = client.get("/")
    users = client.get("/api/users")

    assert page.status_code == 200
    assert "Exercise Tracker" in page.text
    assert users.json() == []


def test_missing_public_dir_is_skipped(tmp_path: Path) -> None:
    settings = Settings(public_dir=str(tmp_path / "absent"))
    client = TestClient(create_app(build_container(settings)))

    assert client.get("/").status_code == 404
