"""Pytest configuration for intake tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def intake_paths(settings, tmp_path: Path) -> dict[str, Path]:
    """Point the submission store and uploads root at a per-test directory."""
    settings.SUBMISSIONS_FILE = tmp_path / "data" / "submissions.json"
    settings.UPLOADS_ROOT = tmp_path / "uploads"
    return {"store": settings.SUBMISSIONS_FILE, "uploads": settings.UPLOADS_ROOT}


@pytest.fixture
def mail_credentials(settings) -> None:
    """Configure relay credentials so notifications can be sent."""
    settings.GMAIL_USER = "shop@example.com"
    settings.GMAIL_PASS = "app-password"  # noqa: S105
