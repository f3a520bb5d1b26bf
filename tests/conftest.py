"""Test configuration and fixtures for juck."""

import json
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

THREATCROWD_PAYLOAD = {
    "response_code": "1",
    "subdomains": ["mail.example.com", "dev.example.com"],
}

CRTSH_PAYLOAD = [
    {"issuer_name": "C=US, O=Let's Encrypt", "name_value": "a.example.com\nb.example.com"},
    {"issuer_name": "C=US, O=Let's Encrypt", "name_value": "mail.example.com"},
]

URLSCAN_PAYLOAD = {
    "results": [
        {"page": {"domain": "shop.example.com", "ip": "1.2.3.4"}},
        {"page": {"domain": "a.example.com"}},
    ],
    "total": 2,
}


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep tests away from the user's config, .env and working directory."""
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(workdir)
    for key in (
        "JUCK_REQUEST_TIMEOUT",
        "JUCK_SCAN_TIMEOUT",
        "JUCK_USER_AGENT",
        "JUCK_REQUIRE_ALL_SOURCES",
        "JUCK_DEDUPE",
        "JUCK_VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
    return workdir


@pytest.fixture
def threatcrowd_body() -> bytes:
    return json.dumps(THREATCROWD_PAYLOAD).encode()


@pytest.fixture
def crtsh_body() -> bytes:
    return json.dumps(CRTSH_PAYLOAD).encode()


@pytest.fixture
def urlscan_body() -> bytes:
    return json.dumps(URLSCAN_PAYLOAD).encode()
