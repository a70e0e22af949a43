"""
Shared fixtures for the repository browser tests.

GitHub is never contacted: the client's session is replaced with a mock
that hands back real ``requests.Response`` objects built from fixture data.
"""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

import main
from utils.github import GitHubClient

API_URL = "https://api.github.com"
USER = "octocat"


def make_response(
    body: Any = None, status_code: int = 200, raw: bytes | None = None
) -> requests.Response:
    """Build a ``requests.Response`` carrying a JSON body (or raw bytes)."""
    response = requests.Response()
    response.status_code = status_code
    response._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json; charset=utf-8"
    response.url = API_URL
    response.reason = "OK" if status_code < 400 else "Error"
    return response


@pytest.fixture
def github_client(monkeypatch: pytest.MonkeyPatch) -> GitHubClient:
    """A client for ``octocat`` whose session is a mock, installed into ``main``."""
    session = MagicMock()
    client = GitHubClient(
        user=USER, api_url=API_URL, timeout=5, session_factory=lambda: session
    )
    monkeypatch.setattr(main, "github_client", client)
    return client


@pytest.fixture
def http_client() -> TestClient:
    return TestClient(main.app)


@pytest.fixture
def sample_repositories() -> list[dict[str, Any]]:
    return [
        {"id": 1, "name": "a", "full_name": "octocat/a", "private": False},
        {"id": 2, "name": "b", "full_name": "octocat/b", "private": False},
    ]


@pytest.fixture
def sample_commits() -> list[dict[str, Any]]:
    return [
        {
            "sha": "7fd1a60b01f91b314f59955a4e4d4e80d8edf11d",
            "author": {"login": "alice", "id": 42},
            "commit": {
                "message": "fix bug",
                "author": {"name": "Alice", "email": "alice@example.com"},
            },
        }
    ]
