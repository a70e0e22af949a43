import threading
from typing import Any, Callable
from urllib.parse import quote

import requests
from pydantic import TypeAdapter

from schemas import Commit, Repository
from .config import config
import logging

logger = logging.getLogger(__name__)

_repositories_adapter = TypeAdapter(list[Repository])
_commits_adapter = TypeAdapter(list[Commit])


def new_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({"Accept": "application/vnd.github+json"})
    return session


class GitHubClient:
    def __init__(
        self,
        user: str | None = None,
        api_url: str | None = None,
        timeout: float | None = None,
        session_factory: Callable[[], requests.Session] = new_session,
    ):
        self.user = user or config.GITHUB_USER
        self.api_url = (api_url or config.GITHUB_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.session_factory = session_factory
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self.session_factory()
            self._local.session = session
        return session

    def repositories_url(self) -> str:
        return f"{self.api_url}/users/{quote(self.user, safe='')}/repos"

    def commits_url(self, repository_name: str) -> str:
        return (
            f"{self.api_url}/repos/{quote(self.user, safe='')}/"
            f"{quote(repository_name, safe='')}/commits"
        )

    def _get_json(self, url: str) -> Any:
        logger.debug("GET %s", url)
        response = self.session.get(url, timeout=self.timeout)

        remaining = response.headers.get("X-RateLimit-Remaining", "unknown")
        total = response.headers.get("X-RateLimit-Limit", "unknown")
        logger.debug("Rate Limit: %s/%s", remaining, total)

        response.raise_for_status()
        return response.json()

    def get_repositories(self) -> list[Repository]:
        data = self._get_json(self.repositories_url())
        repositories = _repositories_adapter.validate_python(data)
        logger.info(
            "Fetched %d repositories for user=%s", len(repositories), self.user
        )
        return repositories

    def get_commits(self, repository_name: str) -> list[Commit]:
        data = self._get_json(self.commits_url(repository_name))
        commits = _commits_adapter.validate_python(data)
        logger.info(
            "Fetched %d commits for %s/%s", len(commits), self.user, repository_name
        )
        return commits
