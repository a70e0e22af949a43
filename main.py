import logging

import requests
import uvicorn
from fastapi import FastAPI, Response
from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import ValidationError

from utils import TEMPLATES_DIR
from utils.config import config
from utils.github import GitHubClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)
github_client = GitHubClient()
app = FastAPI(title="Repository Browser")
env_template = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(enabled_extensions=("html", "html.j2")),
)

FETCH_ERRORS = (requests.exceptions.RequestException, ValidationError, ValueError)


def log_error(message: str, url: str, exc: Exception | None = None) -> None:
    if exc is not None:
        logger.error("%s | url=%s", message, url, exc_info=exc)
    else:
        logger.error("%s | url=%s", message, url)


def load_repositories() -> str | None:
    """Fetch the configured user's repositories and render them as a list.

    Returns ``None`` when the request fails or the body is not a list of
    repositories, so the caller leaves the display region untouched.
    """
    url = github_client.repositories_url()
    try:
        repositories = github_client.get_repositories()
    except FETCH_ERRORS as e:
        log_error("Failed to load repositories", url, e)
        return None

    template = env_template.get_template("repositories.html.j2")
    return template.render(repositories=repositories)


def load_commits(repository_name: str) -> str | None:
    """Fetch and render the commit history of one repository."""
    url = github_client.commits_url(repository_name)
    try:
        commits = github_client.get_commits(repository_name)
    except FETCH_ERRORS as e:
        log_error(f"Failed to load commits for '{repository_name}'", url, e)
        return None

    template = env_template.get_template("commits.html.j2")
    return template.render(commits=commits)


def fragment_response(fragment: str | None) -> Response:
    # htmx skips the swap on 204
    if fragment is None:
        return Response(status_code=204)
    return HTMLResponse(fragment)


@app.get("/", response_class=HTMLResponse)
def index():
    template = env_template.get_template("index.html.j2")
    return template.render(user=github_client.user)


@app.get("/repositories", response_class=HTMLResponse)
def repositories():
    return fragment_response(load_repositories())


@app.get("/repositories/{repository_name}/commits", response_class=HTMLResponse)
def commits(repository_name: str):
    return fragment_response(load_commits(repository_name))


@app.get("/health")
async def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    logger.info(
        "Serving repositories of %s from %s",
        config.GITHUB_USER,
        config.GITHUB_API_URL,
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)
