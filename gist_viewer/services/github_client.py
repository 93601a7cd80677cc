"""Async GitHub API client using httpx."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from gist_viewer.config import Settings
from gist_viewer.exceptions import HttpError, NetworkError, ParseError

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


def build_gists_url(
    username: str,
    limit: int = 100,
    since: str | None = None,
    base_url: str = GITHUB_API_URL,
) -> str:
    """
    Build the URL listing a user's public gists.

    The API returns at most 100 items per page; larger limits are capped
    server-side. With ``since`` only gists updated at or after that ISO 8601
    timestamp are returned.
    """
    url = f"{base_url.rstrip('/')}/users/{quote(username, safe='')}/gists?per_page={limit}"
    if since:
        url += f"&since={quote(since, safe='')}"
    return url


async def fetch_json(client: httpx.AsyncClient, url: str) -> Any:
    """
    GET ``url`` and decode the body as JSON.

    Raises:
        HttpError: The response status is not 2xx
        ParseError: The body is not valid JSON
        NetworkError: No response was received
    """
    try:
        response = await client.get(url)
    except httpx.RequestError as e:
        raise NetworkError(url, str(e) or type(e).__name__) from e

    if not response.is_success:
        raise HttpError(
            status_code=response.status_code,
            status_text=response.reason_phrase,
            url=url,
            body=response.text,
        )

    try:
        return response.json()
    except ValueError as e:
        raise ParseError(url, str(e)) from e


class GitHubClient:
    """Async client for the GitHub REST API."""

    def __init__(self, settings: Settings):
        self._base_url = settings.github_api_base_url
        self._timeout = settings.github_api_timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "GitHubClient":
        await self.start()
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def start(self) -> None:
        """Initialize the HTTP client."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
            timeout=self._timeout,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_json(self, url: str) -> Any:
        """Fetch ``url`` with the shared HTTP client, see :func:`fetch_json`."""
        if not self._client:
            raise RuntimeError("Client not initialized. Call start() first.")

        return await fetch_json(self._client, url)

    async def check_health(self) -> bool:
        """Check if GitHub API is reachable."""
        if not self._client:
            return False
        try:
            response = await self._client.get("/rate_limit")
            return response.status_code == 200
        except httpx.HTTPError:
            return False
