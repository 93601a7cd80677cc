"""Shared test fixtures and sample data."""

import json

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from unittest.mock import AsyncMock

from gist_viewer.config import Settings, get_settings
from gist_viewer.main import app
from gist_viewer.routers import gists, health, page
from gist_viewer.services.controller import GistListController
from gist_viewer.services.github_client import GitHubClient

# Sample test data matching the GitHub list gists response
SAMPLE_GIST_DATA = {
    "id": "6cad326836d38bd3a7ae",
    "url": "https://api.github.com/gists/6cad326836d38bd3a7ae",
    "html_url": "https://gist.github.com/octocat/6cad326836d38bd3a7ae",
    "description": "Hello world!",
    "public": True,
    "created_at": "2014-10-01T16:19:34Z",
    "updated_at": "2025-12-23T23:51:45Z",
    "comments": 291,
    "truncated": False,
    "files": {
        "hello_world.rb": {
            "filename": "hello_world.rb",
            "type": "application/x-ruby",
            "language": "Ruby",
            "raw_url": "https://gist.githubusercontent.com/octocat/6cad326836d38bd3a7ae/raw/hello_world.rb",
            "size": 175,
        }
    },
    "owner": {
        "login": "octocat",
        "id": 583231,
        "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
        "html_url": "https://github.com/octocat",
    },
}

SCENARIO_GISTS = [
    {
        "id": "1",
        "description": "Foo Bar",
        "html_url": "https://gist.github.com/octocat/1",
        "files": {"foo.py": {"filename": "foo.py"}, "bar.py": {"filename": "bar.py"}},
        "created_at": "2022-06-01T00:00:00Z",
        "updated_at": "2023-01-02T00:00:00Z",
    },
    {
        "id": "2",
        "description": "Baz",
        "html_url": "https://gist.github.com/octocat/2",
        "files": {"baz.md": {"filename": "baz.md"}},
        "created_at": "2022-07-01T00:00:00Z",
        "updated_at": "2023-05-01T00:00:00Z",
    },
]


@pytest.fixture
def settings():
    """Test settings."""
    return Settings(
        username="octocat",
        github_api_timeout=5.0,
    )


@pytest.fixture
def sample_gist_data():
    """Sample gist data for testing."""
    return SAMPLE_GIST_DATA


@pytest.fixture
def scenario_gists():
    """Two gists returned oldest first."""
    return json.loads(json.dumps(SCENARIO_GISTS))


@pytest.fixture
def mock_github_client(scenario_gists):
    """Mocked GitHub client."""
    mock_client = AsyncMock(spec=GitHubClient)
    mock_client.fetch_json.return_value = scenario_gists
    mock_client.check_health.return_value = True
    return mock_client


@pytest_asyncio.fixture
async def controller(mock_github_client, settings):
    """Controller that has completed one fetch cycle."""
    controller = GistListController(
        mock_github_client,
        username=settings.username,
        since_threshold=settings.since_threshold,
    )
    await controller.refresh()
    return controller


@pytest_asyncio.fixture
async def test_client(mock_github_client, controller, settings):
    """AsyncClient for testing with mocked dependencies."""
    app.dependency_overrides[gists.get_controller] = lambda: controller
    app.dependency_overrides[page.get_controller] = lambda: controller
    app.dependency_overrides[health.get_github_client] = lambda: mock_github_client
    app.dependency_overrides[health.get_controller] = lambda: controller
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
