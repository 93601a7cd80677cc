"""FastAPI application entry point."""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gist_viewer.config import get_settings
from gist_viewer.exceptions import FetchError, fetch_error_handler
from gist_viewer.routers import gists, health, page
from gist_viewer.services.controller import GistListController
from gist_viewer.services.github_client import GitHubClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

github_client: GitHubClient | None = None
controller: GistListController | None = None


def _log_fetch_failure(task: asyncio.Task) -> None:
    """Report errors the controller does not turn into the Errored state."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"Initial gist fetch failed: {exc!r}", exc_info=exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Opens the GitHub client and starts the initial fetch cycle in the
    background, so the page shows the loading state until it completes.
    """
    global github_client, controller

    settings = get_settings()
    logger.info(f"Starting {settings.app_name} for user {settings.username}")

    github_client = GitHubClient(settings)
    await github_client.start()

    controller = GistListController(
        github_client,
        username=settings.username,
        since_threshold=settings.since_threshold,
        limit=settings.page_limit,
        base_url=settings.github_api_base_url,
    )
    initial_fetch = asyncio.create_task(controller.refresh())
    initial_fetch.add_done_callback(_log_fetch_failure)

    logger.info("Services initialized successfully")

    yield

    logger.info("Shutting down services")
    if not initial_fetch.done():
        initial_fetch.cancel()
        try:
            await initial_fetch
        except asyncio.CancelledError:
            pass
    await github_client.close()


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Lists a GitHub user's recent public gists",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(FetchError, fetch_error_handler)

    async def get_github_client_dep():
        return github_client

    async def get_controller_dep():
        return controller

    app.dependency_overrides[gists.get_controller] = get_controller_dep
    app.dependency_overrides[page.get_controller] = get_controller_dep
    app.dependency_overrides[health.get_github_client] = get_github_client_dep
    app.dependency_overrides[health.get_controller] = get_controller_dep

    app.include_router(health.router)
    app.include_router(gists.router)
    app.include_router(page.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "gist_viewer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
