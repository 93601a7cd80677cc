"""Health check endpoints."""

from fastapi import APIRouter, Depends

from gist_viewer.models.schemas import HealthResponse
from gist_viewer.services.controller import Errored, GistListController, Loading
from gist_viewer.services.github_client import GitHubClient

router = APIRouter(tags=["Health"])


async def get_github_client() -> GitHubClient:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


async def get_controller() -> GistListController:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


def _gists_status(controller: GistListController) -> str:
    if isinstance(controller.state, Loading):
        return "loading"
    if isinstance(controller.state, Errored):
        return "errored"
    return "ready"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check(
    github_client: GitHubClient = Depends(get_github_client),
    controller: GistListController = Depends(get_controller),
) -> HealthResponse:
    """
    Check the health of the service.

    Verifies:
    - Service is running
    - GitHub API is reachable
    - Last fetch cycle did not fail
    """
    github_healthy = await github_client.check_health()
    gists_status = _gists_status(controller)

    return HealthResponse(
        status="healthy" if github_healthy and gists_status != "errored" else "degraded",
        version="1.0.0",
        github_api_reachable=github_healthy,
        gists_status=gists_status,
    )


@router.get(
    "/health/live",
    summary="Liveness probe",
    description="Simple liveness check for container orchestration",
)
async def liveness():
    """Simple liveness check - returns 200 if service is running."""
    return {"status": "alive"}


@router.get(
    "/health/ready",
    summary="Readiness probe",
)
async def readiness(
    github_client: GitHubClient = Depends(get_github_client),
    controller: GistListController = Depends(get_controller),
):
    """Readiness check - GitHub reachable and a gist list to show."""
    gists_status = _gists_status(controller)
    if not await github_client.check_health():
        return {
            "status": "not_ready",
            "reason": "GitHub API unreachable",
            "gists_status": gists_status,
        }
    if gists_status != "ready":
        return {
            "status": "not_ready",
            "reason": f"Gist list is {gists_status}",
            "gists_status": gists_status,
        }
    return {"status": "ready", "gists_status": gists_status}
