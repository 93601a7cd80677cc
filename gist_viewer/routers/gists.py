"""Gist list endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from gist_viewer.models.schemas import GistListView
from gist_viewer.presentation import build_view
from gist_viewer.services.controller import GistListController

router = APIRouter(prefix="/gists", tags=["Gists"])


async def get_controller() -> GistListController:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


@router.get(
    "",
    response_model=GistListView,
    summary="Get the gist list",
    description="Returns the current gist list state filtered by description.",
)
async def get_gists(
    filter: Annotated[str, Query(description="Case-insensitive description filter")] = "",
    controller: GistListController = Depends(get_controller),
) -> GistListView:
    """
    Get the gist list as last fetched.

    - **filter**: only gists whose description contains this text

    Filtering never triggers a new request to GitHub.
    """
    return build_view(controller, filter)


@router.post(
    "/refresh",
    response_model=GistListView,
    summary="Refetch the gist list",
    responses={
        200: {"description": "Fetch cycle finished (ready or errored)"},
    },
)
async def refresh_gists(
    filter: Annotated[str, Query(description="Case-insensitive description filter")] = "",
    controller: GistListController = Depends(get_controller),
) -> GistListView:
    """Run a new fetch cycle and return the resulting state."""
    await controller.refresh()
    return build_view(controller, filter)
