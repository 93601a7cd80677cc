"""HTML page for the gist list."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from gist_viewer.config import Settings, get_settings
from gist_viewer.presentation import build_view, render_page
from gist_viewer.services.controller import GistListController

router = APIRouter(tags=["Page"])


async def get_controller() -> GistListController:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


@router.get("/", response_class=HTMLResponse, summary="Gist list page")
async def index(
    filter: str = "",
    controller: GistListController = Depends(get_controller),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    return HTMLResponse(render_page(build_view(controller, filter), settings))


@router.post("/refresh", summary="Refetch and show the page")
async def refresh(
    controller: GistListController = Depends(get_controller),
) -> RedirectResponse:
    await controller.refresh()
    return RedirectResponse("/", status_code=303)
